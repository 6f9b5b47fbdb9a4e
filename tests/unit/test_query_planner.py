"""候補クエリ生成のテスト"""

import pytest

from weather_lookup.features.resolution.domain.models import CandidateQuery
from weather_lookup.features.resolution.services.query_planner import (
    iter_candidate_queries,
    plan,
    split_city,
    strip_filler_words,
)


def _pairs(raw_input: str) -> list[tuple[str, str]]:
    return [(query.query_string, query.language_hint) for query in plan(raw_input)]


def test_plan_latin_single_candidate() -> None:
    """大文字小文字だけの違いは別クエリにしない"""
    assert _pairs("Tokyo") == [("Tokyo", "en")]


def test_plan_latin_collapses_whitespace() -> None:
    assert _pairs("  New   York ") == [("New York", "en")]


def test_plan_latin_with_country_suffix() -> None:
    """都市名のみを先に試し、国名付きの入力は最後に試す"""
    assert _pairs("Paris, France") == [("Paris", "en"), ("Paris, France", "en")]


def test_plan_arabic_without_normalization_change() -> None:
    assert _pairs("عمان") == [("عمان", "ar"), ("عمان", "en")]


def test_plan_arabic_with_diacritics() -> None:
    """正規化で変わる場合は正規化版も各言語で試す"""
    assert _pairs("عمّان") == [
        ("عمّان", "ar"),
        ("عمان", "ar"),
        ("عمّان", "en"),
        ("عمان", "en"),
    ]


def test_plan_arabic_with_filler_word() -> None:
    """前置詞を除いた候補は最後に両言語で試す"""
    assert _pairs("في القاهرة") == [
        ("في القاهرة", "ar"),
        ("في القاهره", "ar"),
        ("في القاهرة", "en"),
        ("في القاهره", "en"),
        ("القاهرة", "ar"),
        ("القاهرة", "en"),
    ]


def test_plan_arabic_with_country_suffix() -> None:
    """アラビア語のカンマでも都市名と国名を分割する"""
    assert _pairs("عمان، الأردن") == [
        ("عمان", "ar"),
        ("عمان", "en"),
        ("عمان، الأردن", "ar"),
        ("عمان، الأردن", "en"),
    ]


@pytest.mark.parametrize("raw_input", ["", "   ", ", Jordan", "،"])
def test_plan_empty_city(raw_input: str) -> None:
    assert plan(raw_input) == []


def test_plan_non_string() -> None:
    assert plan(None) == []


@pytest.mark.parametrize(
    "raw_input",
    [
        "Tokyo",
        "Paris, France",
        "عمّان",
        "في عمّان",
        "عمّان من",
        "عمّان، الأردن",
        "إلى الإسكندرية, مصر",
        "عمان عمان",
    ],
)
def test_plan_never_repeats_a_query(raw_input: str) -> None:
    queries = plan(raw_input)
    assert len(queries) == len(set(queries))


def test_iter_candidate_queries_is_lazy() -> None:
    """先頭の候補だけを取り出せる"""
    queries = iter_candidate_queries("عمّان")
    assert next(queries) == CandidateQuery("عمّان", "ar")


@pytest.mark.parametrize(
    "raw_input,expected",
    [
        ("Amman", ("Amman", "Amman")),
        (" Amman ,  Jordan ", ("Amman", "Amman , Jordan")),
        ("عمان، الأردن", ("عمان", "عمان، الأردن")),
        ("Irbid, Jordan, Asia", ("Irbid", "Irbid, Jordan, Asia")),
    ],
)
def test_split_city(raw_input: str, expected: tuple[str, str]) -> None:
    assert split_city(raw_input) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("في عمان", "عمان"),
        ("عمان في", "عمان"),
        ("من دمشق", "دمشق"),
        ("إلى بيروت", "بيروت"),
        ("على البحر", "البحر"),
        ("عمان", "عمان"),
        ("فيصل", "فيصل"),
    ],
)
def test_strip_filler_words(text: str, expected: str) -> None:
    assert strip_filler_words(text) == expected
