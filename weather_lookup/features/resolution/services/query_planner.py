"""候補クエリの生成"""

import re
from collections.abc import Iterator
from typing import Optional

from ....shared.utils.text import collapse_whitespace
from ..domain.enums import Script
from ..domain.models import CandidateQuery
from ..domain.rules import (
    ARABIC_FILLER_WORDS,
    DEFAULT_LANGUAGE,
    LOCATION_SEPARATOR_PATTERN,
    NATIVE_LANGUAGE,
)
from .normalizer import detect_script, normalize

_SEPARATOR_RE = re.compile(LOCATION_SEPARATOR_PATTERN)

_FILLER_ALTERNATION = "|".join(re.escape(word) for word in ARABIC_FILLER_WORDS)
_LEADING_FILLER_RE = re.compile(rf"^(?:{_FILLER_ALTERNATION})\s+")
_TRAILING_FILLER_RE = re.compile(rf"\s+(?:{_FILLER_ALTERNATION})$")


def split_city(raw_input: str) -> tuple[str, str]:
    """
    入力を (都市名のみ, 入力全体) に分割

    "عمان، الأردن" -> ("عمان", "عمان، الأردن")
    """
    full = collapse_whitespace(raw_input)
    city_only = collapse_whitespace(_SEPARATOR_RE.split(full, maxsplit=1)[0])
    return city_only, full


def strip_filler_words(text: str) -> str:
    """先頭・末尾の前置詞（في / من / إلى / على）を除去"""
    cleaned = _LEADING_FILLER_RE.sub("", text)
    cleaned = _TRAILING_FILLER_RE.sub("", cleaned)
    return cleaned.strip()


def _normalized_variant(text: str) -> Optional[str]:
    """
    正規化で文字列が変わる場合のみ正規化結果を返す

    大文字小文字の違いだけなら別クエリとしない（ジオコーディングAPIは大小を区別しない）
    """
    normalized = normalize(text)
    if normalized and normalized != text and normalized != text.lower():
        return normalized
    return None


def _arabic_ladder(city_only: str, full: str) -> Iterator[CandidateQuery]:
    normalized_city = _normalized_variant(city_only)

    yield CandidateQuery(city_only, NATIVE_LANGUAGE)
    if normalized_city:
        yield CandidateQuery(normalized_city, NATIVE_LANGUAGE)
    yield CandidateQuery(city_only, DEFAULT_LANGUAGE)
    if normalized_city:
        yield CandidateQuery(normalized_city, DEFAULT_LANGUAGE)

    cleaned = strip_filler_words(city_only)
    if cleaned and cleaned != city_only:
        yield CandidateQuery(cleaned, NATIVE_LANGUAGE)
        yield CandidateQuery(cleaned, DEFAULT_LANGUAGE)

    # 国名付きの入力は最後にそのまま試す
    if full != city_only:
        yield CandidateQuery(full, NATIVE_LANGUAGE)
        yield CandidateQuery(full, DEFAULT_LANGUAGE)


def _default_ladder(city_only: str, full: str) -> Iterator[CandidateQuery]:
    yield CandidateQuery(city_only, DEFAULT_LANGUAGE)

    normalized_city = _normalized_variant(city_only)
    if normalized_city:
        yield CandidateQuery(normalized_city, DEFAULT_LANGUAGE)

    if full != city_only:
        yield CandidateQuery(full, DEFAULT_LANGUAGE)


def iter_candidate_queries(raw_input: str) -> Iterator[CandidateQuery]:
    """
    候補クエリを優先順に1つずつ生成

    先に生成されるものほど入力に忠実で、後になるほど緩いフォールバックになる。
    同じ (検索文字列, 言語) の組は2度生成しない。

    Args:
        raw_input: ユーザー入力

    Yields:
        CandidateQuery: 候補クエリ
    """
    city_only, full = split_city(raw_input)
    if not city_only:
        return

    if detect_script(city_only) is Script.ARABIC:
        ladder = _arabic_ladder(city_only, full)
    else:
        ladder = _default_ladder(city_only, full)

    seen: set[CandidateQuery] = set()
    for query in ladder:
        if query in seen:
            continue
        seen.add(query)
        yield query


def plan(raw_input: str) -> list[CandidateQuery]:
    """候補クエリのリストを返す（空入力の場合は空リスト）"""
    if not isinstance(raw_input, str):
        return []
    return list(iter_candidate_queries(raw_input))
