"""
ジオコーディング結果の絞り込み

1回の候補クエリで返ってきた地点候補から、採用する地点を最大1件選ぶ。
採用できる候補がなければNoneを返し、呼び出し側は次の候補クエリへ進む。

判定ルール:
1. 衝突ガード: 別言語の国名と衝突する都市名（アンマン / オマーン）の場合、
   正しい国の候補だけを対象とし、条件を満たすものがなければ採用しない
2. 一般ルール: 首都・地方中心地を優先し、次に人口の多い順。
   先頭候補が首都級でも一定人口以上でもなければ採用しない
"""

import re
from collections.abc import Iterable
from typing import Optional

from ....shared.logging.config import get_logger
from ....shared.utils.text import collapse_whitespace
from ...geocoding.domain.models import LocationCandidate
from ..domain.models import ResolvedLocation
from ..domain.rules import (
    GENERAL_MIN_POPULATION,
    GUARDED_FALLBACK_MIN_POPULATION,
    GUARDED_MIN_POPULATION,
    NAME_COLLISION_RULES,
    NameCollisionRule,
)
from .normalizer import normalize

logger = get_logger(__name__)


def _contains_term(text: str, term: str) -> bool:
    """テキストに語句が単語単位で含まれるか"""
    if not term:
        return False
    return re.search(rf"(?<!\w){re.escape(term)}(?!\w)", text) is not None


def _normalized_set(values: Iterable[str]) -> set[str]:
    return {normalize(value) for value in values}


def _is_guarded(raw_text: str, normalized_input: str, rule: NameCollisionRule) -> bool:
    # 国を明示する表現があればユーザーは国を意図している
    if any(_contains_term(raw_text, name) for name in rule.colliding_country_native_names):
        return False

    if any(_contains_term(normalized_input, phrase) for phrase in _normalized_set(rule.colliding_country_phrases)):
        return False

    if not any(_contains_term(normalized_input, spelling) for spelling in _normalized_set(rule.city_spellings)):
        return False

    return not any(
        _contains_term(normalized_input, token) for token in _normalized_set(rule.colliding_country_tokens)
    )


def find_collision_rule(raw_input: str) -> Optional[NameCollisionRule]:
    """
    入力が衝突ガードの対象であれば該当ルールを返す

    Args:
        raw_input: ユーザー入力

    Returns:
        Optional[NameCollisionRule]: 該当するルール（対象外ならNone）
    """
    normalized_input = normalize(raw_input)
    if not normalized_input:
        return None

    raw_text = collapse_whitespace(raw_input)
    for rule in NAME_COLLISION_RULES:
        if _is_guarded(raw_text, normalized_input, rule):
            return rule

    return None


def rank_candidates(candidates: Iterable[LocationCandidate]) -> list[LocationCandidate]:
    """首都・地方中心地を先頭に、次に人口の多い順に並べる（同順位は元の順序を保つ）"""
    return sorted(
        candidates,
        key=lambda candidate: (not candidate.is_capital, -candidate.population_or_zero),
    )


def _matches_true_country(candidate: LocationCandidate, rule: NameCollisionRule) -> bool:
    if candidate.country_code and candidate.country_code.strip().upper() == rule.true_country_code:
        return True
    return normalize(candidate.country) in _normalized_set(rule.true_country_names)


def _matches_city(candidate: LocationCandidate, rule: NameCollisionRule) -> bool:
    if candidate.is_national_capital:
        return True
    return normalize(candidate.name) in _normalized_set(rule.city_spellings)


def _meets_guarded_population(candidate: LocationCandidate) -> bool:
    population = candidate.population_or_zero
    return (
        population > GUARDED_MIN_POPULATION
        or candidate.is_capital
        or population > GUARDED_FALLBACK_MIN_POPULATION
    )


def _apply_collision_rule(
    candidates: list[LocationCandidate], rule: NameCollisionRule
) -> Optional[ResolvedLocation]:
    qualified = [
        candidate
        for candidate in candidates
        if _matches_true_country(candidate, rule)
        and _matches_city(candidate, rule)
        and _meets_guarded_population(candidate)
    ]

    if not qualified:
        logger.debug(
            f"Collision guard rejected batch: no candidate in {rule.true_country_code} qualified "
            f"({len(candidates)} candidates)"
        )
        return None

    return ResolvedLocation.from_candidate(rank_candidates(qualified)[0])


def _apply_general_rule(candidates: list[LocationCandidate]) -> Optional[ResolvedLocation]:
    top = rank_candidates(candidates)[0]

    if top.is_capital or top.population_or_zero > GENERAL_MIN_POPULATION:
        return ResolvedLocation.from_candidate(top)

    logger.debug(
        f"Top candidate rejected: {top.name}, {top.country} "
        f"(population={top.population}, feature_code={top.feature_code})"
    )
    return None


def filter_candidates(
    candidates: Optional[Iterable[LocationCandidate]], raw_input: str
) -> Optional[ResolvedLocation]:
    """
    地点候補から採用する1件を選ぶ

    Args:
        candidates: 1回の候補クエリで得られた地点候補
        raw_input: ユーザー入力（衝突ガードの判定に使用）

    Returns:
        Optional[ResolvedLocation]: 採用した地点（なければNone）
    """
    batch = list(candidates or [])
    if not batch:
        return None

    rule = find_collision_rule(raw_input)
    if rule is not None:
        return _apply_collision_rule(batch, rule)

    return _apply_general_rule(batch)
