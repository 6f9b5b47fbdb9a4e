"""地点解決サービス"""

from typing import Any

from ....shared.exceptions.errors import GeocodingError
from ....shared.logging.config import get_logger
from ....shared.utils.text import collapse_whitespace, truncate_text
from ...geocoding.domain.models import LocationCandidate
from ...geocoding.providers.base import AbstractGeocoder
from ..domain.enums import ResolutionStatus
from ..domain.models import CandidateQuery, ResolutionResult
from .disambiguator import filter_candidates
from .query_planner import iter_candidate_queries

logger = get_logger(__name__)


class LocationResolver:
    """
    ユーザー入力を1つの地点に解決する

    処理フロー:
    1. 候補クエリを優先順に生成
    2. 候補ごとにジオコーディングAPIを呼び出し
    3. 結果を絞り込み、最初に採用された地点を返す

    候補は必ず順番に1件ずつ試す（後の候補ほど緩い条件のため、並列化しない）。
    """

    def __init__(self, geocoder: AbstractGeocoder, result_count: int = 10) -> None:
        """
        Args:
            geocoder: ジオコーダー
            result_count: 1回の候補クエリで取得する地点数
        """
        self.geocoder = geocoder
        self.result_count = result_count

        logger.info(f"LocationResolver initialized: result_count={result_count}")

    def resolve(self, raw_input: Any) -> ResolutionResult:
        """
        入力を地点に解決

        例外は送出しない。結果は以下のいずれか:
        - RESOLVED: 地点が確定
        - EXHAUSTED: 全候補を試したが確定しなかった
        - INVALID_INPUT: 空入力（APIは呼び出さない）

        Args:
            raw_input: ユーザー入力

        Returns:
            ResolutionResult: 解決結果
        """
        text = collapse_whitespace(raw_input)
        if not text:
            logger.debug("Empty input, skipping resolution")
            return ResolutionResult(status=ResolutionStatus.INVALID_INPUT)

        attempts: list[CandidateQuery] = []

        for query in iter_candidate_queries(text):
            attempts.append(query)

            batch = self._lookup(query)
            location = filter_candidates(batch, text)

            if location is not None:
                logger.info(
                    f"Resolved {truncate_text(text, 50)!r} -> {location.name}, {location.country} "
                    f"(attempt {len(attempts)}: {query.query_string!r}/{query.language_hint})"
                )
                return ResolutionResult(
                    status=ResolutionStatus.RESOLVED,
                    location=location,
                    attempts=attempts,
                )

        if not attempts:
            logger.debug(f"No candidate queries for input: {truncate_text(text, 50)!r}")
            return ResolutionResult(status=ResolutionStatus.INVALID_INPUT)

        logger.info(
            f"Resolution exhausted for {truncate_text(text, 50)!r} after {len(attempts)} attempts"
        )
        return ResolutionResult(status=ResolutionStatus.EXHAUSTED, attempts=attempts)

    def _lookup(self, query: CandidateQuery) -> list[LocationCandidate]:
        """
        1件の候補クエリを実行

        通信失敗・不正なレスポンスは空の結果として扱い、次の候補へ進む
        """
        try:
            return self.geocoder.search(
                query.query_string,
                count=self.result_count,
                language=query.language_hint,
            )
        except GeocodingError as e:
            logger.warning(
                f"Geocoding failed for {query.query_string!r} ({query.language_hint}), "
                f"treating as empty: {e}"
            )
            return []
