"""Open-Meteo Geocoding API実装"""
from typing import Any, Optional

from ....shared.exceptions.errors import GeocodingError, HTTPError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger
from ..domain.models import LocationCandidate
from .base import AbstractGeocoder

logger = get_logger(__name__)

DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


class OpenMeteoGeocoder(AbstractGeocoder):
    """Open-Meteo Geocoding API実装（APIキー不要）"""

    def __init__(
        self,
        http_client: Optional[HTTPClient] = None,
        base_url: str = DEFAULT_GEOCODING_URL,
    ) -> None:
        """
        Args:
            http_client: HTTPクライアント（Noneの場合はリトライなしで新規作成）
            base_url: Geocoding APIのURL
        """
        self.http_client = http_client or HTTPClient(max_retries=0)
        self.base_url = base_url
        logger.info("OpenMeteoGeocoder initialized")

    def search(
        self, name: str, count: int = 10, language: Optional[str] = None
    ) -> list[LocationCandidate]:
        """
        地名から地点候補を検索

        Args:
            name: 検索文字列
            count: 取得する最大件数
            language: 言語ヒント（レスポンスの表記言語に影響する）

        Returns:
            list[LocationCandidate]: 地点候補（見つからない場合は空リスト）

        Raises:
            GeocodingError: APIリクエストに失敗した場合、またはレスポンスが不正な場合
        """
        if not name:
            logger.warning("Empty name provided for geocoding")
            return []

        params: dict[str, Any] = {"name": name, "count": count, "format": "json"}
        if language:
            params["language"] = language

        try:
            logger.debug(f"Geocoding: {name!r} (language={language or 'default'})")
            payload = self.http_client.get_json(self.base_url, params=params)
        except HTTPError as e:
            raise GeocodingError(f"Open-Meteo geocoding request failed: {e}") from e

        return self._parse_results(payload, name)

    def _parse_results(self, payload: Any, name: str) -> list[LocationCandidate]:
        """
        レスポンスを地点候補に変換

        結果がない場合、APIは "results" キー自体を省略する
        """
        if not isinstance(payload, dict):
            raise GeocodingError(f"Malformed geocoding response for {name!r}: not an object")

        if payload.get("error"):
            raise GeocodingError(
                f"Open-Meteo geocoding error for {name!r}: {payload.get('reason', 'unknown reason')}"
            )

        results = payload.get("results")
        if results is None:
            logger.debug(f"No geocoding results for: {name!r}")
            return []

        if not isinstance(results, list):
            raise GeocodingError(f"Malformed geocoding response for {name!r}: results is not a list")

        candidates = []
        for result in results:
            if not isinstance(result, dict):
                logger.warning(f"Skipping non-object geocoding result for {name!r}: {result!r}")
                continue

            try:
                candidates.append(LocationCandidate.from_api_dict(result))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping invalid geocoding result for {name!r}: {e}")

        logger.debug(f"Geocoded {name!r}: {len(candidates)} candidates")
        return candidates

    def close(self) -> None:
        """HTTPセッションをクローズ"""
        self.http_client.close()
