"""Nominatim（OpenStreetMap）逆ジオコーディング実装"""
from typing import Any, Optional

from ....shared.exceptions.errors import HTTPError
from ....shared.http.client import HTTPClient
from ....shared.http.rate_limiter import RateLimiter
from ....shared.logging.config import get_logger
from ..domain.models import UNKNOWN_PLACE, PlaceName
from .base import AbstractReverseGeocoder

logger = get_logger(__name__)

DEFAULT_REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"

# 都市名として採用するaddressフィールド（優先順）
CITY_ADDRESS_FIELDS = ("city", "town", "village", "municipality", "county", "state")


class NominatimReverseGeocoder(AbstractReverseGeocoder):
    """
    Nominatim逆ジオコーディング

    検索結果と表記を揃えるため、常に英語（accept-language=en）で取得する。
    利用規約によりUser-Agentの指定と1リクエスト/秒の制限が必要。
    """

    def __init__(
        self,
        http_client: Optional[HTTPClient] = None,
        rate_limiter: Optional[RateLimiter] = None,
        base_url: str = DEFAULT_REVERSE_URL,
    ) -> None:
        """
        Args:
            http_client: HTTPクライアント（Noneの場合は新規作成）
            rate_limiter: レート制限（Noneの場合は1リクエスト/秒）
            base_url: Reverse APIのURL
        """
        self.http_client = http_client or HTTPClient()
        self.rate_limiter = rate_limiter or RateLimiter(requests_per_second=1.0)
        self.base_url = base_url
        logger.info("NominatimReverseGeocoder initialized")

    def reverse_geocode(self, latitude: float, longitude: float) -> PlaceName:
        """
        座標から地名を取得

        Args:
            latitude: 緯度
            longitude: 経度

        Returns:
            PlaceName: 地名（失敗時は "Unknown" / "Unknown"）
        """
        params = {
            "format": "json",
            "lat": latitude,
            "lon": longitude,
            "addressdetails": 1,
            "limit": 1,
            "accept-language": "en",
        }

        try:
            self.rate_limiter.wait()
            logger.debug(f"Reverse geocoding: ({latitude}, {longitude})")
            payload = self.http_client.get_json(self.base_url, params=params)
        except HTTPError as e:
            logger.error(f"Nominatim reverse geocoding error: ({latitude}, {longitude}) - {e}")
            return PlaceName.unknown()

        place = self._parse_place(payload)
        logger.debug(f"Reverse geocoded: ({latitude}, {longitude}) -> {place.name}, {place.country}")
        return place

    def _parse_place(self, payload: Any) -> PlaceName:
        if not isinstance(payload, dict) or not isinstance(payload.get("address"), dict):
            logger.warning("No address in reverse geocoding response")
            return PlaceName.unknown()

        address = payload["address"]
        city_name = next(
            (address[key] for key in CITY_ADDRESS_FIELDS if address.get(key)),
            UNKNOWN_PLACE,
        )
        country = address.get("country") or UNKNOWN_PLACE

        return PlaceName(name=city_name, country=country)

    def close(self) -> None:
        """HTTPセッションをクローズ"""
        self.http_client.close()
