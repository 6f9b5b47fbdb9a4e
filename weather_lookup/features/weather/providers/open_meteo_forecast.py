"""Open-Meteo Forecast API実装"""
from typing import Any, Optional

from ....shared.exceptions.errors import ForecastError, HTTPError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
)
DAILY_FIELDS = ("temperature_2m_max", "temperature_2m_min", "weather_code")


class OpenMeteoForecastClient:
    """Open-Meteo Forecast API クライアント（APIキー不要）"""

    def __init__(
        self,
        http_client: Optional[HTTPClient] = None,
        base_url: str = DEFAULT_FORECAST_URL,
    ) -> None:
        """
        Args:
            http_client: HTTPクライアント（Noneの場合は新規作成）
            base_url: Forecast APIのURL
        """
        self.http_client = http_client or HTTPClient()
        self.base_url = base_url
        logger.info("OpenMeteoForecastClient initialized")

    def get_forecast(self, latitude: float, longitude: float) -> dict[str, Any]:
        """
        現在の天気と日別予報を取得

        Args:
            latitude: 緯度
            longitude: 経度

        Returns:
            dict[str, Any]: APIレスポンス（"current", "daily", "timezone" を含む）

        Raises:
            ForecastError: 取得に失敗した場合、またはレスポンスに必要なデータがない場合
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
        }

        try:
            logger.debug(f"Fetching forecast: ({latitude}, {longitude})")
            payload = self.http_client.get_json(self.base_url, params=params)
        except HTTPError as e:
            raise ForecastError(f"Failed to fetch forecast: {e}") from e

        if not isinstance(payload, dict) or not payload.get("current") or not payload.get("daily"):
            raise ForecastError("Invalid forecast data received")

        return payload

    def close(self) -> None:
        """HTTPセッションをクローズ"""
        self.http_client.close()
