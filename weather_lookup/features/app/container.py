"""サービスコンテナ（依存性の組み立て）"""

from typing import Any, Optional

from ...infrastructure.config.settings import Settings
from ...shared.http.client import HTTPClient
from ...shared.http.rate_limiter import RateLimiter
from ...shared.logging.config import get_logger
from ..geocoding.providers.nominatim_reverse_geocoder import NominatimReverseGeocoder
from ..geocoding.providers.open_meteo_geocoder import OpenMeteoGeocoder
from ..resolution.services.resolver import LocationResolver
from ..weather.providers.open_meteo_forecast import OpenMeteoForecastClient
from ..weather.providers.weather_cache import WeatherCache
from ..weather.services.weather_service import WeatherService

logger = get_logger(__name__)


class ServiceContainer:
    """
    サービスコンテナ

    設定から各Featureを組み立て、依存性注入を行う
    """

    def __init__(self, settings: Settings) -> None:
        """
        Args:
            settings: アプリケーション設定
        """
        self.settings = settings

        # ジオコーディング（失敗した候補は次の候補へ進むため、リトライは設定値に従う）
        self.geocoder = OpenMeteoGeocoder(
            http_client=HTTPClient(
                timeout=settings.geocoding_timeout,
                max_retries=settings.geocoding_max_retries,
                user_agent=settings.http_user_agent,
            ),
            base_url=settings.geocoding_url,
        )
        self.resolver = LocationResolver(
            geocoder=self.geocoder,
            result_count=settings.geocoding_result_count,
        )

        # 逆ジオコーディング
        self.reverse_geocoder = NominatimReverseGeocoder(
            http_client=HTTPClient(user_agent=settings.http_user_agent),
            rate_limiter=RateLimiter(requests_per_second=settings.reverse_geocoding_rate_limit),
            base_url=settings.reverse_geocoding_url,
        )

        # 天気予報
        self.forecast_client = OpenMeteoForecastClient(
            http_client=HTTPClient(
                timeout=settings.forecast_timeout,
                max_retries=settings.forecast_max_retries,
                user_agent=settings.http_user_agent,
            ),
            base_url=settings.forecast_url,
        )

        # キャッシュ（任意）
        self.weather_cache: Optional[WeatherCache] = None
        if settings.weather_cache_enabled:
            self.weather_cache = WeatherCache(ttl_seconds=settings.weather_cache_ttl)

        self.weather_service = WeatherService(
            resolver=self.resolver,
            forecast_client=self.forecast_client,
            reverse_geocoder=self.reverse_geocoder,
            cache=self.weather_cache,
            forecast_days=settings.forecast_days,
        )

        logger.info("ServiceContainer initialized")

    def close(self) -> None:
        """HTTPセッションをクローズ"""
        self.weather_service.close()
        logger.info("ServiceContainer closed")

    def __enter__(self) -> "ServiceContainer":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
