"""天気取得サービス"""

import math
from datetime import datetime
from typing import Any, Optional

from ....shared.exceptions.errors import ForecastError, LocationNotFoundError, ValidationError
from ....shared.logging.config import get_logger
from ....shared.utils.datetime_utils import format_day_label, today_in_timezone
from ....shared.utils.text import collapse_whitespace
from ...geocoding.providers.base import AbstractReverseGeocoder
from ...resolution.domain.enums import ResolutionStatus
from ...resolution.services.resolver import LocationResolver
from ..domain.models import CurrentConditions, DailyForecast, WeatherReport
from ..providers.open_meteo_forecast import OpenMeteoForecastClient
from ..providers.weather_cache import WeatherCache

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """0.5を切り上げる四捨五入（Pythonのround()は偶数丸めのため使わない）"""
    return math.floor(value + 0.5)


class WeatherService:
    """
    天気取得サービス

    都市名検索: キャッシュ確認 → 地点解決 → 天気予報取得 → 整形 → キャッシュ保存
    現在地検索: 座標検証 → 逆ジオコーディング → 天気予報取得 → 整形
    """

    def __init__(
        self,
        resolver: LocationResolver,
        forecast_client: OpenMeteoForecastClient,
        reverse_geocoder: AbstractReverseGeocoder,
        cache: Optional[WeatherCache] = None,
        forecast_days: int = 5,
    ) -> None:
        """
        Args:
            resolver: 地点解決サービス
            forecast_client: 天気予報クライアント
            reverse_geocoder: 逆ジオコーダー
            cache: 天気レスポンスキャッシュ（Noneの場合はキャッシュしない）
            forecast_days: レスポンスに含める日別予報の日数
        """
        self.resolver = resolver
        self.forecast_client = forecast_client
        self.reverse_geocoder = reverse_geocoder
        self.cache = cache
        self.forecast_days = forecast_days

        logger.info(
            f"WeatherService initialized: cache={cache is not None}, forecast_days={forecast_days}"
        )

    def get_weather_for_city(self, city: str) -> WeatherReport:
        """
        都市名から天気を取得

        Args:
            city: ユーザーが入力した都市名

        Returns:
            WeatherReport: 天気レポート

        Raises:
            ValidationError: 都市名が空の場合
            LocationNotFoundError: 地点が確定しなかった場合
            ForecastError: 天気予報の取得に失敗した場合
        """
        if not collapse_whitespace(city):
            raise ValidationError("City parameter is required")

        if self.cache is not None:
            cached = self.cache.get(city)
            if cached is not None:
                return cached

        result = self.resolver.resolve(city)

        if result.status == ResolutionStatus.INVALID_INPUT:
            raise ValidationError("City parameter is required")
        if not result.is_resolved or result.location is None:
            raise LocationNotFoundError(f"City not found: {city}")

        location = result.location
        forecast = self.forecast_client.get_forecast(location.latitude, location.longitude)
        report = self.shape_report(location.name, location.country, forecast)

        if self.cache is not None:
            self.cache.set(city, report)

        return report

    def get_weather_for_coordinates(self, latitude: float, longitude: float) -> WeatherReport:
        """
        座標（現在地）から天気を取得

        地名が取得できない場合でも "Unknown" として天気は返す

        Raises:
            ValidationError: 座標が範囲外の場合
            ForecastError: 天気予報の取得に失敗した場合
        """
        if not (-90 <= latitude <= 90) or not (-180 <= longitude <= 180):
            raise ValidationError("Invalid latitude or longitude")

        place = self.reverse_geocoder.reverse_geocode(latitude, longitude)
        forecast = self.forecast_client.get_forecast(latitude, longitude)

        return self.shape_report(place.name, place.country, forecast)

    def shape_report(
        self,
        city: str,
        country: str,
        forecast: dict[str, Any],
        now: Optional[datetime] = None,
    ) -> WeatherReport:
        """
        APIレスポンスをレポート形式に整形

        Args:
            city: 都市名
            country: 国名
            forecast: Open-Meteo Forecast APIのレスポンス
            now: 基準時刻（テスト用）

        Returns:
            WeatherReport: 天気レポート

        Raises:
            ForecastError: レスポンスの形式が不正な場合
        """
        try:
            current = forecast["current"]
            daily = forecast["daily"]
            today = today_in_timezone(forecast.get("timezone"), now)

            conditions = CurrentConditions(
                temperature=round_half_up(current["temperature_2m"]),
                humidity=current["relative_humidity_2m"],
                feels_like=round_half_up(current["apparent_temperature"]),
                wind_speed=round_half_up(current["wind_speed_10m"]),
                weather_code=current["weather_code"],
            )

            days = [
                DailyForecast(
                    date=format_day_label(date_string, today),
                    high=round_half_up(daily["temperature_2m_max"][index]),
                    low=round_half_up(daily["temperature_2m_min"][index]),
                    weather_code=daily["weather_code"][index],
                )
                for index, date_string in enumerate(daily["time"][: self.forecast_days])
            ]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ForecastError(f"Invalid forecast data received: {e}") from e

        return WeatherReport(city=city, country=country, current=conditions, daily=days)

    def get_cache_stats(self) -> Optional[dict[str, float]]:
        """
        キャッシュ統計を取得（キャッシュが有効な場合のみ）

        Returns:
            Optional[dict[str, float]]: キャッシュ統計
        """
        if self.cache is None:
            return None
        return self.cache.get_cache_stats()

    def close(self) -> None:
        """リソースをクリーンアップ"""
        self.forecast_client.close()
        self.reverse_geocoder.close()
        self.resolver.geocoder.close()
