"""天気機能のドメインモデル"""
from dataclasses import dataclass, field
from typing import Any

from .weather_codes import get_weather_info


@dataclass
class CurrentConditions:
    """現在の天気"""

    temperature: int  # 気温（℃、四捨五入）
    humidity: float  # 相対湿度（%）
    feels_like: int  # 体感温度（℃、四捨五入）
    wind_speed: int  # 風速（km/h、四捨五入）
    weather_code: int  # WMO天気コード

    @property
    def condition(self) -> str:
        return get_weather_info(self.weather_code).label

    @property
    def icon(self) -> str:
        return get_weather_info(self.weather_code).icon

    def to_dict(self) -> dict[str, Any]:
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "feelsLike": self.feels_like,
            "windSpeed": self.wind_speed,
            "weatherCode": self.weather_code,
            "condition": self.condition,
            "icon": self.icon,
        }


@dataclass
class DailyForecast:
    """日別予報"""

    date: str  # "Today" / "Tomorrow" / 曜日名
    high: int  # 最高気温
    low: int  # 最低気温
    weather_code: int

    def to_dict(self) -> dict[str, Any]:
        info = get_weather_info(self.weather_code)
        return {
            "date": self.date,
            "high": self.high,
            "low": self.low,
            "weatherCode": self.weather_code,
            "condition": info.label,
            "icon": info.icon,
        }


@dataclass
class WeatherReport:
    """地点の天気レポート（APIレスポンス用）"""

    city: str
    country: str
    current: CurrentConditions
    daily: list[DailyForecast] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "country": self.country,
            "current": self.current.to_dict(),
            "daily": [day.to_dict() for day in self.daily],
        }
