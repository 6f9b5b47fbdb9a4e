"""WMO天気コード（Open-Meteoが使用）の表示名とアイコン"""
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherInfo:
    """天気コードの表示情報"""

    label: str
    icon: str


WEATHER_CODES: dict[int, WeatherInfo] = {
    # 晴れ・曇り
    0: WeatherInfo("Clear sky", "☀️"),
    1: WeatherInfo("Mainly clear", "🌤️"),
    2: WeatherInfo("Partly cloudy", "⛅"),
    3: WeatherInfo("Overcast", "☁️"),
    # 霧
    45: WeatherInfo("Fog", "🌫️"),
    48: WeatherInfo("Depositing rime fog", "🌫️"),
    # 霧雨
    51: WeatherInfo("Light drizzle", "🌦️"),
    53: WeatherInfo("Moderate drizzle", "🌦️"),
    55: WeatherInfo("Dense drizzle", "🌦️"),
    56: WeatherInfo("Light freezing drizzle", "🌨️"),
    57: WeatherInfo("Dense freezing drizzle", "🌨️"),
    # 雨
    61: WeatherInfo("Slight rain", "🌧️"),
    63: WeatherInfo("Moderate rain", "🌧️"),
    65: WeatherInfo("Heavy rain", "🌧️"),
    66: WeatherInfo("Light freezing rain", "🌨️"),
    67: WeatherInfo("Heavy freezing rain", "🌨️"),
    # 雪
    71: WeatherInfo("Slight snow", "❄️"),
    73: WeatherInfo("Moderate snow", "❄️"),
    75: WeatherInfo("Heavy snow", "❄️"),
    77: WeatherInfo("Snow grains", "❄️"),
    # にわか雨
    80: WeatherInfo("Slight rain showers", "🌦️"),
    81: WeatherInfo("Moderate rain showers", "🌧️"),
    82: WeatherInfo("Violent rain showers", "🌧️"),
    # にわか雪
    85: WeatherInfo("Slight snow showers", "🌨️"),
    86: WeatherInfo("Heavy snow showers", "🌨️"),
    # 雷雨
    95: WeatherInfo("Thunderstorm", "⛈️"),
    96: WeatherInfo("Thunderstorm with slight hail", "⛈️"),
    99: WeatherInfo("Thunderstorm with heavy hail", "⛈️"),
}

UNKNOWN_WEATHER = WeatherInfo("Unknown", "☀️")


def get_weather_info(code: int) -> WeatherInfo:
    """天気コードから表示情報を取得（未知のコードは "Unknown"）"""
    return WEATHER_CODES.get(code, UNKNOWN_WEATHER)
