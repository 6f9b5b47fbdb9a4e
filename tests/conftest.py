"""テスト共通のフィクスチャ"""

from typing import Any, Optional
from unittest.mock import MagicMock

import pytest

from weather_lookup.features.geocoding.domain.models import LocationCandidate, PlaceName
from weather_lookup.features.geocoding.providers.base import (
    AbstractGeocoder,
    AbstractReverseGeocoder,
)


class FakeGeocoder(AbstractGeocoder):
    """(検索文字列, 言語) ごとに決まった結果を返すジオコーダー"""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, Optional[str]], Any] = {}
        self.calls: list[tuple[str, int, Optional[str]]] = []

    def search(
        self, name: str, count: int = 10, language: Optional[str] = None
    ) -> list[LocationCandidate]:
        self.calls.append((name, count, language))
        response = self.responses.get((name, language), [])
        if isinstance(response, Exception):
            raise response
        return list(response)


class FakeReverseGeocoder(AbstractReverseGeocoder):
    """常に同じ地名を返す逆ジオコーダー"""

    def __init__(self, place: PlaceName) -> None:
        self.place = place
        self.calls: list[tuple[float, float]] = []

    def reverse_geocode(self, latitude: float, longitude: float) -> PlaceName:
        self.calls.append((latitude, longitude))
        return self.place


@pytest.fixture
def make_candidate():
    """地点候補を作成するファクトリ"""

    def _make(
        name: str,
        country: str,
        population: Optional[int] = None,
        feature_code: Optional[str] = None,
        country_code: Optional[str] = None,
        latitude: float = 0.0,
        longitude: float = 0.0,
    ) -> LocationCandidate:
        return LocationCandidate(
            name=name,
            country=country,
            latitude=latitude,
            longitude=longitude,
            country_code=country_code,
            population=population,
            feature_code=feature_code,
        )

    return _make


@pytest.fixture
def fake_geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def fake_reverse_geocoder() -> FakeReverseGeocoder:
    return FakeReverseGeocoder(PlaceName(name="Amman", country="Jordan"))


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """Open-Meteo Forecast APIのレスポンス例"""
    return {
        "timezone": "Asia/Amman",
        "current": {
            "temperature_2m": 22.5,
            "relative_humidity_2m": 40,
            "apparent_temperature": 21.4,
            "weather_code": 1,
            "wind_speed_10m": 12.6,
        },
        "daily": {
            "time": [
                "2024-05-01",
                "2024-05-02",
                "2024-05-03",
                "2024-05-04",
                "2024-05-05",
                "2024-05-06",
                "2024-05-07",
            ],
            "temperature_2m_max": [25.5, 26.4, 27.0, 24.9, 23.2, 22.0, 21.0],
            "temperature_2m_min": [12.5, 13.1, 14.0, 12.2, 11.7, 11.0, 10.0],
            "weather_code": [1, 2, 3, 61, 0, 0, 0],
        },
    }


@pytest.fixture
def forecast_client(forecast_payload: dict[str, Any]) -> MagicMock:
    """常に forecast_payload を返す天気予報クライアント"""
    client = MagicMock()
    client.get_forecast.return_value = forecast_payload
    return client
