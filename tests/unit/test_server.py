"""APIサーバーのテスト"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from weather_lookup.features.resolution.services.resolver import LocationResolver
from weather_lookup.features.weather.providers.weather_cache import WeatherCache
from weather_lookup.features.weather.services.weather_service import WeatherService
from weather_lookup.server import app, get_container
from weather_lookup.shared.exceptions.errors import ForecastError


@pytest.fixture
def weather_service(fake_geocoder, make_candidate, forecast_client, fake_reverse_geocoder) -> WeatherService:
    fake_geocoder.responses[("Amman", "en")] = [
        make_candidate(
            "Amman", "Jordan", population=1_275_857, feature_code="PPLC",
            country_code="JO", latitude=31.95522, longitude=35.94503,
        )
    ]
    return WeatherService(LocationResolver(fake_geocoder), forecast_client, fake_reverse_geocoder)


@pytest.fixture
def client(weather_service):
    container = SimpleNamespace(weather_service=weather_service, resolver=weather_service.resolver)
    app.dependency_overrides[get_container] = lambda: container
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def test_root(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_health_includes_cache_stats(client, weather_service) -> None:
    weather_service.cache = WeatherCache(ttl_seconds=600)
    client.get("/weather", params={"city": "Amman"})

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "cache": {
            "cache_size": 1,
            "hit_count": 0,
            "miss_count": 1,
            "total_requests": 1,
            "hit_rate_percent": 0.0,
        },
    }


class TestWeatherByCity:
    def test_success(self, client) -> None:
        response = client.get("/weather", params={"city": "Amman"})

        assert response.status_code == 200
        body = response.json()
        assert body["city"] == "Amman"
        assert body["country"] == "Jordan"
        assert body["current"]["temperature"] == 23
        assert body["current"]["feelsLike"] == 21
        assert len(body["daily"]) == 5
        assert set(body["daily"][0]) == {"date", "high", "low", "weatherCode", "condition", "icon"}

    @pytest.mark.parametrize("params", [{}, {"city": ""}, {"city": "   "}])
    def test_missing_city(self, client, params) -> None:
        response = client.get("/weather", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "City parameter is required"}

    def test_city_not_found(self, client) -> None:
        response = client.get("/weather", params={"city": "Atlantis"})

        assert response.status_code == 404
        assert response.json() == {"error": "City not found"}

    def test_forecast_failure(self, client, forecast_client) -> None:
        forecast_client.get_forecast.side_effect = ForecastError("upstream 503")

        response = client.get("/weather", params={"city": "Amman"})

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to fetch weather data. Please try again later."}

    def test_unexpected_error(self, client, forecast_client) -> None:
        forecast_client.get_forecast.side_effect = RuntimeError("boom")

        response = client.get("/weather", params={"city": "Amman"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestWeatherByLocation:
    def test_success(self, client, fake_reverse_geocoder) -> None:
        response = client.get("/weather/location", params={"lat": "31.95", "lon": "35.93"})

        assert response.status_code == 200
        assert response.json()["city"] == "Amman"
        assert fake_reverse_geocoder.calls == [(31.95, 35.93)]

    @pytest.mark.parametrize("params", [{}, {"lat": "31.95"}, {"lon": "35.93"}])
    def test_missing_parameters(self, client, params) -> None:
        response = client.get("/weather/location", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "Latitude and longitude parameters are required"}

    @pytest.mark.parametrize(
        "lat,lon",
        [("north", "35.93"), ("31.95", "nan"), ("95", "35.93"), ("31.95", "-200")],
    )
    def test_invalid_coordinates(self, client, lat, lon) -> None:
        response = client.get("/weather/location", params={"lat": lat, "lon": lon})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid latitude or longitude"}

    def test_unknown_place_still_returns_weather(self, client, fake_reverse_geocoder) -> None:
        fake_reverse_geocoder.place.name = "Unknown"
        fake_reverse_geocoder.place.country = "Unknown"

        response = client.get("/weather/location", params={"lat": "0", "lon": "0"})

        assert response.status_code == 200
        assert response.json()["city"] == "Unknown"


class TestResolve:
    def test_resolved(self, client) -> None:
        response = client.get("/resolve", params={"q": "Amman"})

        assert response.status_code == 200
        assert response.json() == {
            "status": "resolved",
            "location": {"name": "Amman", "country": "Jordan", "latitude": 31.95522, "longitude": 35.94503},
            "attempts": [{"query": "Amman", "language": "en"}],
        }

    def test_exhausted(self, client) -> None:
        response = client.get("/resolve", params={"q": "Atlantis"})

        assert response.status_code == 200
        assert response.json()["status"] == "exhausted"
        assert response.json()["location"] is None

    def test_invalid_input(self, client) -> None:
        response = client.get("/resolve")

        assert response.json() == {"status": "invalid_input", "location": None, "attempts": []}


def test_get_container_is_cached(monkeypatch) -> None:
    import weather_lookup.server as server

    factory = MagicMock()
    monkeypatch.setattr(server, "ServiceContainer", factory)
    monkeypatch.setattr(server, "_container", None)

    assert server.get_container() is server.get_container()
    factory.assert_called_once_with(server.settings)
