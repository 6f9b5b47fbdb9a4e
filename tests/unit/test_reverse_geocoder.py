"""Nominatim逆ジオコーディングのテスト"""

from unittest.mock import MagicMock

import pytest

from weather_lookup.features.geocoding.domain.models import PlaceName
from weather_lookup.features.geocoding.providers.nominatim_reverse_geocoder import (
    DEFAULT_REVERSE_URL,
    NominatimReverseGeocoder,
)
from weather_lookup.shared.exceptions.errors import HTTPError
from weather_lookup.shared.http.client import HTTPClient
from weather_lookup.shared.http.rate_limiter import RateLimiter


@pytest.fixture
def http_client() -> MagicMock:
    return MagicMock(spec=HTTPClient)


@pytest.fixture
def rate_limiter() -> MagicMock:
    return MagicMock(spec=RateLimiter)


@pytest.fixture
def reverse_geocoder(http_client, rate_limiter) -> NominatimReverseGeocoder:
    return NominatimReverseGeocoder(http_client=http_client, rate_limiter=rate_limiter)


def test_reverse_geocode_city(reverse_geocoder, http_client, rate_limiter) -> None:
    http_client.get_json.return_value = {
        "display_name": "Amman, Jordan",
        "address": {"city": "Amman", "state": "Amman Governorate", "country": "Jordan"},
    }

    place = reverse_geocoder.reverse_geocode(31.95, 35.93)

    assert place == PlaceName(name="Amman", country="Jordan")
    rate_limiter.wait.assert_called_once()
    http_client.get_json.assert_called_once_with(
        DEFAULT_REVERSE_URL,
        params={
            "format": "json",
            "lat": 31.95,
            "lon": 35.93,
            "addressdetails": 1,
            "limit": 1,
            "accept-language": "en",
        },
    )


@pytest.mark.parametrize(
    "address,expected_name",
    [
        ({"town": "Madaba", "state": "Madaba Governorate"}, "Madaba"),
        ({"village": "Dana", "county": "Tafilah"}, "Dana"),
        ({"municipality": "Sahab", "state": "Amman"}, "Sahab"),
        ({"county": "Wadi Rum", "state": "Aqaba"}, "Wadi Rum"),
        ({"state": "Ma'an Governorate"}, "Ma'an Governorate"),
        ({"city": "", "town": "Salt"}, "Salt"),
        ({"road": "Desert Highway"}, "Unknown"),
    ],
)
def test_reverse_geocode_address_fallback(reverse_geocoder, http_client, address, expected_name) -> None:
    """city → town → village → municipality → county → state の順で採用"""
    http_client.get_json.return_value = {"address": {**address, "country": "Jordan"}}

    assert reverse_geocoder.reverse_geocode(30.0, 36.0).name == expected_name


def test_reverse_geocode_missing_country(reverse_geocoder, http_client) -> None:
    http_client.get_json.return_value = {"address": {"city": "Somewhere"}}

    assert reverse_geocoder.reverse_geocode(0.0, 0.0) == PlaceName(name="Somewhere", country="Unknown")


@pytest.mark.parametrize("payload", [{"error": "Unable to geocode"}, [], {"address": "Amman"}])
def test_reverse_geocode_without_address(reverse_geocoder, http_client, payload) -> None:
    http_client.get_json.return_value = payload

    assert reverse_geocoder.reverse_geocode(0.0, 0.0) == PlaceName.unknown()


def test_reverse_geocode_http_error_returns_unknown(reverse_geocoder, http_client) -> None:
    """通信失敗でも例外は送出しない"""
    http_client.get_json.side_effect = HTTPError("503 Service Unavailable")

    place = reverse_geocoder.reverse_geocode(31.95, 35.93)

    assert place.name == "Unknown"
    assert place.country == "Unknown"


def test_close_closes_http_client(reverse_geocoder, http_client) -> None:
    reverse_geocoder.close()

    http_client.close.assert_called_once()
