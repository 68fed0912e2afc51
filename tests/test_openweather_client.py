"""Tests for the OpenWeatherMap client."""

import pytest
import requests
from datetime import datetime, timezone
from conftest import TODAY, FakeResponse, FakeSession, forecast_feed
from src.domain.entities.coordinates import Coordinates
from src.infrastructure.clients.openweather_client import (
    OpenWeatherClient,
    OpenWeatherConfig,
    normalize_current_weather,
    select_rainfall,
)

CONFIG = OpenWeatherConfig(api_key="test-key")


def make_client(routes, config=CONFIG):
    session = FakeSession(routes)
    return OpenWeatherClient(config, session=session, today=lambda: TODAY), session


@pytest.mark.parametrize(
    "rain, expected",
    [
        ({"1h": 2.0, "3h": 5.0}, 2.0),
        ({"3h": 5.0}, 5.0),
        ({}, 0.0),
        (None, 0.0),
        ({"1h": 0.0, "3h": 5.0}, 0.0),
    ],
)
def test_select_rainfall(rain, expected):
    """The 1-hour bucket wins over the 3-hour bucket; the two are never summed."""
    assert select_rainfall(rain) == expected


def test_normalize_current_weather(current_payload):
    weather = normalize_current_weather(current_payload, TODAY)

    assert weather.date == TODAY
    assert weather.max_temperature == 24.0
    assert weather.min_temperature == 17.0
    assert weather.rainfall == 2.0
    assert weather.humidity == 65
    assert weather.wind_speed == 4.1
    assert weather.pressure == 1009
    assert weather.weather_condition == "小雨"
    assert weather.soil_temperature == 19.5
    assert weather.sunshine_hours is None


def test_normalize_current_weather_without_rain(current_payload):
    del current_payload["rain"]
    assert normalize_current_weather(current_payload, TODAY).rainfall == 0


def test_current_weather_dated_by_local_clock(current_payload):
    """The provider timestamp does not decide the record date."""
    current_payload["dt"] = int(datetime(2020, 1, 1, tzinfo=timezone.utc).timestamp())
    client, _ = make_client({"/weather": current_payload})

    assert client.get_current(42.9, 143.2).date == TODAY


def test_get_current_sends_metric_japanese_request(current_payload):
    client, session = make_client({"/weather": current_payload})

    client.get_current(42.9, 143.2)

    call = session.calls[0]
    assert call["url"] == "https://api.openweathermap.org/data/2.5/weather"
    assert call["params"] == {
        "lat": 42.9,
        "lon": 143.2,
        "units": "metric",
        "lang": "ja",
        "appid": "test-key",
    }
    assert call["timeout"] == CONFIG.timeout


def test_get_current_returns_none_on_http_error():
    client, _ = make_client({"/weather": FakeResponse({}, status_code=500)})
    assert client.get_current(42.9, 143.2) is None


def test_get_current_returns_none_on_transport_error():
    client, _ = make_client({"/weather": requests.ConnectionError("down")})
    assert client.get_current(42.9, 143.2) is None


def test_get_current_returns_none_on_malformed_payload():
    client, _ = make_client({"/weather": {"weather": []}})
    assert client.get_current(42.9, 143.2) is None


def test_geocode_returns_first_match():
    client, session = make_client({"/direct": [{"name": "Obihiro", "lat": 42.92, "lon": 143.2}]})

    assert client.geocode("帯広市, Japan") == Coordinates(lat=42.92, lon=143.2)
    call = session.calls[0]
    assert call["url"] == "https://api.openweathermap.org/geo/1.0/direct"
    assert call["params"] == {"q": "帯広市, Japan", "limit": 1, "appid": "test-key"}


def test_geocode_returns_none_without_match():
    client, _ = make_client({"/direct": []})
    assert client.geocode("nowhere") is None


def test_geocode_returns_none_on_error():
    client, _ = make_client({"/direct": requests.Timeout("slow")})
    assert client.geocode("帯広市") is None


def test_get_forecast_aggregates_days():
    client, session = make_client({"/forecast": {"list": forecast_feed(days=6)}})

    forecast = client.get_forecast(42.9, 143.2)

    assert len(forecast) == 5
    assert forecast == sorted(forecast, key=lambda d: d.date)
    assert session.calls[0]["params"]["units"] == "metric"


def test_get_forecast_returns_empty_on_error():
    client, _ = make_client({"/forecast": FakeResponse({}, status_code=401)})
    assert client.get_forecast(42.9, 143.2) == []


def test_missing_api_key_skips_network(current_payload):
    """Without a key every call returns its empty result and nothing is requested."""
    client, session = make_client(
        {"/weather": current_payload, "/forecast": {"list": forecast_feed(days=1)}, "/direct": []},
        config=OpenWeatherConfig(api_key=""),
    )

    assert client.is_configured is False
    assert client.geocode("帯広市") is None
    assert client.get_current(42.9, 143.2) is None
    assert client.get_forecast(42.9, 143.2) == []
    assert session.calls == []


def test_config_from_settings_ignores_unknown_keys():
    config = OpenWeatherConfig.from_settings(
        {"api_key": "abc", "lang": "en", "location_suffix": ", Japan"}
    )
    assert config.api_key == "abc"
    assert config.lang == "en"
    assert config.units == "metric"
