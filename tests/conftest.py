"""Shared fixtures and fakes."""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
import requests

from src.domain.entities.coordinates import Coordinates
from src.domain.entities.weather_data import WeatherData
from src.domain.repositories.weather_source import WeatherSource
from src.infrastructure.repositories.in_memory_repositories import (
    InMemoryFarmRepository,
    InMemoryWeatherRecordRepository,
)

TODAY = date(2024, 6, 1)


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload: Any, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        return self.payload


class FakeSession:
    """Records GET calls and answers them from a URL-suffix routing table."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = routes or {}
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params=None, timeout=None) -> FakeResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        for suffix, answer in self.routes.items():
            if url.endswith(suffix):
                if isinstance(answer, Exception):
                    raise answer
                if isinstance(answer, FakeResponse):
                    return answer
                return FakeResponse(answer)
        return FakeResponse({"message": "not found"}, status_code=404)


class FakeWeatherSource(WeatherSource):
    """In-process weather source with canned answers and call counters."""

    def __init__(
        self,
        coordinates: Optional[Coordinates] = Coordinates(lat=42.92, lon=143.2),
        current: Optional[WeatherData] = None,
        forecast: Optional[List[WeatherData]] = None,
        configured: bool = True,
    ):
        self.coordinates = coordinates
        self.current = current
        self.forecast = forecast or []
        self.configured = configured
        self.geocode_calls: List[str] = []
        self.current_calls = 0
        self.forecast_calls = 0

    @property
    def is_configured(self) -> bool:
        return self.configured

    def geocode(self, location: str) -> Optional[Coordinates]:
        self.geocode_calls.append(location)
        return self.coordinates

    def get_current(self, lat: float, lon: float) -> Optional[WeatherData]:
        self.current_calls += 1
        return self.current

    def get_forecast(self, lat: float, lon: float) -> List[WeatherData]:
        self.forecast_calls += 1
        return list(self.forecast)


def forecast_sample(
    when: datetime,
    temp: float,
    rain_3h: Optional[float] = None,
    temp_min: Optional[float] = None,
    temp_max: Optional[float] = None,
    humidity: float = 70,
    description: str = "曇りがち",
) -> Dict[str, Any]:
    """Build one /forecast list item."""
    sample = {
        "dt": int(when.timestamp()),
        "main": {
            "temp": temp,
            "temp_min": temp if temp_min is None else temp_min,
            "temp_max": temp if temp_max is None else temp_max,
            "humidity": humidity,
            "pressure": 1012,
        },
        "weather": [{"main": "Clouds", "description": description}],
        "wind": {"speed": 3.4},
    }
    if rain_3h is not None:
        sample["rain"] = {"3h": rain_3h}
    return sample


def forecast_feed(days: int, start: datetime = datetime(2024, 6, 1, tzinfo=timezone.utc)) -> List[Dict[str, Any]]:
    """Eight 3-hourly samples per day for ``days`` days."""
    return [
        forecast_sample(start + timedelta(hours=3 * i), temp=15.0 + i % 8, rain_3h=0.5)
        for i in range(days * 8)
    ]


@pytest.fixture
def current_payload() -> Dict[str, Any]:
    return {
        "main": {
            "temp": 21.5,
            "temp_min": 17.0,
            "temp_max": 24.0,
            "humidity": 65,
            "pressure": 1009,
        },
        "weather": [{"main": "Rain", "description": "小雨"}],
        "wind": {"speed": 4.1},
        "rain": {"1h": 2.0, "3h": 5.0},
        "dt": 1717200000,
    }


@pytest.fixture
def today_observation() -> WeatherData:
    return WeatherData(
        date=TODAY,
        max_temperature=24.0,
        min_temperature=17.0,
        rainfall=2.0,
        humidity=65,
        wind_speed=4.1,
        soil_temperature=19.5,
        weather_condition="小雨",
        pressure=1009,
    )


@pytest.fixture
def farm_repo() -> InMemoryFarmRepository:
    return InMemoryFarmRepository()


@pytest.fixture
def weather_repo() -> InMemoryWeatherRecordRepository:
    return InMemoryWeatherRecordRepository()
