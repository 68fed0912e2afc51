"""OpenWeatherMap weather source implementation."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Optional

import requests

from ...domain.entities.coordinates import Coordinates
from ...domain.entities.weather_data import WeatherData
from ...domain.repositories.weather_source import WeatherSource
from ...domain.use_cases.aggregate_forecast import (
    SOIL_TEMPERATURE_OFFSET,
    AggregateForecastUseCase,
    first_description,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenWeatherConfig:
    """Connection settings for the OpenWeatherMap API."""

    api_key: str = ""
    base_url: str = "https://api.openweathermap.org/data/2.5"
    geo_url: str = "https://api.openweathermap.org/geo/1.0"
    units: str = "metric"
    lang: str = "ja"
    timeout: float = 10.0
    forecast_days: int = 5

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "OpenWeatherConfig":
        """Create config from a settings dictionary, ignoring unknown keys."""
        known = {name: settings[name] for name in cls.__dataclass_fields__ if name in settings}
        return cls(**known)


def select_rainfall(rain: Optional[Dict[str, float]]) -> float:
    """Pick the 1-hour rainfall bucket, falling back to the 3-hour bucket, else 0."""
    rain = rain or {}
    if rain.get("1h") is not None:
        return rain["1h"]
    if rain.get("3h") is not None:
        return rain["3h"]
    return 0.0


def normalize_current_weather(
    payload: Dict[str, Any],
    today: date,
    soil_temperature_offset: float = SOIL_TEMPERATURE_OFFSET,
) -> WeatherData:
    """
    Map a current-weather response to a daily observation.

    Args:
        payload: Decoded JSON body of the /weather endpoint
        today: Calendar day the observation is recorded under
        soil_temperature_offset: Degrees subtracted from air temperature

    Returns:
        WeatherData for ``today`` (sunshine hours are not set here)
    """
    main = payload["main"]
    return WeatherData(
        date=today,
        max_temperature=main["temp_max"],
        min_temperature=main["temp_min"],
        rainfall=select_rainfall(payload.get("rain")),
        humidity=main.get("humidity"),
        wind_speed=(payload.get("wind") or {}).get("speed"),
        soil_temperature=main["temp"] - soil_temperature_offset,
        weather_condition=first_description(payload),
        pressure=main.get("pressure"),
    )


class OpenWeatherClient(WeatherSource):
    """Weather source backed by the OpenWeatherMap REST API."""

    def __init__(
        self,
        config: OpenWeatherConfig,
        session: Optional[requests.Session] = None,
        today: Callable[[], date] = date.today,
    ):
        """
        Initialize client.

        Args:
            config: API key, endpoints and request options
            session: HTTP session to issue requests with (a new one by default)
            today: Clock returning the local calendar day
        """
        self.config = config
        self.session = session or requests.Session()
        self.today = today
        self.aggregate_forecast = AggregateForecastUseCase(max_days=config.forecast_days)

    @property
    def is_configured(self) -> bool:
        return bool(self.config.api_key)

    def _get(self, url: str, params: Dict[str, Any]) -> Any:
        params = dict(params, appid=self.config.api_key)
        response = self.session.get(url, params=params, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def _weather_params(self, lat: float, lon: float) -> Dict[str, Any]:
        return {
            "lat": lat,
            "lon": lon,
            "units": self.config.units,
            "lang": self.config.lang,
        }

    def geocode(self, location: str) -> Optional[Coordinates]:
        """Resolve a location through the direct geocoding endpoint."""
        if not self.is_configured:
            logger.error("Weather API key is not configured")
            return None

        try:
            matches = self._get(f"{self.config.geo_url}/direct", {"q": location, "limit": 1})
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Location coordinates fetch error for {location!r}: {e}")
            return None

        if not matches:
            return None
        return Coordinates(lat=matches[0]["lat"], lon=matches[0]["lon"])

    def get_current(self, lat: float, lon: float) -> Optional[WeatherData]:
        """Fetch current conditions and normalize them to today's observation."""
        if not self.is_configured:
            logger.error("Weather API key is not configured")
            return None

        try:
            payload = self._get(f"{self.config.base_url}/weather", self._weather_params(lat, lon))
            return normalize_current_weather(payload, self.today())
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error(f"Current weather fetch error at ({lat}, {lon}): {e}")
            return None

    def get_forecast(self, lat: float, lon: float) -> List[WeatherData]:
        """Fetch the 3-hourly forecast and fold it into daily observations."""
        if not self.is_configured:
            logger.error("Weather API key is not configured")
            return []

        try:
            payload = self._get(f"{self.config.base_url}/forecast", self._weather_params(lat, lon))
            return self.aggregate_forecast.execute(payload.get("list") or [])
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error(f"Weather forecast fetch error at ({lat}, {lon}): {e}")
            return []
