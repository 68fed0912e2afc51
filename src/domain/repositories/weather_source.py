"""Weather source interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.coordinates import Coordinates
from ..entities.weather_data import WeatherData


class WeatherSource(ABC):
    """Abstract source of geocoding, current conditions and forecasts.

    Implementations never raise for provider failures: they log and return
    None (or an empty list for forecasts).
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials for the provider are available."""
        pass

    @abstractmethod
    def geocode(self, location: str) -> Optional[Coordinates]:
        """
        Resolve a free-text location to coordinates.

        Args:
            location: Place description

        Returns:
            Best-match Coordinates, or None if nothing matched
        """
        pass

    @abstractmethod
    def get_current(self, lat: float, lon: float) -> Optional[WeatherData]:
        """
        Fetch present weather conditions as a daily observation.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            WeatherData dated today, or None if unavailable
        """
        pass

    @abstractmethod
    def get_forecast(self, lat: float, lon: float) -> List[WeatherData]:
        """
        Fetch the daily forecast.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Daily WeatherData in chronological order (empty if unavailable)
        """
        pass
