"""Domain entities."""

from .coordinates import Coordinates
from .farm import Farm
from .weather_data import WeatherData
from .weather_record import WeatherRecord

__all__ = [
    "Coordinates",
    "Farm",
    "WeatherData",
    "WeatherRecord",
]
