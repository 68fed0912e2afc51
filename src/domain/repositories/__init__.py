"""Repository interfaces."""

from .farm_repository import FarmRepository
from .weather_record_repository import WeatherRecordRepository
from .weather_source import WeatherSource

__all__ = [
    "FarmRepository",
    "WeatherRecordRepository",
    "WeatherSource",
]
