"""Concrete repository implementations."""

from .in_memory_repositories import InMemoryFarmRepository, InMemoryWeatherRecordRepository
from .csv_repositories import CsvFarmRepository, CsvWeatherRecordRepository

__all__ = [
    "InMemoryFarmRepository",
    "InMemoryWeatherRecordRepository",
    "CsvFarmRepository",
    "CsvWeatherRecordRepository",
]
