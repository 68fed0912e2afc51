"""Use cases - core business operations."""

from .estimate_sunshine import estimate_sunshine_hours
from .aggregate_forecast import AggregateForecastUseCase
from .resolve_farm_coordinates import ResolveFarmCoordinatesUseCase
from .ingest_weather import IngestionResult, IngestWeatherUseCase
from .get_forecast import GetForecastUseCase
from .list_weather_records import ListWeatherRecordsUseCase
from .manage_farms import ManageFarmsUseCase

__all__ = [
    "estimate_sunshine_hours",
    "AggregateForecastUseCase",
    "ResolveFarmCoordinatesUseCase",
    "IngestionResult",
    "IngestWeatherUseCase",
    "GetForecastUseCase",
    "ListWeatherRecordsUseCase",
    "ManageFarmsUseCase",
]
