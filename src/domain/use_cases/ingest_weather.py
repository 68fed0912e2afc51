"""Use case for ingesting today's weather for a farm."""

import logging
from dataclasses import dataclass, field, replace
from typing import List

from ..entities.coordinates import Coordinates
from ..entities.farm import Farm
from ..entities.weather_data import WeatherData
from ..entities.weather_record import WeatherRecord
from ..exceptions import (
    ConfigurationMissingError,
    FarmNotFoundError,
    LocationNotFoundError,
    WeatherUnavailableError,
)
from ..repositories.farm_repository import FarmRepository
from ..repositories.weather_record_repository import WeatherRecordRepository
from ..repositories.weather_source import WeatherSource
from .estimate_sunshine import estimate_sunshine_hours
from .resolve_farm_coordinates import ResolveFarmCoordinatesUseCase

logger = logging.getLogger(__name__)


@dataclass
class IngestionResult:
    """Outcome of a weather ingestion run."""

    farm: Farm
    coordinates: Coordinates
    record: WeatherRecord
    forecast: List[WeatherData] = field(default_factory=list)


def load_farm(farm_repository: FarmRepository, farm_id: str) -> Farm:
    """Fetch a farm or raise FarmNotFoundError."""
    farm = farm_repository.get(farm_id)
    if farm is None:
        raise FarmNotFoundError(farm_id)
    return farm


def ensure_configured(weather_source: WeatherSource) -> None:
    """Raise ConfigurationMissingError when the source has no credentials."""
    if not weather_source.is_configured:
        raise ConfigurationMissingError("Weather API key is not configured")


class IngestWeatherUseCase:
    """Use case to fetch current conditions for a farm and store them as today's record."""

    def __init__(
        self,
        farm_repository: FarmRepository,
        weather_repository: WeatherRecordRepository,
        weather_source: WeatherSource,
        resolve_coordinates: ResolveFarmCoordinatesUseCase,
    ):
        self.farm_repository = farm_repository
        self.weather_repository = weather_repository
        self.weather_source = weather_source
        self.resolve_coordinates = resolve_coordinates

    def execute(self, farm_id: str) -> IngestionResult:
        """
        Execute the use case.

        Args:
            farm_id: Farm identifier

        Returns:
            IngestionResult with the stored record and the daily forecast

        Raises:
            ConfigurationMissingError: No API key is configured
            FarmNotFoundError: The farm does not exist
            LocationNotFoundError: The farm location could not be geocoded
            WeatherUnavailableError: Current conditions could not be fetched
        """
        ensure_configured(self.weather_source)
        farm = load_farm(self.farm_repository, farm_id)

        coordinates = self.resolve_coordinates.execute(farm)
        if coordinates is None:
            raise LocationNotFoundError(farm.location)

        logger.info(f"Fetching current weather for farm {farm_id} at {coordinates}")
        current = self.weather_source.get_current(coordinates.lat, coordinates.lon)
        if current is None:
            raise WeatherUnavailableError(
                f"Current weather is unavailable for farm {farm_id}; try again later"
            )

        if current.weather_condition:
            current = replace(
                current, sunshine_hours=estimate_sunshine_hours(current.weather_condition)
            )

        record = self.weather_repository.upsert(WeatherRecord(farm_id=farm_id, observation=current))
        logger.info(f"Stored weather record {record}")

        forecast = self.weather_source.get_forecast(coordinates.lat, coordinates.lon)
        if not forecast:
            logger.warning(f"No forecast available for farm {farm_id}")

        return IngestionResult(
            farm=self.farm_repository.get(farm_id) or farm,
            coordinates=coordinates,
            record=record,
            forecast=forecast,
        )
