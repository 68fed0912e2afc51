"""Use case for viewing a farm's daily forecast."""

import logging
from typing import List

from ..entities.weather_data import WeatherData
from ..exceptions import LocationNotFoundError
from ..repositories.farm_repository import FarmRepository
from ..repositories.weather_source import WeatherSource
from .ingest_weather import ensure_configured, load_farm
from .resolve_farm_coordinates import ResolveFarmCoordinatesUseCase

logger = logging.getLogger(__name__)


class GetForecastUseCase:
    """Use case to fetch the forecast for a farm without persisting it."""

    def __init__(
        self,
        farm_repository: FarmRepository,
        weather_source: WeatherSource,
        resolve_coordinates: ResolveFarmCoordinatesUseCase,
    ):
        self.farm_repository = farm_repository
        self.weather_source = weather_source
        self.resolve_coordinates = resolve_coordinates

    def execute(self, farm_id: str) -> List[WeatherData]:
        """
        Execute the use case.

        Args:
            farm_id: Farm identifier

        Returns:
            Daily forecast, empty when the provider had nothing to offer
        """
        ensure_configured(self.weather_source)
        farm = load_farm(self.farm_repository, farm_id)

        coordinates = self.resolve_coordinates.execute(farm)
        if coordinates is None:
            raise LocationNotFoundError(farm.location)

        forecast = self.weather_source.get_forecast(coordinates.lat, coordinates.lon)
        logger.info(f"Forecast for farm {farm_id}: {len(forecast)} days")
        return forecast
