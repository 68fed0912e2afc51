"""Service orchestrating farm registration and weather ingestion."""

import logging
from typing import List, Optional

from ...domain.entities.farm import Farm
from ...domain.entities.weather_data import WeatherData
from ...domain.entities.weather_record import WeatherRecord
from ...domain.repositories.farm_repository import FarmRepository
from ...domain.repositories.weather_record_repository import WeatherRecordRepository
from ...domain.repositories.weather_source import WeatherSource

# Use cases
from ...domain.use_cases.get_forecast import GetForecastUseCase
from ...domain.use_cases.ingest_weather import IngestionResult, IngestWeatherUseCase
from ...domain.use_cases.list_weather_records import ListWeatherRecordsUseCase
from ...domain.use_cases.manage_farms import ManageFarmsUseCase
from ...domain.use_cases.resolve_farm_coordinates import ResolveFarmCoordinatesUseCase

logger = logging.getLogger(__name__)


class FarmWeatherService:
    """Entry point used by the API and CLI for farm and weather operations."""

    def __init__(
        self,
        farm_repo: FarmRepository,
        weather_repo: WeatherRecordRepository,
        weather_source: WeatherSource,
        location_suffix: str = "",
        recent_records_limit: int = 20,
    ):
        self.farm_repo = farm_repo
        self.weather_repo = weather_repo
        self.weather_source = weather_source

        self.manage_farms_uc = ManageFarmsUseCase(farm_repo, weather_repo)
        self.resolve_coordinates_uc = ResolveFarmCoordinatesUseCase(
            farm_repo, weather_source, location_suffix=location_suffix
        )
        self.ingest_weather_uc = IngestWeatherUseCase(
            farm_repo, weather_repo, weather_source, self.resolve_coordinates_uc
        )
        self.get_forecast_uc = GetForecastUseCase(
            farm_repo, weather_source, self.resolve_coordinates_uc
        )
        self.list_records_uc = ListWeatherRecordsUseCase(
            weather_repo, default_limit=recent_records_limit
        )

    # Farms
    def register_farm(
        self,
        name: str,
        location: str,
        area: Optional[float] = None,
        owner_id: Optional[str] = None,
    ) -> Farm:
        return self.manage_farms_uc.register(name, location, area=area, owner_id=owner_id)

    def list_farms(self) -> List[Farm]:
        return self.manage_farms_uc.list()

    def get_farm(self, farm_id: str) -> Farm:
        return self.manage_farms_uc.get(farm_id)

    def delete_farm(self, farm_id: str) -> None:
        self.manage_farms_uc.delete(farm_id)

    # Weather
    def fetch_weather(self, farm_id: str) -> IngestionResult:
        """Fetch today's weather for a farm, store it, and return the forecast."""
        logger.info(f"=== Weather ingestion for farm {farm_id} ===")
        return self.ingest_weather_uc.execute(farm_id)

    def get_forecast(self, farm_id: str) -> List[WeatherData]:
        return self.get_forecast_uc.execute(farm_id)

    def recent_weather_records(
        self, farm_id: Optional[str] = None, limit: Optional[int] = None
    ) -> List[WeatherRecord]:
        return self.list_records_uc.execute(farm_id=farm_id, limit=limit)
