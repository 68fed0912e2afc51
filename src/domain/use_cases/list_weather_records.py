"""Use case for listing stored weather records."""

import logging
from typing import List, Optional
from ..entities.weather_record import WeatherRecord
from ..repositories.weather_record_repository import WeatherRecordRepository

logger = logging.getLogger(__name__)


class ListWeatherRecordsUseCase:
    """Use case to list recent weather records, newest first."""

    def __init__(self, repository: WeatherRecordRepository, default_limit: int = 20):
        self.repository = repository
        self.default_limit = default_limit

    def execute(self, farm_id: Optional[str] = None, limit: Optional[int] = None) -> List[WeatherRecord]:
        if limit is None:
            limit = self.default_limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        records = self.repository.list(farm_id=farm_id, limit=limit)
        logger.info(f"Listed {len(records)} weather records (farm={farm_id}, limit={limit})")
        return records
