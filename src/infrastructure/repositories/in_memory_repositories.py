"""In-memory repository implementations."""

import logging
from dataclasses import replace
from datetime import date
from typing import Dict, List, Optional, Tuple

from ...domain.entities.farm import Farm
from ...domain.entities.weather_record import WeatherRecord
from ...domain.exceptions import DuplicateRecordError
from ...domain.repositories.farm_repository import FarmRepository
from ...domain.repositories.weather_record_repository import WeatherRecordRepository

logger = logging.getLogger(__name__)


class InMemoryFarmRepository(FarmRepository):
    """Farm repository held in a dictionary keyed by farm id."""

    def __init__(self):
        self._farms: Dict[str, Farm] = {}

    def get(self, farm_id: str) -> Optional[Farm]:
        farm = self._farms.get(farm_id)
        return replace(farm) if farm else None

    def list(self) -> List[Farm]:
        farms = sorted(self._farms.values(), key=lambda f: f.created_at, reverse=True)
        return [replace(f) for f in farms]

    def insert(self, farm: Farm) -> Farm:
        if farm.id in self._farms:
            raise DuplicateRecordError(f"Farm already exists: {farm.id}")
        self._farms[farm.id] = replace(farm)
        return replace(farm)

    def upsert(self, farm: Farm) -> Farm:
        self._farms[farm.id] = replace(farm)
        return replace(farm)

    def delete(self, farm_id: str) -> bool:
        return self._farms.pop(farm_id, None) is not None


class InMemoryWeatherRecordRepository(WeatherRecordRepository):
    """Weather record repository held in a dictionary keyed by (farm_id, date)."""

    def __init__(self):
        self._records: Dict[Tuple[str, date], WeatherRecord] = {}

    def get(self, farm_id: str, day: date) -> Optional[WeatherRecord]:
        record = self._records.get((farm_id, day))
        return replace(record) if record else None

    def list(self, farm_id: Optional[str] = None, limit: Optional[int] = None) -> List[WeatherRecord]:
        records = [r for r in self._records.values() if farm_id is None or r.farm_id == farm_id]
        records.sort(key=lambda r: r.date, reverse=True)
        if limit is not None:
            records = records[:limit]
        return [replace(r) for r in records]

    def insert(self, record: WeatherRecord) -> WeatherRecord:
        if record.key in self._records:
            raise DuplicateRecordError(f"Weather record already exists: {record}")
        self._records[record.key] = replace(record)
        return replace(record)

    def upsert(self, record: WeatherRecord) -> WeatherRecord:
        existing = self._records.get(record.key)
        stored = replace(record, id=existing.id) if existing else replace(record)
        self._records[record.key] = stored
        return replace(stored)

    def delete(self, farm_id: str, day: Optional[date] = None) -> int:
        keys = [k for k in self._records if k[0] == farm_id and (day is None or k[1] == day)]
        for key in keys:
            del self._records[key]
        return len(keys)
