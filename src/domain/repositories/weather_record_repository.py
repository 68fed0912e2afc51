"""Weather record repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from ..entities.weather_record import WeatherRecord


class WeatherRecordRepository(ABC):
    """Abstract repository for daily weather records keyed by (farm_id, date)."""

    @abstractmethod
    def get(self, farm_id: str, day: date) -> Optional[WeatherRecord]:
        """
        Retrieve the record for a farm and calendar day.

        Args:
            farm_id: Farm identifier
            day: Calendar day

        Returns:
            The WeatherRecord, or None if it does not exist
        """
        pass

    @abstractmethod
    def list(self, farm_id: Optional[str] = None, limit: Optional[int] = None) -> List[WeatherRecord]:
        """
        Retrieve records ordered by date, newest first.

        Args:
            farm_id: Filter by farm (optional)
            limit: Maximum number of records (optional)

        Returns:
            List of WeatherRecord entities
        """
        pass

    @abstractmethod
    def insert(self, record: WeatherRecord) -> WeatherRecord:
        """
        Insert a new record.

        Raises:
            DuplicateRecordError: If a record with the same (farm_id, date) exists
        """
        pass

    @abstractmethod
    def upsert(self, record: WeatherRecord) -> WeatherRecord:
        """
        Insert a record or overwrite every field of the record with the same
        (farm_id, date). The stored id of an existing record is kept.

        Args:
            record: Record to store

        Returns:
            The stored WeatherRecord
        """
        pass

    @abstractmethod
    def delete(self, farm_id: str, day: Optional[date] = None) -> int:
        """
        Delete records for a farm.

        Args:
            farm_id: Farm identifier
            day: Only delete the record for this day (optional)

        Returns:
            Number of records deleted
        """
        pass
