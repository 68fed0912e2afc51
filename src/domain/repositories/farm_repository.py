"""Farm repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.farm import Farm


class FarmRepository(ABC):
    """Abstract repository for farm data access."""

    @abstractmethod
    def get(self, farm_id: str) -> Optional[Farm]:
        """
        Retrieve a farm by id.

        Args:
            farm_id: Farm identifier

        Returns:
            The Farm, or None if it does not exist
        """
        pass

    @abstractmethod
    def list(self) -> List[Farm]:
        """
        Retrieve all farms, newest first.

        Returns:
            List of Farm entities
        """
        pass

    @abstractmethod
    def insert(self, farm: Farm) -> Farm:
        """
        Insert a new farm.

        Args:
            farm: Farm to insert

        Returns:
            The stored Farm

        Raises:
            DuplicateRecordError: If a farm with the same id exists
        """
        pass

    @abstractmethod
    def upsert(self, farm: Farm) -> Farm:
        """
        Insert a farm or replace the existing farm with the same id.

        Args:
            farm: Farm to store

        Returns:
            The stored Farm
        """
        pass

    @abstractmethod
    def delete(self, farm_id: str) -> bool:
        """
        Delete a farm.

        Args:
            farm_id: Farm identifier

        Returns:
            True if a farm was deleted, False otherwise
        """
        pass
