"""Use case for registering and removing farms."""

import logging
from typing import List, Optional

from ..entities.farm import Farm
from ..exceptions import FarmNotFoundError
from ..repositories.farm_repository import FarmRepository
from ..repositories.weather_record_repository import WeatherRecordRepository

logger = logging.getLogger(__name__)


class ManageFarmsUseCase:
    """Use case covering the farm registry."""

    def __init__(self, farm_repository: FarmRepository, weather_repository: WeatherRecordRepository):
        self.farm_repository = farm_repository
        self.weather_repository = weather_repository

    def register(
        self,
        name: str,
        location: str,
        area: Optional[float] = None,
        owner_id: Optional[str] = None,
    ) -> Farm:
        """
        Register a new farm.

        Args:
            name: Display name
            location: Free-text location used for geocoding
            area: Area in hectares (optional)
            owner_id: Owning user id (optional)

        Returns:
            The stored Farm
        """
        if not name.strip() or not location.strip():
            raise ValueError("Farm name and location must not be empty")
        farm = self.farm_repository.insert(
            Farm(name=name.strip(), location=location.strip(), area=area, owner_id=owner_id)
        )
        logger.info(f"Registered farm {farm.id}: {farm}")
        return farm

    def list(self) -> List[Farm]:
        return self.farm_repository.list()

    def get(self, farm_id: str) -> Farm:
        farm = self.farm_repository.get(farm_id)
        if farm is None:
            raise FarmNotFoundError(farm_id)
        return farm

    def delete(self, farm_id: str) -> None:
        """Delete a farm together with its weather records."""
        if not self.farm_repository.delete(farm_id):
            raise FarmNotFoundError(farm_id)
        removed = self.weather_repository.delete(farm_id)
        logger.info(f"Deleted farm {farm_id} and {removed} weather records")
