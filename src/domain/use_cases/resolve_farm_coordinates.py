"""Use case for resolving and caching a farm's coordinates."""

import logging
from typing import Optional
from ..entities.coordinates import Coordinates
from ..entities.farm import Farm
from ..repositories.farm_repository import FarmRepository
from ..repositories.weather_source import WeatherSource

logger = logging.getLogger(__name__)


class ResolveFarmCoordinatesUseCase:
    """Use case to look up a farm's coordinates, geocoding only on a cache miss."""

    def __init__(
        self,
        farm_repository: FarmRepository,
        weather_source: WeatherSource,
        location_suffix: str = "",
    ):
        """
        Initialize use case.

        Args:
            farm_repository: Repository used to cache resolved coordinates
            weather_source: Source providing geocoding
            location_suffix: Text appended to the farm location before
                geocoding (e.g. ', Japan')
        """
        self.farm_repository = farm_repository
        self.weather_source = weather_source
        self.location_suffix = location_suffix

    def execute(self, farm: Farm) -> Optional[Coordinates]:
        """
        Execute the use case.

        Args:
            farm: Farm whose coordinates are needed

        Returns:
            Coordinates, or None if the location could not be geocoded
        """
        if farm.has_coordinates:
            return farm.coordinates

        query = f"{farm.location}{self.location_suffix}"
        logger.info(f"Geocoding farm {farm.id}: {query}")
        coordinates = self.weather_source.geocode(query)
        if coordinates is None:
            logger.warning(f"No coordinates found for farm {farm.id} ({query})")
            return None

        self.farm_repository.upsert(farm.with_coordinates(coordinates))
        logger.info(f"Cached coordinates {coordinates} on farm {farm.id}")
        return coordinates
