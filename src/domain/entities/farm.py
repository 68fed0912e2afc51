"""Farm entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional
import uuid

from .coordinates import Coordinates


@dataclass
class Farm:
    """Represents a registered farm."""

    name: str
    location: str  # free text, e.g. '北海道帯広市'
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    area: Optional[float] = None  # in hectares
    owner_id: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def has_coordinates(self) -> bool:
        """Whether coordinates have been resolved and cached."""
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinates(self) -> Optional[Coordinates]:
        """Cached coordinates, if any."""
        if self.has_coordinates:
            return Coordinates(lat=self.latitude, lon=self.longitude)
        return None

    def with_coordinates(self, coordinates: Coordinates) -> "Farm":
        """Return a copy of this farm with coordinates set."""
        return replace(self, latitude=coordinates.lat, longitude=coordinates.lon)

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"
