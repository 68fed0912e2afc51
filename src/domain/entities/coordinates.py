"""Coordinates entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    def __str__(self) -> str:
        return f"({self.lat:.4f}, {self.lon:.4f})"
