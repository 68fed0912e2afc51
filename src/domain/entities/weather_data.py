"""Weather data entity."""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class WeatherData:
    """Represents one day's weather observation for a location."""

    date: date
    max_temperature: float  # Celsius
    min_temperature: float  # Celsius
    rainfall: float = 0.0  # mm, accumulated
    humidity: Optional[float] = None  # percentage
    wind_speed: Optional[float] = None  # m/s
    sunshine_hours: Optional[float] = None  # hours (estimated)
    soil_temperature: Optional[float] = None  # Celsius (estimated)
    weather_condition: Optional[str] = None  # localized description
    pressure: Optional[float] = None  # hPa

    @property
    def temperature_range(self) -> float:
        """Diurnal temperature range."""
        return self.max_temperature - self.min_temperature

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary with the date in ISO form."""
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data
