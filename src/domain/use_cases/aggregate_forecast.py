"""Use case for folding 3-hourly forecast samples into daily observations."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from ..entities.weather_data import WeatherData

logger = logging.getLogger(__name__)

SOIL_TEMPERATURE_OFFSET = 2.0


@dataclass
class _DailyAccumulator:
    """Running aggregate for one calendar day."""

    date: date
    max_temperature: float
    min_temperature: float
    rainfall: float
    humidity: Optional[float]
    wind_speed: Optional[float]
    weather_condition: Optional[str]
    pressure: Optional[float]
    soil_temperature: Optional[float]

    def add(self, max_temperature: float, min_temperature: float, rainfall: float) -> None:
        self.max_temperature = max(self.max_temperature, max_temperature)
        self.min_temperature = min(self.min_temperature, min_temperature)
        self.rainfall += rainfall

    def to_weather_data(self) -> WeatherData:
        return WeatherData(
            date=self.date,
            max_temperature=self.max_temperature,
            min_temperature=self.min_temperature,
            rainfall=self.rainfall,
            humidity=self.humidity,
            wind_speed=self.wind_speed,
            soil_temperature=self.soil_temperature,
            weather_condition=self.weather_condition,
            pressure=self.pressure,
        )


def sample_date(timestamp: int) -> date:
    """Calendar day (UTC) of a provider timestamp in unix seconds."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()


def first_description(sample: Dict[str, Any]) -> Optional[str]:
    """Description of the first weather entry of a sample, if any."""
    weather = sample.get("weather") or []
    if weather:
        return weather[0].get("description")
    return None


class AggregateForecastUseCase:
    """Use case to reduce forecast samples to at most one record per day."""

    def __init__(self, max_days: int = 5, soil_temperature_offset: float = SOIL_TEMPERATURE_OFFSET):
        """
        Initialize use case.

        Args:
            max_days: Number of distinct days to keep (default: 5)
            soil_temperature_offset: Degrees subtracted from air temperature
                to estimate soil temperature
        """
        self.max_days = max_days
        self.soil_temperature_offset = soil_temperature_offset

    def execute(self, samples: Iterable[Dict[str, Any]]) -> List[WeatherData]:
        """
        Execute the aggregation.

        Temperatures fold to max/min, 3-hour rainfall is summed, and the
        remaining fields come from the first sample seen for each day.

        Args:
            samples: Provider forecast list items, in chronological order

        Returns:
            Daily WeatherData for the first ``max_days`` days, in first-seen order
        """
        days: Dict[date, _DailyAccumulator] = {}

        for sample in samples:
            day = sample_date(sample["dt"])
            main = sample["main"]
            rainfall = (sample.get("rain") or {}).get("3h") or 0.0

            bucket = days.get(day)
            if bucket is None:
                days[day] = _DailyAccumulator(
                    date=day,
                    max_temperature=main["temp_max"],
                    min_temperature=main["temp_min"],
                    rainfall=rainfall,
                    humidity=main.get("humidity"),
                    wind_speed=(sample.get("wind") or {}).get("speed"),
                    weather_condition=first_description(sample),
                    pressure=main.get("pressure"),
                    soil_temperature=main["temp"] - self.soil_temperature_offset,
                )
            else:
                bucket.add(main["temp_max"], main["temp_min"], rainfall)

        result = [bucket.to_weather_data() for bucket in list(days.values())[: self.max_days]]
        logger.info(f"Aggregated forecast samples into {len(result)} days (of {len(days)} seen)")
        return result
