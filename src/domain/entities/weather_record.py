"""Weather record entity."""

from dataclasses import dataclass, field, fields
import datetime
from typing import Any, Dict, Tuple
import uuid

from .weather_data import WeatherData

WEATHER_COLUMNS = [f.name for f in fields(WeatherData)]


@dataclass
class WeatherRecord:
    """A daily weather observation stored for a farm.

    Records are uniquely identified by ``(farm_id, date)``.
    """

    farm_id: str
    observation: WeatherData
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def date(self) -> datetime.date:
        return self.observation.date

    @property
    def key(self) -> Tuple[str, datetime.date]:
        """Natural key used for upserts."""
        return (self.farm_id, self.observation.date)

    def to_row(self) -> Dict[str, Any]:
        """Flatten into the persisted column layout."""
        row = {"id": self.id, "farm_id": self.farm_id}
        row.update(self.observation.to_dict())
        return row

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "WeatherRecord":
        """Create a WeatherRecord from a flat row."""
        values = {name: row.get(name) for name in WEATHER_COLUMNS}
        if isinstance(values["date"], str):
            values["date"] = datetime.date.fromisoformat(values["date"])
        return cls(
            id=str(row["id"]),
            farm_id=str(row["farm_id"]),
            observation=WeatherData(**values),
        )

    def __str__(self) -> str:
        return f"{self.farm_id}_{self.date.isoformat()}"
