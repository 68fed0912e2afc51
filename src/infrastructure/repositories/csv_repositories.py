"""CSV file repository implementations backed by pandas."""

import logging
import threading
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ...domain.entities.farm import Farm
from ...domain.entities.weather_record import WEATHER_COLUMNS, WeatherRecord
from ...domain.exceptions import DuplicateRecordError
from ...domain.repositories.farm_repository import FarmRepository
from ...domain.repositories.weather_record_repository import WeatherRecordRepository

logger = logging.getLogger(__name__)

FARM_COLUMNS = ["id", "name", "location", "area", "owner_id", "latitude", "longitude", "created_at"]
RECORD_COLUMNS = ["id", "farm_id"] + WEATHER_COLUMNS
TEXT_COLUMNS = ("id", "farm_id", "owner_id", "name", "location", "date", "weather_condition", "created_at")

_FILE_LOCKS: Dict[Path, threading.Lock] = {}
_FILE_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    """One lock per data file, shared by every repository opened on it."""
    key = path.resolve()
    with _FILE_LOCKS_GUARD:
        return _FILE_LOCKS.setdefault(key, threading.Lock())


class _CsvTable:
    """A CSV file read and rewritten whole on every change.

    Callers hold ``lock`` across each read-modify-write.
    """

    def __init__(self, data_file: str, columns: List[str]):
        self.data_file = Path(data_file)
        self.columns = columns
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        self.lock = _lock_for(self.data_file)

    def read(self) -> pd.DataFrame:
        if not self.data_file.exists():
            return pd.DataFrame(columns=self.columns)
        text_columns = {c: str for c in TEXT_COLUMNS if c in self.columns}
        df = pd.read_csv(
            self.data_file, dtype=text_columns, keep_default_na=False, na_values=[""]
        )
        return df.reindex(columns=self.columns)

    def write(self, df: pd.DataFrame) -> None:
        df[self.columns].to_csv(self.data_file, index=False)
        logger.debug(f"Wrote {len(df)} rows to {self.data_file}")

    @staticmethod
    def rows(df: pd.DataFrame) -> List[Dict[str, Any]]:
        """Rows as dictionaries with missing values mapped to None."""
        return df.astype(object).where(pd.notna(df), None).to_dict("records")

    def append(self, df: pd.DataFrame, row: Dict[str, Any]) -> pd.DataFrame:
        new_row = pd.DataFrame([row], columns=self.columns)
        if df.empty:
            return new_row
        return pd.concat([df, new_row], ignore_index=True)


def _farm_from_row(row: Dict[str, Any]) -> Farm:
    return Farm(
        id=str(row["id"]),
        name=row["name"],
        location=row["location"],
        area=float(row["area"]) if row["area"] is not None else None,
        owner_id=row["owner_id"],
        latitude=float(row["latitude"]) if row["latitude"] is not None else None,
        longitude=float(row["longitude"]) if row["longitude"] is not None else None,
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def _farm_to_row(farm: Farm) -> Dict[str, Any]:
    return {
        "id": farm.id,
        "name": farm.name,
        "location": farm.location,
        "area": farm.area,
        "owner_id": farm.owner_id,
        "latitude": farm.latitude,
        "longitude": farm.longitude,
        "created_at": farm.created_at.isoformat(),
    }


class CsvFarmRepository(FarmRepository):
    """Repository for farms stored in a CSV file."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to the farms CSV file (created on first write)
        """
        self.table = _CsvTable(data_file, FARM_COLUMNS)

    def get(self, farm_id: str) -> Optional[Farm]:
        with self.table.lock:
            df = self.table.read()
        matches = df[df["id"] == farm_id]
        if matches.empty:
            return None
        return _farm_from_row(self.table.rows(matches)[0])

    def list(self) -> List[Farm]:
        with self.table.lock:
            df = self.table.read()
        farms = [_farm_from_row(row) for row in self.table.rows(df)]
        return sorted(farms, key=lambda f: f.created_at, reverse=True)

    def insert(self, farm: Farm) -> Farm:
        with self.table.lock:
            df = self.table.read()
            if (df["id"] == farm.id).any():
                raise DuplicateRecordError(f"Farm already exists: {farm.id}")
            self.table.write(self.table.append(df, _farm_to_row(farm)))
        logger.info(f"Inserted farm {farm.id} into {self.table.data_file}")
        return farm

    def upsert(self, farm: Farm) -> Farm:
        with self.table.lock:
            df = self.table.read()
            df = df[df["id"] != farm.id]
            self.table.write(self.table.append(df, _farm_to_row(farm)))
        return farm

    def delete(self, farm_id: str) -> bool:
        with self.table.lock:
            df = self.table.read()
            remaining = df[df["id"] != farm_id]
            if len(remaining) == len(df):
                return False
            self.table.write(remaining)
        return True


class CsvWeatherRecordRepository(WeatherRecordRepository):
    """Repository for daily weather records stored in a CSV file."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to the weather records CSV file (created on first write)
        """
        self.table = _CsvTable(data_file, RECORD_COLUMNS)

    def _key_mask(self, df: pd.DataFrame, farm_id: str, day: Optional[date] = None) -> pd.Series:
        mask = df["farm_id"] == farm_id
        if day is not None:
            mask &= df["date"] == day.isoformat()
        return mask

    def get(self, farm_id: str, day: date) -> Optional[WeatherRecord]:
        with self.table.lock:
            df = self.table.read()
        matches = df[self._key_mask(df, farm_id, day)]
        if matches.empty:
            return None
        return WeatherRecord.from_row(self.table.rows(matches)[0])

    def list(self, farm_id: Optional[str] = None, limit: Optional[int] = None) -> List[WeatherRecord]:
        with self.table.lock:
            df = self.table.read()
        if farm_id is not None:
            df = df[df["farm_id"] == farm_id]
        df = df.sort_values("date", ascending=False, kind="stable")
        if limit is not None:
            df = df.head(limit)
        return [WeatherRecord.from_row(row) for row in self.table.rows(df)]

    def insert(self, record: WeatherRecord) -> WeatherRecord:
        with self.table.lock:
            df = self.table.read()
            if self._key_mask(df, record.farm_id, record.date).any():
                raise DuplicateRecordError(f"Weather record already exists: {record}")
            self.table.write(self.table.append(df, record.to_row()))
        return record

    def upsert(self, record: WeatherRecord) -> WeatherRecord:
        with self.table.lock:
            df = self.table.read()
            mask = self._key_mask(df, record.farm_id, record.date)
            if mask.any():
                record = WeatherRecord(
                    id=str(df.loc[mask, "id"].iloc[0]),
                    farm_id=record.farm_id,
                    observation=record.observation,
                )
            self.table.write(self.table.append(df[~mask], record.to_row()))
        logger.info(f"Upserted weather record {record} into {self.table.data_file}")
        return record

    def delete(self, farm_id: str, day: Optional[date] = None) -> int:
        with self.table.lock:
            df = self.table.read()
            mask = self._key_mask(df, farm_id, day)
            removed = int(mask.sum())
            if removed:
                self.table.write(df[~mask])
        return removed
