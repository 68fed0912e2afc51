"""FastAPI main application."""

import logging
import datetime
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...application.services.farm_weather_service import FarmWeatherService
from ...domain.entities.farm import Farm
from ...domain.entities.weather_data import WeatherData
from ...domain.entities.weather_record import WeatherRecord
from ...domain.exceptions import (
    ConfigurationMissingError,
    DuplicateRecordError,
    FarmNotFoundError,
    FarmWeatherError,
    LocationNotFoundError,
    WeatherUnavailableError,
)
from ...infrastructure.clients.openweather_client import OpenWeatherClient, OpenWeatherConfig
from ...infrastructure.repositories.csv_repositories import (
    CsvFarmRepository,
    CsvWeatherRecordRepository,
)
from ...infrastructure.repositories.in_memory_repositories import (
    InMemoryFarmRepository,
    InMemoryWeatherRecordRepository,
)
from config.settings import (
    API_SETTINGS,
    FARMS_FILE,
    RECENT_RECORDS_LIMIT,
    STORAGE_SETTINGS,
    WEATHER_API_SETTINGS,
    WEATHER_RECORDS_FILE,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[type, int] = {
    ConfigurationMissingError: 503,
    FarmNotFoundError: 404,
    LocationNotFoundError: 422,
    WeatherUnavailableError: 502,
    DuplicateRecordError: 409,
}


def build_service() -> FarmWeatherService:
    """Wire repositories and the weather client from settings."""
    if STORAGE_SETTINGS["backend"] == "csv":
        farm_repo = CsvFarmRepository(str(FARMS_FILE))
        weather_repo = CsvWeatherRecordRepository(str(WEATHER_RECORDS_FILE))
    else:
        farm_repo = InMemoryFarmRepository()
        weather_repo = InMemoryWeatherRecordRepository()

    weather_source = OpenWeatherClient(OpenWeatherConfig.from_settings(WEATHER_API_SETTINGS))
    return FarmWeatherService(
        farm_repo=farm_repo,
        weather_repo=weather_repo,
        weather_source=weather_source,
        location_suffix=WEATHER_API_SETTINGS["location_suffix"],
        recent_records_limit=RECENT_RECORDS_LIMIT,
    )


# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

service = build_service()


def get_service() -> FarmWeatherService:
    return service


@app.exception_handler(FarmWeatherError)
async def farm_weather_error_handler(request: Request, exc: FarmWeatherError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# Request/Response models
class FarmRequest(BaseModel):
    """Request model for registering a farm."""

    name: str = Field(..., min_length=1, description="Farm name")
    location: str = Field(..., min_length=1, description="Location text, e.g. '北海道帯広市'")
    area: Optional[float] = Field(None, ge=0, description="Area in hectares")
    owner_id: Optional[str] = Field(None, description="Owning user id")


class FarmResponse(BaseModel):
    """Response model for a farm."""

    id: str
    name: str
    location: str
    area: Optional[float] = None
    owner_id: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: datetime.datetime

    @classmethod
    def from_entity(cls, farm: Farm) -> "FarmResponse":
        return cls(
            id=farm.id,
            name=farm.name,
            location=farm.location,
            area=farm.area,
            owner_id=farm.owner_id,
            latitude=farm.latitude,
            longitude=farm.longitude,
            created_at=farm.created_at,
        )


class WeatherResponse(BaseModel):
    """Response model for a daily weather observation."""

    date: datetime.date
    max_temperature: float
    min_temperature: float
    rainfall: float
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    sunshine_hours: Optional[float] = None
    soil_temperature: Optional[float] = None
    weather_condition: Optional[str] = None
    pressure: Optional[float] = None

    @classmethod
    def from_entity(cls, data: WeatherData) -> "WeatherResponse":
        return cls(**data.to_dict())


class WeatherRecordResponse(WeatherResponse):
    """Response model for a stored weather record."""

    id: str
    farm_id: str

    @classmethod
    def from_record(cls, record: WeatherRecord) -> "WeatherRecordResponse":
        return cls(**record.to_row())


class IngestionResponse(BaseModel):
    """Response model for a weather ingestion run."""

    farm: FarmResponse
    record: WeatherRecordResponse
    forecast: List[WeatherResponse]


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": API_SETTINGS["title"],
        "version": API_SETTINGS["version"],
        "endpoints": {
            "farms": "/farms",
            "weather": "/farms/{farm_id}/weather",
            "forecast": "/farms/{farm_id}/forecast",
            "records": "/weather-records",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/farms", response_model=FarmResponse, status_code=201)
def create_farm(request: FarmRequest, svc: FarmWeatherService = Depends(get_service)) -> FarmResponse:
    """Register a farm."""
    try:
        farm = svc.register_farm(
            name=request.name,
            location=request.location,
            area=request.area,
            owner_id=request.owner_id,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return FarmResponse.from_entity(farm)


@app.get("/farms", response_model=List[FarmResponse])
def list_farms(svc: FarmWeatherService = Depends(get_service)) -> List[FarmResponse]:
    """List farms, newest first."""
    return [FarmResponse.from_entity(farm) for farm in svc.list_farms()]


@app.get("/farms/{farm_id}", response_model=FarmResponse)
def get_farm(farm_id: str, svc: FarmWeatherService = Depends(get_service)) -> FarmResponse:
    return FarmResponse.from_entity(svc.get_farm(farm_id))


@app.delete("/farms/{farm_id}", status_code=204)
def delete_farm(farm_id: str, svc: FarmWeatherService = Depends(get_service)) -> None:
    svc.delete_farm(farm_id)


@app.post("/farms/{farm_id}/weather", response_model=IngestionResponse)
def fetch_weather(farm_id: str, svc: FarmWeatherService = Depends(get_service)) -> IngestionResponse:
    """
    Fetch today's weather for a farm, store it, and return the 5-day forecast.

    Re-running for the same day replaces the stored record.
    """
    result = svc.fetch_weather(farm_id)
    return IngestionResponse(
        farm=FarmResponse.from_entity(result.farm),
        record=WeatherRecordResponse.from_record(result.record),
        forecast=[WeatherResponse.from_entity(day) for day in result.forecast],
    )


@app.get("/farms/{farm_id}/forecast", response_model=List[WeatherResponse])
def get_forecast(farm_id: str, svc: FarmWeatherService = Depends(get_service)) -> List[WeatherResponse]:
    """Daily forecast for a farm (not stored)."""
    return [WeatherResponse.from_entity(day) for day in svc.get_forecast(farm_id)]


@app.get("/weather-records", response_model=List[WeatherRecordResponse])
def list_weather_records(
    farm_id: Optional[str] = None,
    limit: int = Query(RECENT_RECORDS_LIMIT, ge=1, le=500),
    svc: FarmWeatherService = Depends(get_service),
) -> List[WeatherRecordResponse]:
    """Stored weather records, newest first."""
    records = svc.recent_weather_records(farm_id=farm_id, limit=limit)
    return [WeatherRecordResponse.from_record(record) for record in records]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
