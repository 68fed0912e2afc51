"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = Path(os.getenv("FARM_DATA_DIR", str(BASE_DIR / "data")))
FARMS_FILE = DATA_DIR / "farms.csv"
WEATHER_RECORDS_FILE = DATA_DIR / "weather_data.csv"

# Weather provider settings (OpenWeatherMap)
WEATHER_API_SETTINGS = {
    "api_key": os.getenv("OPENWEATHER_API_KEY", ""),
    "base_url": os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5"),
    "geo_url": os.getenv("OPENWEATHER_GEO_URL", "https://api.openweathermap.org/geo/1.0"),
    "units": "metric",  # Celsius
    "lang": "ja",
    "timeout": float(os.getenv("OPENWEATHER_TIMEOUT", "10")),
    "location_suffix": ", Japan",
    "forecast_days": 5,
}

# Storage settings
STORAGE_SETTINGS = {
    "backend": os.getenv("FARM_STORAGE_BACKEND", "memory"),  # 'memory' or 'csv'
    "data_dir": DATA_DIR,
}

# Number of weather records shown in history listings
RECENT_RECORDS_LIMIT = 20

# API settings
API_SETTINGS = {
    "title": "Farm Weather Records API",
    "description": "API for farm registration and daily weather record ingestion",
    "version": "1.0.0",
}
