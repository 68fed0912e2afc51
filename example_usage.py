"""Example usage of the farm weather records system."""

import logging
from src.application.services.farm_weather_service import FarmWeatherService
from src.domain.exceptions import FarmWeatherError
from src.infrastructure.clients.openweather_client import OpenWeatherClient, OpenWeatherConfig
from src.infrastructure.repositories.in_memory_repositories import (
    InMemoryFarmRepository,
    InMemoryWeatherRecordRepository,
)
from config.settings import WEATHER_API_SETTINGS

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = FarmWeatherService(
        farm_repo=InMemoryFarmRepository(),
        weather_repo=InMemoryWeatherRecordRepository(),
        weather_source=OpenWeatherClient(OpenWeatherConfig.from_settings(WEATHER_API_SETTINGS)),
        location_suffix=WEATHER_API_SETTINGS["location_suffix"],
    )

    # Example 1: Register a farm
    print("=" * 60)
    print("Example 1: Registering a farm")
    print("=" * 60)
    farm = service.register_farm(name="帯広農場", location="北海道帯広市", area=12.5)
    print(f"\nRegistered: {farm} -> {farm.id}")

    # Example 2: Fetch today's weather (run twice: still one record for today)
    print("\n" + "=" * 60)
    print("Example 2: Fetching weather")
    print("=" * 60)
    try:
        for _ in range(2):
            result = service.fetch_weather(farm.id)

        record = result.record.observation
        print(f"\nCoordinates: {result.coordinates}")
        print(f"  Date: {record.date}")
        print(f"  Condition: {record.weather_condition}")
        print(f"  Max/Min: {record.max_temperature}°C / {record.min_temperature}°C")
        print(f"  Rainfall: {record.rainfall}mm")
        print(f"  Sunshine (estimated): {record.sunshine_hours}h")
        print(f"  Soil temperature (estimated): {record.soil_temperature}°C")
        print(f"  Stored records: {len(service.recent_weather_records(farm_id=farm.id))}")

        print(f"\n  Forecast:")
        for day in result.forecast:
            print(f"    {day.date}: {day.max_temperature}/{day.min_temperature}°C, {day.rainfall:.1f}mm")
    except FarmWeatherError as e:
        logger.error(f"Weather fetch failed: {e}")


if __name__ == "__main__":
    main()
