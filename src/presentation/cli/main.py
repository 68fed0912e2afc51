"""CLI interface for farm weather records."""

import argparse
import logging
import sys

from ...application.services.farm_weather_service import FarmWeatherService
from ...domain.entities.weather_data import WeatherData
from ...domain.exceptions import FarmWeatherError
from ...infrastructure.clients.openweather_client import OpenWeatherClient, OpenWeatherConfig
from ...infrastructure.repositories.csv_repositories import (
    CsvFarmRepository,
    CsvWeatherRecordRepository,
)

from config.settings import (
    FARMS_FILE,
    RECENT_RECORDS_LIMIT,
    WEATHER_API_SETTINGS,
    WEATHER_RECORDS_FILE,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def format_day(day: WeatherData) -> str:
    """One-line summary of a daily observation."""
    condition = day.weather_condition or "-"
    line = (
        f" {day.date.isoformat()}  {condition:<12} "
        f"{day.max_temperature:5.1f}°C / {day.min_temperature:5.1f}°C  "
        f"rain {day.rainfall:4.1f}mm"
    )
    if day.sunshine_hours is not None:
        line += f"  sun {day.sunshine_hours:g}h"
    return line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Farm weather records")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === add-farm ===
    add_parser = subparsers.add_parser("add-farm", help="Register a farm")
    add_parser.add_argument("--name", type=str, required=True, help="Farm name")
    add_parser.add_argument("--location", type=str, required=True, help="e.g. '北海道帯広市'")
    add_parser.add_argument("--area", type=float, default=None, help="Area in hectares")
    add_parser.add_argument("--owner-id", type=str, default=None, help="Owning user id")

    # === list-farms ===
    subparsers.add_parser("list-farms", help="List registered farms")

    # === fetch-weather: current conditions → stored record + forecast ===
    fetch_parser = subparsers.add_parser(
        "fetch-weather", help="Fetch and store today's weather for a farm"
    )
    fetch_parser.add_argument("--farm-id", type=str, required=True)

    # === forecast ===
    forecast_parser = subparsers.add_parser("forecast", help="Show the 5-day forecast for a farm")
    forecast_parser.add_argument("--farm-id", type=str, required=True)

    # === records ===
    records_parser = subparsers.add_parser("records", help="Show stored weather records")
    records_parser.add_argument("--farm-id", type=str, default=None)
    records_parser.add_argument("--limit", type=int, default=RECENT_RECORDS_LIMIT)

    return parser


def build_service() -> FarmWeatherService:
    return FarmWeatherService(
        farm_repo=CsvFarmRepository(str(FARMS_FILE)),
        weather_repo=CsvWeatherRecordRepository(str(WEATHER_RECORDS_FILE)),
        weather_source=OpenWeatherClient(OpenWeatherConfig.from_settings(WEATHER_API_SETTINGS)),
        location_suffix=WEATHER_API_SETTINGS["location_suffix"],
        recent_records_limit=RECENT_RECORDS_LIMIT,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    service = build_service()

    try:
        if args.command == "add-farm":
            farm = service.register_farm(
                name=args.name, location=args.location, area=args.area, owner_id=args.owner_id
            )
            print(f"Registered farm {farm.id}: {farm}")

        elif args.command == "list-farms":
            farms = service.list_farms()
            if not farms:
                print("No farms registered yet")
            for farm in farms:
                coords = farm.coordinates or "(coordinates not resolved)"
                print(f" {farm.id}  {farm}  {coords}")

        elif args.command == "fetch-weather":
            result = service.fetch_weather(args.farm_id)
            print("\n" + "=" * 60)
            print(f" {result.farm} {result.coordinates}")
            print("=" * 60)
            print(" Stored:")
            print(format_day(result.record.observation))
            if result.forecast:
                print("-" * 60)
                print(" 5-day forecast:")
                for day in result.forecast:
                    print(format_day(day))
            print("=" * 60)

        elif args.command == "forecast":
            forecast = service.get_forecast(args.farm_id)
            if not forecast:
                print("No forecast available")
            for day in forecast:
                print(format_day(day))

        elif args.command == "records":
            records = service.recent_weather_records(farm_id=args.farm_id, limit=args.limit)
            if not records:
                print("No weather records yet")
            for record in records:
                print(f"{record.farm_id} {format_day(record.observation)}")

    except (FarmWeatherError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
