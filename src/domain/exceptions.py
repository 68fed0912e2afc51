"""Domain exceptions."""


class FarmWeatherError(Exception):
    """Base class for errors raised by the farm weather domain."""


class ConfigurationMissingError(FarmWeatherError):
    """The weather provider API key is not configured."""


class FarmNotFoundError(FarmWeatherError):
    """No farm exists with the requested id."""

    def __init__(self, farm_id: str):
        super().__init__(f"Farm not found: {farm_id}")
        self.farm_id = farm_id


class LocationNotFoundError(FarmWeatherError):
    """Geocoding returned no match for a farm location."""

    def __init__(self, location: str):
        super().__init__(f"Could not resolve coordinates for location: {location}")
        self.location = location


class WeatherUnavailableError(FarmWeatherError):
    """The weather provider could not be reached or returned an error.

    Nothing is persisted when this is raised; the caller may retry.
    """


class DuplicateRecordError(FarmWeatherError):
    """An insert collided with an existing record key."""
