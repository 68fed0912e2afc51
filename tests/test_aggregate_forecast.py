"""Tests for AggregateForecastUseCase."""

from datetime import date, datetime, timezone
from conftest import forecast_feed, forecast_sample
from src.domain.use_cases.aggregate_forecast import AggregateForecastUseCase, sample_date


def at(hour: int, day: int = 1) -> datetime:
    return datetime(2024, 6, day, hour, tzinfo=timezone.utc)


def test_same_day_samples_are_folded():
    """Max/min fold and rainfall accumulates across a day's samples."""
    samples = [
        forecast_sample(at(0), temp=18, rain_3h=1.0, humidity=80, description="小雨"),
        forecast_sample(at(3), temp=22, rain_3h=0.5, humidity=60, description="晴天"),
        forecast_sample(at(6), temp=15, humidity=50, description="曇りがち"),
    ]

    result = AggregateForecastUseCase().execute(samples)

    assert len(result) == 1
    day = result[0]
    assert day.date == date(2024, 6, 1)
    assert day.max_temperature == 22
    assert day.min_temperature == 15
    assert day.rainfall == 1.5


def test_first_sample_fields_win():
    """Humidity, condition and soil temperature come from the first sample of the day."""
    samples = [
        forecast_sample(at(0), temp=18, humidity=80, description="小雨"),
        forecast_sample(at(3), temp=22, humidity=60, description="晴天"),
    ]

    day = AggregateForecastUseCase().execute(samples)[0]

    assert day.humidity == 80
    assert day.weather_condition == "小雨"
    assert day.wind_speed == 3.4
    assert day.pressure == 1012
    assert day.soil_temperature == 16
    assert day.sunshine_hours is None


def test_uses_sample_min_and_max_temperatures():
    samples = [
        forecast_sample(at(0), temp=18, temp_min=16, temp_max=19),
        forecast_sample(at(3), temp=20, temp_min=19, temp_max=23),
    ]

    day = AggregateForecastUseCase().execute(samples)[0]

    assert (day.min_temperature, day.max_temperature) == (16, 23)
    assert day.min_temperature <= day.max_temperature


def test_output_limited_to_five_days():
    """40 samples spread over eight days yield the first five days only."""
    samples = [forecast_sample(at(3 * slot, day=day), temp=20) for day in range(1, 9) for slot in range(5)]
    assert len(samples) == 40

    result = AggregateForecastUseCase().execute(samples)

    assert [d.date for d in result] == [date(2024, 6, day) for day in range(1, 6)]


def test_full_feed_truncates_to_five_days():
    result = AggregateForecastUseCase().execute(forecast_feed(days=8))
    assert len(result) == 5
    assert all(d.rainfall == 4.0 for d in result)


def test_days_keep_first_seen_order():
    samples = [
        forecast_sample(at(0, day=3), temp=20),
        forecast_sample(at(0, day=1), temp=18),
        forecast_sample(at(3, day=3), temp=25),
    ]

    result = AggregateForecastUseCase().execute(samples)

    assert [d.date for d in result] == [date(2024, 6, 3), date(2024, 6, 1)]
    assert result[0].max_temperature == 25


def test_empty_feed():
    assert AggregateForecastUseCase().execute([]) == []


def test_day_boundary_is_utc():
    assert sample_date(int(at(23).timestamp())) == date(2024, 6, 1)
    assert sample_date(int(at(0, day=2).timestamp())) == date(2024, 6, 2)
