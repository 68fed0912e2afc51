"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient
from conftest import TODAY, FakeWeatherSource
from src.application.services.farm_weather_service import FarmWeatherService
from src.domain.entities.weather_data import WeatherData
from src.presentation.api.main import app, get_service


@pytest.fixture
def source(today_observation):
    return FakeWeatherSource(
        current=today_observation,
        forecast=[WeatherData(date=TODAY, max_temperature=25, min_temperature=15, soil_temperature=18)],
    )


@pytest.fixture
def client(farm_repo, weather_repo, source):
    service = FarmWeatherService(farm_repo, weather_repo, source, location_suffix=", Japan")
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def create_farm(client) -> str:
    response = client.post("/farms", json={"name": "帯広農場", "location": "北海道帯広市", "area": 12.5})
    assert response.status_code == 201
    return response.json()["id"]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_create_and_list_farms(client):
    farm_id = create_farm(client)

    farms = client.get("/farms").json()

    assert [f["id"] for f in farms] == [farm_id]
    assert farms[0]["latitude"] is None
    assert client.get(f"/farms/{farm_id}").json()["name"] == "帯広農場"


def test_create_farm_validation(client):
    assert client.post("/farms", json={"name": "", "location": "x"}).status_code == 422


def test_fetch_weather_stores_record(client):
    farm_id = create_farm(client)

    response = client.post(f"/farms/{farm_id}/weather")

    assert response.status_code == 200
    body = response.json()
    assert body["record"]["date"] == TODAY.isoformat()
    assert body["record"]["sunshine_hours"] == 1
    assert body["farm"]["latitude"] is not None
    assert len(body["forecast"]) == 1

    client.post(f"/farms/{farm_id}/weather")
    records = client.get("/weather-records", params={"farm_id": farm_id}).json()
    assert len(records) == 1


def test_fetch_weather_unknown_farm(client):
    assert client.post("/farms/missing/weather").status_code == 404


def test_fetch_weather_location_not_found(client, source):
    source.coordinates = None
    farm_id = create_farm(client)

    assert client.post(f"/farms/{farm_id}/weather").status_code == 422


def test_fetch_weather_unavailable_is_retryable(client, source):
    source.current = None
    farm_id = create_farm(client)

    response = client.post(f"/farms/{farm_id}/weather")

    assert response.status_code == 502
    assert client.get("/weather-records").json() == []


def test_missing_api_key(client, source):
    source.configured = False
    farm_id = create_farm(client)

    assert client.post(f"/farms/{farm_id}/weather").status_code == 503
    assert client.get(f"/farms/{farm_id}/forecast").status_code == 503


def test_forecast_endpoint(client):
    farm_id = create_farm(client)

    forecast = client.get(f"/farms/{farm_id}/forecast").json()

    assert forecast[0]["soil_temperature"] == 18
    assert client.get("/weather-records").json() == []


def test_delete_farm(client):
    farm_id = create_farm(client)

    assert client.delete(f"/farms/{farm_id}").status_code == 204
    assert client.get(f"/farms/{farm_id}").status_code == 404
