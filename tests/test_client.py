import json

import aiohttp
import pytest

from weatherdash.config import ApiConfig
from weatherdash.exceptions import (
    CityLookupError,
    CityNotFoundError,
    WeatherFetchError,
)
from weatherdash.weather import Coordinates, OpenMeteoClient
from tests.fakes import FakeResponse, FakeSession, make_forecast_payload

BERLIN = Coordinates(latitude=52.52, longitude=13.41)


async def test_fetch_weather_sends_expected_params(forecast_payload):
    session = FakeSession(FakeResponse(forecast_payload))
    client = OpenMeteoClient(session=session)

    await client.fetch_weather(BERLIN)

    url, params = session.calls[0]
    assert url == "https://api.open-meteo.com/v1/forecast"
    assert params == {
        "latitude": "52.52",
        "longitude": "13.41",
        "current_weather": "true",
        "daily": "temperature_2m_max,temperature_2m_min,weathercode",
        "timezone": "auto",
    }


async def test_fetch_weather_returns_snapshot(forecast_payload):
    client = OpenMeteoClient(session=FakeSession(FakeResponse(forecast_payload)))

    snapshot = await client.fetch_weather(BERLIN)

    assert snapshot.current_temperature == 3.4
    assert snapshot.wind_speed == 11.2
    assert len(snapshot.daily_forecast) >= 5


async def test_fetch_weather_uses_configured_url(forecast_payload):
    session = FakeSession(FakeResponse(forecast_payload))
    client = OpenMeteoClient(
        ApiConfig(forecast_url="http://localhost:8080/v1/forecast"), session=session
    )

    await client.fetch_weather(BERLIN)

    assert session.calls[0][0] == "http://localhost:8080/v1/forecast"


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse({"error": True, "reason": "Invalid latitude"}, status=400),
        FakeResponse(None, status=500),
        FakeResponse(json_error=json.JSONDecodeError("Expecting value", "", 0)),
        FakeResponse({"daily": {}}),
        FakeResponse(make_forecast_payload(days=3)),
        aiohttp.ClientConnectionError("connection refused"),
    ],
)
async def test_fetch_weather_failures_raise_weather_fetch_error(response):
    client = OpenMeteoClient(session=FakeSession(response))

    with pytest.raises(WeatherFetchError):
        await client.fetch_weather(BERLIN)


async def test_geocode_city_returns_first_result():
    payload = {
        "results": [
            {"name": "Paris", "country": "France", "latitude": 48.85, "longitude": 2.35}
        ],
        "generationtime_ms": 0.5,
    }
    session = FakeSession(FakeResponse(payload))
    client = OpenMeteoClient(session=session)

    result = await client.geocode_city("Paris")

    assert (result.latitude, result.longitude) == (48.85, 2.35)
    url, params = session.calls[0]
    assert url == "https://geocoding-api.open-meteo.com/v1/search"
    assert params == {"name": "Paris", "count": "1"}


@pytest.mark.parametrize(
    "payload", [{"generationtime_ms": 0.3}, {"results": []}, None]
)
async def test_geocode_city_without_results_raises_not_found(payload):
    client = OpenMeteoClient(session=FakeSession(FakeResponse(payload)))

    with pytest.raises(CityNotFoundError):
        await client.geocode_city("Atlantis")


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(None, status=503),
        FakeResponse({"results": [{"name": "Broken"}]}),
        aiohttp.ClientConnectionError("connection refused"),
    ],
)
async def test_geocode_city_failures_raise_lookup_error(response):
    client = OpenMeteoClient(session=FakeSession(response))

    with pytest.raises(CityLookupError) as exc_info:
        await client.geocode_city("Paris")

    assert not isinstance(exc_info.value, CityNotFoundError)


async def test_injected_session_is_not_closed(forecast_payload):
    session = FakeSession(FakeResponse(forecast_payload))

    async with OpenMeteoClient(session=session) as client:
        await client.fetch_weather(BERLIN)

    assert session.closed is False
