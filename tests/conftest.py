import pytest

from tests.fakes import (
    FakeGeolocationProvider,
    make_forecast_payload,
    make_snapshot,
)
from weatherdash.exceptions import GeolocationError
from weatherdash.weather.views import WeatherSnapshot


@pytest.fixture
def snapshot() -> WeatherSnapshot:
    return make_snapshot()


@pytest.fixture
def forecast_payload() -> dict:
    return make_forecast_payload()


@pytest.fixture
def denied_provider() -> FakeGeolocationProvider:
    return FakeGeolocationProvider(error=GeolocationError("User denied Geolocation"))
