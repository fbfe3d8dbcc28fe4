from __future__ import annotations

import asyncio
from typing import Any

import aiohttp
from pydantic import ValidationError

from weatherdash.config import ApiConfig
from weatherdash.exceptions import (
    CityLookupError,
    CityNotFoundError,
    WeatherDashError,
    WeatherFetchError,
)
from weatherdash.shared.logging_mixin import LoggingMixin
from weatherdash.weather.formatting import transform_forecast_response
from weatherdash.weather.views import (
    Coordinates,
    GeocodingResponse,
    GeocodingResult,
    OpenMeteoForecastResponse,
    WeatherSnapshot,
)

_DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weathercode"


class OpenMeteoClient(LoggingMixin):
    """Client for the Open-Meteo forecast and geocoding APIs.

    A session passed in by the caller is never closed by the client.
    """

    def __init__(
        self,
        api: ApiConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self._api = api or ApiConfig()
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> OpenMeteoClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def fetch_weather(self, coordinates: Coordinates) -> WeatherSnapshot:
        """Fetch current conditions and the daily forecast for coordinates."""
        params = {
            "latitude": str(coordinates.latitude),
            "longitude": str(coordinates.longitude),
            "current_weather": "true",
            "daily": _DAILY_FIELDS,
            "timezone": "auto",
        }

        raw_data = await self._get_json(
            self._api.forecast_url, params, WeatherFetchError
        )

        try:
            api_response = OpenMeteoForecastResponse.model_validate(raw_data)
            return transform_forecast_response(api_response)
        except (ValidationError, ValueError) as e:
            raise WeatherFetchError(f"Invalid weather data: {e}") from e

    async def geocode_city(self, name: str) -> GeocodingResult:
        """Resolve a city name to the single best match.

        Raises:
            CityNotFoundError: if the API returns no match
            CityLookupError: if the request or its payload fails
        """
        params = {"name": name, "count": "1"}

        raw_data = await self._get_json(
            self._api.geocoding_url, params, CityLookupError
        )

        try:
            geocoding = GeocodingResponse.model_validate(raw_data or {})
        except ValidationError as e:
            raise CityLookupError(f"Invalid geocoding data: {e}") from e

        if not geocoding.results:
            raise CityNotFoundError(f"No geocoding result for {name!r}")

        location = geocoding.results[0]
        self.logger.info(
            "Resolved %r to %s, %s (%.2f, %.2f)",
            name,
            location.name,
            location.country,
            location.latitude,
            location.longitude,
        )
        return location

    async def _get_json(
        self,
        url: str,
        params: dict[str, str],
        error_type: type[WeatherDashError],
    ) -> Any:
        session = self._get_session()
        try:
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    raise error_type(f"Request to {url} failed: {response.status}")
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise error_type(f"Request to {url} failed: {e}") from e

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            kwargs = {}
            if self._api.request_timeout is not None:
                kwargs["timeout"] = aiohttp.ClientTimeout(
                    total=self._api.request_timeout
                )
            self._session = aiohttp.ClientSession(**kwargs)
        return self._session
