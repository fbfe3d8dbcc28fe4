from __future__ import annotations

import asyncio
from typing import Protocol

import aiohttp
from pydantic import ValidationError

from weatherdash.config import LocationConfig
from weatherdash.exceptions import GeolocationError
from weatherdash.location.views import (
    DeviceLocation,
    LocationResolution,
    LocationSource,
)
from weatherdash.shared.logging_mixin import LoggingMixin
from weatherdash.weather.views import Coordinates

GEOLOCATION_DENIED = "Geolocation denied. Showing weather for default location."
GEOLOCATION_UNSUPPORTED = (
    "Geolocation not supported. Showing weather for default location."
)


class GeolocationProvider(Protocol):
    async def locate(self) -> Coordinates: ...


class IpGeolocationProvider(LoggingMixin):
    """Determines the current location via IP geolocation."""

    def __init__(
        self,
        config: LocationConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self._config = config or LocationConfig()
        self._session = session

    async def locate(self) -> Coordinates:
        try:
            if self._session is not None:
                data = await self._fetch(self._session)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self._fetch(session)
            location = DeviceLocation.model_validate(data)
        except (aiohttp.ClientError, ValidationError, ValueError) as e:
            raise GeolocationError(f"Location could not be determined: {e}") from e

        self.logger.info(
            "Device located in %s, %s (%.2f, %.2f)",
            location.city,
            location.country,
            location.latitude,
            location.longitude,
        )
        return Coordinates(latitude=location.latitude, longitude=location.longitude)

    async def _fetch(self, session: aiohttp.ClientSession) -> dict:
        async with session.get(self._config.geolocation_url) as response:
            if response.status != 200:
                raise GeolocationError(
                    f"API request failed with status {response.status}"
                )
            return await response.json()


class LocationResolver(LoggingMixin):
    """Resolves coordinates once per mount, falling back to a fixed location.

    A provider of None means the capability is unavailable.
    """

    def __init__(
        self,
        provider: GeolocationProvider | None,
        config: LocationConfig | None = None,
    ):
        self._provider = provider
        self._config = config or LocationConfig()

    @property
    def fallback_coordinates(self) -> Coordinates:
        return Coordinates(
            latitude=self._config.fallback_latitude,
            longitude=self._config.fallback_longitude,
        )

    async def resolve(self) -> LocationResolution:
        if self._provider is None:
            self.logger.warning("No geolocation provider, using default location")
            return self._fallback(GEOLOCATION_UNSUPPORTED)

        try:
            coordinates = await asyncio.wait_for(
                self._provider.locate(), timeout=self._config.geolocation_timeout
            )
        except asyncio.TimeoutError:
            self.logger.error(
                "Geolocation timed out after %.1fs",
                self._config.geolocation_timeout,
            )
            return self._fallback(GEOLOCATION_DENIED)
        except GeolocationError as e:
            self.logger.error("Error getting geolocation: %s", e)
            return self._fallback(GEOLOCATION_DENIED)

        return LocationResolution(coordinates=coordinates, source=LocationSource.DEVICE)

    def _fallback(self, advisory: str) -> LocationResolution:
        return LocationResolution(
            coordinates=self.fallback_coordinates,
            source=LocationSource.FALLBACK,
            advisory=advisory,
        )
