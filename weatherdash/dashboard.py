from __future__ import annotations

from typing import Protocol

from weatherdash.events import DashboardEvent, EventBus
from weatherdash.exceptions import (
    CityLookupError,
    CityNotFoundError,
    WeatherFetchError,
)
from weatherdash.location import LocationResolver
from weatherdash.shared.logging_mixin import LoggingMixin
from weatherdash.state import DashboardView, Failed, Loaded, Loading, ViewState
from weatherdash.weather.views import Coordinates, GeocodingResult, WeatherSnapshot

WEATHER_FETCH_FAILED = "Failed to fetch weather data."
CITY_NOT_FOUND = "City not found. Please try again."
CITY_FETCH_FAILED = "Failed to fetch city data."


class WeatherClient(Protocol):
    async def fetch_weather(self, coordinates: Coordinates) -> WeatherSnapshot: ...

    async def geocode_city(self, name: str) -> GeocodingResult: ...


class WeatherDashboard(LoggingMixin):
    """Owns the view state and drives the fetch flows.

    Every request takes a new generation number. Results of a request that
    has been superseded are dropped, so the latest submission always wins.
    """

    def __init__(
        self,
        weather_client: WeatherClient,
        location_resolver: LocationResolver,
        event_bus: EventBus | None = None,
    ):
        self._weather_client = weather_client
        self._location_resolver = location_resolver
        self.event_bus = event_bus or EventBus()

        self._view = DashboardView()
        self._generation = 0

    @property
    def view(self) -> DashboardView:
        return self._view

    @property
    def state(self) -> ViewState:
        return self._view.state

    async def mount(self) -> None:
        """Resolve the location once and load its weather"""
        resolution = await self._location_resolver.resolve()
        await self.load_coordinates(resolution.coordinates, advisory=resolution.advisory)

    async def load_coordinates(
        self, coordinates: Coordinates, advisory: str | None = None
    ) -> None:
        generation = await self._begin_request()
        await self._fetch_weather(generation, coordinates, advisory)

    async def submit_city(self, city: str | None = None) -> None:
        """Geocode the city input and load the weather of the best match"""
        if city is not None:
            self._view = self._view.model_copy(update={"city_input": city})

        name = self._view.city_input.strip()
        if not name:
            self.logger.debug("Ignoring empty city submission")
            return

        generation = await self._begin_request()
        try:
            location = await self._weather_client.geocode_city(name)
        except CityNotFoundError:
            self.logger.info("City %r not found", name)
            await self._fail(generation, CITY_NOT_FOUND, keep_previous=True)
            return
        except CityLookupError as e:
            self.logger.error("Error fetching city data: %s", e)
            await self._fail(generation, CITY_FETCH_FAILED, keep_previous=True)
            return

        if not self._is_current(generation):
            await self._discard(generation)
            return

        coordinates = Coordinates(
            latitude=location.latitude, longitude=location.longitude
        )
        await self._fetch_weather(generation, coordinates, None)

    async def _fetch_weather(
        self, generation: int, coordinates: Coordinates, advisory: str | None
    ) -> None:
        try:
            snapshot = await self._weather_client.fetch_weather(coordinates)
        except WeatherFetchError as e:
            self.logger.error("Error fetching weather data: %s", e)
            await self._fail(generation, WEATHER_FETCH_FAILED, keep_previous=False)
            return

        await self._commit(generation, Loaded(weather=snapshot, advisory=advisory))

    async def _begin_request(self) -> int:
        self._generation += 1
        previous = self._view.state.snapshot
        if isinstance(self._view.state, Loading):
            previous = self._view.state.previous

        await self.event_bus.publish_async(
            DashboardEvent.REQUEST_STARTED, self._generation
        )
        await self._set_state(Loading(previous=previous))
        return self._generation

    async def _fail(self, generation: int, reason: str, keep_previous: bool) -> None:
        fallback = None
        if keep_previous and isinstance(self._view.state, Loading):
            fallback = self._view.state.previous
        await self._commit(generation, Failed(reason=reason, fallback=fallback))

    async def _commit(self, generation: int, state: ViewState) -> None:
        if not self._is_current(generation):
            await self._discard(generation)
            return
        await self._set_state(state)

    async def _discard(self, generation: int) -> None:
        self.logger.debug(
            "Discarding stale response of request %d (current is %d)",
            generation,
            self._generation,
        )
        await self.event_bus.publish_async(
            DashboardEvent.REQUEST_DISCARDED, generation
        )

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _set_state(self, state: ViewState) -> None:
        self.logger.info(
            "Transitioning from %s to %s", self._view.state.kind, state.kind
        )
        self._view = self._view.model_copy(update={"state": state})
        await self.event_bus.publish_async(DashboardEvent.STATE_CHANGED, self._view)
