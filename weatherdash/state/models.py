"""
View state for the dashboard - an explicit tagged union instead of
independent loading/error/data flags
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from weatherdash.weather.views import WeatherSnapshot


class ViewStateKind(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class _ViewStateBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_loading(self) -> bool:
        return False

    @property
    def snapshot(self) -> WeatherSnapshot | None:
        """Weather to display, if any"""
        return None

    @property
    def message(self) -> str | None:
        """Error or advisory text to display, if any"""
        return None


class Idle(_ViewStateBase):
    kind: Literal[ViewStateKind.IDLE] = ViewStateKind.IDLE


class Loading(_ViewStateBase):
    kind: Literal[ViewStateKind.LOADING] = ViewStateKind.LOADING
    previous: WeatherSnapshot | None = None

    @property
    def is_loading(self) -> bool:
        return True


class Loaded(_ViewStateBase):
    kind: Literal[ViewStateKind.LOADED] = ViewStateKind.LOADED
    weather: WeatherSnapshot
    advisory: str | None = None

    @property
    def snapshot(self) -> WeatherSnapshot | None:
        return self.weather

    @property
    def message(self) -> str | None:
        return self.advisory


class Failed(_ViewStateBase):
    kind: Literal[ViewStateKind.FAILED] = ViewStateKind.FAILED
    reason: str
    fallback: WeatherSnapshot | None = None

    @property
    def snapshot(self) -> WeatherSnapshot | None:
        return self.fallback

    @property
    def message(self) -> str | None:
        return self.reason


ViewState = Annotated[Idle | Loading | Loaded | Failed, Field(discriminator="kind")]


class DashboardView(BaseModel):
    """Everything the renderer needs"""

    model_config = ConfigDict(frozen=True)

    state: ViewState = Field(default_factory=Idle)
    city_input: str = ""
