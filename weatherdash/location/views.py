from enum import StrEnum

from pydantic import BaseModel, Field

from weatherdash.weather.views import Coordinates


class LocationSource(StrEnum):
    DEVICE = "device"
    FALLBACK = "fallback"


class DeviceLocation(BaseModel):
    """Pydantic model for IP geolocation data."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    city: str | None = None
    region: str | None = None
    country: str | None = None


class LocationResolution(BaseModel):
    coordinates: Coordinates
    source: LocationSource
    advisory: str | None = None
