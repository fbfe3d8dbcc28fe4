from .location import (
    GEOLOCATION_DENIED,
    GEOLOCATION_UNSUPPORTED,
    GeolocationProvider,
    IpGeolocationProvider,
    LocationResolver,
)
from .views import DeviceLocation, LocationResolution, LocationSource

__all__ = [
    "GEOLOCATION_DENIED",
    "GEOLOCATION_UNSUPPORTED",
    "GeolocationProvider",
    "IpGeolocationProvider",
    "LocationResolver",
    "DeviceLocation",
    "LocationResolution",
    "LocationSource",
]
