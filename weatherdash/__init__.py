from weatherdash.dashboard import WeatherDashboard
from weatherdash.location import IpGeolocationProvider, LocationResolver
from weatherdash.render import render
from weatherdash.weather import OpenMeteoClient

__all__ = [
    "WeatherDashboard",
    "IpGeolocationProvider",
    "LocationResolver",
    "OpenMeteoClient",
    "render",
]
