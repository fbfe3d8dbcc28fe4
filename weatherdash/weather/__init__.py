"""Open-Meteo client and weather data formatting."""

from .client import OpenMeteoClient
from .formatting import WeatherIcon, weather_description, weather_icon
from .views import (
    Coordinates,
    DayForecast,
    GeocodingResult,
    WeatherSnapshot,
)

__all__ = [
    "OpenMeteoClient",
    "WeatherIcon",
    "weather_description",
    "weather_icon",
    "Coordinates",
    "DayForecast",
    "GeocodingResult",
    "WeatherSnapshot",
]
