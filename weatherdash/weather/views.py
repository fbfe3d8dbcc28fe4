import datetime

from pydantic import BaseModel, Field

# =============================================================================
# API Response Models (Open-Meteo API Mappings)
# =============================================================================


class OpenMeteoCurrentWeather(BaseModel):
    """Direct mapping to the Open-Meteo `current_weather` block."""

    temperature: float
    windspeed: float


class OpenMeteoDaily(BaseModel):
    """Direct mapping to the Open-Meteo `daily` block."""

    time: list[datetime.date]
    temperature_2m_max: list[float]
    temperature_2m_min: list[float]
    weathercode: list[int]


class OpenMeteoForecastResponse(BaseModel):
    """Open-Meteo forecast response, restricted to the consumed fields."""

    current_weather: OpenMeteoCurrentWeather
    daily: OpenMeteoDaily


class GeocodingResult(BaseModel):
    """Single match of the Open-Meteo geocoding API."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    name: str | None = None
    country: str | None = None


class GeocodingResponse(BaseModel):
    """Open-Meteo omits `results` entirely when nothing matches."""

    results: list[GeocodingResult] = []


# =============================================================================
# Domain Models
# =============================================================================


class Coordinates(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class DayForecast(BaseModel):
    """Forecast for one calendar day."""

    date: datetime.date
    max_temp: float
    min_temp: float
    weather_code: int


class WeatherSnapshot(BaseModel):
    """Current conditions plus the daily forecast for one location."""

    current_temperature: float
    wind_speed: float
    daily_forecast: list[DayForecast]
