from enum import StrEnum

from weatherdash.weather.views import (
    DayForecast,
    OpenMeteoDaily,
    OpenMeteoForecastResponse,
    WeatherSnapshot,
)

# =============================================================================
# Constants
# =============================================================================

MIN_FORECAST_DAYS = 5


class WeatherIcon(StrEnum):
    CLEAR = "☀️"
    CLOUDY = "☁️"
    RAIN = "🌧️"
    SNOW = "❄️"
    UNKNOWN = "❓"


# Checked in order, bounds inclusive
_ICON_RANGES = (
    (0, 1, WeatherIcon.CLEAR),
    (2, 3, WeatherIcon.CLOUDY),
    (51, 67, WeatherIcon.RAIN),
    (71, 77, WeatherIcon.SNOW),
)

_WEATHER_CODE_DESCRIPTIONS = {
    # Clear conditions
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    # Fog conditions
    45: "Fog",
    48: "Depositing rime fog",
    # Drizzle conditions
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    # Rain conditions
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    # Snow conditions
    71: "Slight snowfall",
    73: "Moderate snowfall",
    75: "Heavy snowfall",
    77: "Snow grains",
    # Shower conditions
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    # Thunderstorm conditions
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def weather_icon(weather_code: int) -> WeatherIcon:
    """Map a WMO weather code to its glyph; unmapped codes get UNKNOWN."""
    for low, high, icon in _ICON_RANGES:
        if low <= weather_code <= high:
            return icon
    return WeatherIcon.UNKNOWN


def weather_description(weather_code: int) -> str:
    return _WEATHER_CODE_DESCRIPTIONS.get(weather_code, "Unknown")


def transform_forecast_response(
    api_response: OpenMeteoForecastResponse,
) -> WeatherSnapshot:
    """Transform the API response to a snapshot.

    Raises:
        ValueError: if fewer than MIN_FORECAST_DAYS complete days are present
    """
    daily_forecast = _transform_daily(api_response.daily)
    if len(daily_forecast) < MIN_FORECAST_DAYS:
        raise ValueError(
            f"Expected at least {MIN_FORECAST_DAYS} forecast days, "
            f"got {len(daily_forecast)}"
        )

    return WeatherSnapshot(
        current_temperature=api_response.current_weather.temperature,
        wind_speed=api_response.current_weather.windspeed,
        daily_forecast=daily_forecast,
    )


def _transform_daily(api_daily: OpenMeteoDaily) -> list[DayForecast]:
    """Zip the parallel daily arrays, truncating to the shortest one."""
    return [
        DayForecast(date=day, max_temp=max_temp, min_temp=min_temp, weather_code=code)
        for day, max_temp, min_temp, code in zip(
            api_daily.time,
            api_daily.temperature_2m_max,
            api_daily.temperature_2m_min,
            api_daily.weathercode,
        )
    ]
