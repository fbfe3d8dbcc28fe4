from textwrap import dedent

import click

from weatherdash.state import DashboardView, Failed
from weatherdash.weather.formatting import weather_description, weather_icon
from weatherdash.weather.views import DayForecast, WeatherSnapshot

# =============================================================================
# Constants
# =============================================================================

FORECAST_DAYS = 5

TITLE = "Weather Dashboard"
SPINNER = "⟳ Loading weather data..."
NO_DATA = "No weather data available."

# Locale independent short weekday names, indexed by date.weekday()
_WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def render(view: DashboardView, forecast_days: int = FORECAST_DAYS) -> str:
    """Render the view state to styled terminal text."""
    state = view.state
    if state.is_loading:
        return click.style(SPINNER, fg="blue", bold=True)

    sections = [_format_title()]

    if state.message:
        sections.append(_format_banner(state.message, is_error=isinstance(state, Failed)))

    snapshot = state.snapshot
    if snapshot is None:
        sections.append(NO_DATA)
        return "\n\n".join(sections)

    sections.append(_format_current_section(snapshot))
    sections.append(
        _format_forecast_section(snapshot.daily_forecast[:forecast_days])
    )
    return "\n\n".join(sections)


def format_weekday(day: DayForecast) -> str:
    return _WEEKDAY_NAMES[day.date.weekday()]


def format_temperature(value: float) -> str:
    """Format like the API value itself: 21.0 -> 21, 21.5 -> 21.5"""
    return f"{value:g}°C"


# =============================================================================
# Section Formatting Functions (Private)
# =============================================================================


def _format_title() -> str:
    return click.style(TITLE, fg="white", bold=True)


def _format_banner(message: str, is_error: bool) -> str:
    return click.style(message, fg="red" if is_error else "yellow")


def _format_current_section(snapshot: WeatherSnapshot) -> str:
    heading = click.style("Current Weather", fg="cyan", bold=True)
    temperature = click.style(
        format_temperature(snapshot.current_temperature), bold=True
    )
    return dedent(
        f"""
        {heading}
           {temperature}
           Wind Speed: {snapshot.wind_speed:g} km/h
        """
    ).strip()


def _format_forecast_card(day: DayForecast) -> str:
    weekday = click.style(format_weekday(day), fg="cyan", bold=True)
    return (
        f"   {weekday}  {weather_icon(day.weather_code)}  "
        f"H: {format_temperature(day.max_temp)}  "
        f"L: {format_temperature(day.min_temp)}  "
        f"{weather_description(day.weather_code)}"
    )


def _format_forecast_section(days: list[DayForecast]) -> str:
    section = click.style(f"{len(days)}-Day Forecast", fg="cyan", bold=True)

    for day in days:
        section += f"\n{_format_forecast_card(day)}"

    return section
