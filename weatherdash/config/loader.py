from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from weatherdash.exceptions import ConfigError

DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_GEOLOCATION_URL = "http://ipapi.co/json/"

# Berlin
FALLBACK_LATITUDE = 52.52
FALLBACK_LONGITUDE = 13.41


class ApiConfig(BaseModel):
    """Endpoints of the Open-Meteo APIs"""

    forecast_url: str = DEFAULT_FORECAST_URL
    geocoding_url: str = DEFAULT_GEOCODING_URL
    # None keeps the transport default
    request_timeout: float | None = Field(default=None, gt=0)


class LocationConfig(BaseModel):
    """Configuration for device location resolution"""

    use_device_location: bool = True
    geolocation_url: str = DEFAULT_GEOLOCATION_URL
    geolocation_timeout: float = Field(default=10.0, gt=0)
    fallback_latitude: float = Field(default=FALLBACK_LATITUDE, ge=-90.0, le=90.0)
    fallback_longitude: float = Field(
        default=FALLBACK_LONGITUDE, ge=-180.0, le=180.0
    )


class DisplayConfig(BaseModel):
    """Configuration for the rendered view"""

    forecast_days: int = Field(default=5, ge=1, le=16)


class DashboardConfig(BaseModel):
    """Main application configuration"""

    api: ApiConfig = Field(default_factory=ApiConfig)
    location: LocationConfig = Field(default_factory=LocationConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_config(path: str | Path) -> DashboardConfig:
    """
    Load and validate hierarchical YAML config.

    Raises:
        FileNotFoundError: if the file does not exist
        ConfigError: for YAML syntax errors or validation errors
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    try:
        return DashboardConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config values in {p}:\n{e}") from e
