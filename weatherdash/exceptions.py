class WeatherDashError(RuntimeError):
    """Base error for the dashboard."""


class GeolocationError(WeatherDashError):
    """Raised when the device location cannot be determined."""


class WeatherFetchError(WeatherDashError):
    """Raised when the forecast API request or its payload is unusable."""


class CityLookupError(WeatherDashError):
    """Raised when the geocoding API request fails."""


class CityNotFoundError(CityLookupError):
    """Raised when the geocoding API returns no match for a name."""


class ConfigError(WeatherDashError):
    """Raised for YAML syntax errors or invalid configuration values."""
