from .env import DashboardEnv
from .loader import (
    ApiConfig,
    DashboardConfig,
    DisplayConfig,
    LocationConfig,
    load_config,
)

__all__ = [
    "DashboardEnv",
    "ApiConfig",
    "DashboardConfig",
    "DisplayConfig",
    "LocationConfig",
    "load_config",
]
