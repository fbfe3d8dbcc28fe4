from .models import (
    DashboardView,
    Failed,
    Idle,
    Loaded,
    Loading,
    ViewState,
    ViewStateKind,
)

__all__ = [
    "DashboardView",
    "Failed",
    "Idle",
    "Loaded",
    "Loading",
    "ViewState",
    "ViewStateKind",
]
