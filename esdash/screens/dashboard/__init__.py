"""Dashboard screen."""

from esdash.screens.dashboard.dashboard_screen import DashboardScreen
from esdash.screens.dashboard.presenter import (
    DashboardDataLoaded,
    DashboardDataLoadFailed,
    DashboardPresenter,
)

__all__ = [
    "DashboardDataLoadFailed",
    "DashboardDataLoaded",
    "DashboardPresenter",
    "DashboardScreen",
]
