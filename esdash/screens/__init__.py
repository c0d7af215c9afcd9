"""Screens for ESDash TUI."""

from esdash.screens.base_screen import BaseScreen
from esdash.screens.dashboard import DashboardScreen

__all__ = ["BaseScreen", "DashboardScreen"]
