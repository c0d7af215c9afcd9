"""Keyboard bindings module.

This module provides all keyboard bindings for the ESDash TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from esdash.keyboard.app import APP_BINDINGS
from esdash.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    DASHBOARD_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "BASE_SCREEN_BINDINGS",
    "DASHBOARD_SCREEN_BINDINGS",
]
