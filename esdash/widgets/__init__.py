"""Widgets module for the ESDash TUI.

This module provides all reusable widgets organized into submodules:
- display: Display widgets (CustomStatic)
"""

from esdash.widgets.display import CustomStatic

__all__ = [
    "CustomStatic",
]
