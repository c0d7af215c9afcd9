"""Display widgets for ESDash TUI.

This module provides display widgets that show content:
- CustomStatic: Static text display widget
"""

from esdash.widgets.display.custom_static import CustomStatic

__all__ = [
    "CustomStatic",
]
