"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

# Not priority bindings: the dashboard consumes keys while a text edit is active.
APP_BINDINGS: list[Binding] = [
    Binding("q", "quit", "Quit"),
]

__all__ = [
    "APP_BINDINGS",
]
