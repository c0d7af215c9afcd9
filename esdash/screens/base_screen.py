"""Base screen class for ESDash TUI.

Screens set the window title on mount, schedule their first data load,
and cancel their workers when unmounted.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import TYPE_CHECKING, cast

from rich.console import RenderableType
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen

from esdash.constants.values import APP_TITLE
from esdash.keyboard import BASE_SCREEN_BINDINGS
from esdash.widgets import CustomStatic

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from esdash.app import ESDashApp


class BaseScreen(Screen):
    """Abstract base class for TUI screens with common patterns.

    Subclasses must implement:
    - screen_title: The title to display in the window
    - load_data: Async method to load screen data
    """

    BINDINGS = BASE_SCREEN_BINDINGS

    @property
    def screen_title(self) -> str:
        """Title displayed in the application window."""
        return APP_TITLE

    @property
    def app(self) -> ESDashApp:
        """Get the application instance."""
        return cast("ESDashApp", super().app)

    def set_title(self, title: str) -> None:
        self.app.title = f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Set the window title and schedule data loading."""
        self.set_title(self.screen_title)
        self.call_later(self.load_data)

    def on_unmount(self) -> None:
        """Cancel any running workers when the screen is unmounted."""
        with suppress(Exception):
            self.workers.cancel_all()

    @abstractmethod
    async def load_data(self) -> None:
        """Load data for the screen.

        This method is called after the screen is mounted.
        """
        ...

    def update_static(self, widget_id: str, content: RenderableType) -> None:
        """Replace the content of a ``CustomStatic`` if it is mounted."""
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{widget_id}", CustomStatic).update(content)

    def action_refresh(self) -> None:
        self.call_later(self.load_data)


__all__ = ["BaseScreen"]
