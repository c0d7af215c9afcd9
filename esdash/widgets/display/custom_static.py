"""CustomStatic widget for the TUI application.

Standard Wrapper Pattern:
- Wraps Textual's Static with standardized styling
- Optional border title for panel-style usage
- Accepts plain strings or Rich renderables

CSS Classes: widget-custom-static
"""

from __future__ import annotations

from rich.console import RenderableType
from textual.widgets import Static as TextualStatic


class CustomStatic(TextualStatic):
    """Custom static display widget with standardized styling.

    Example:
        >>> panel = CustomStatic("No items", title="Indices", id="scope-list")
        >>> yield panel
    """

    DEFAULT_CLASSES = "widget-custom-static"

    def __init__(
        self,
        content: RenderableType = "",
        *,
        title: str | None = None,
        markup: bool = False,
        id: str | None = None,
        classes: str = "",
        disabled: bool = False,
    ) -> None:
        """Initialize the custom static widget.

        Args:
            content: Initial content to display.
            title: Optional border title.
            markup: Whether string content is parsed as Textual markup.
            id: Widget ID.
            classes: CSS classes.
            disabled: Whether the widget is disabled.
        """
        super().__init__(
            content,
            markup=markup,
            id=id,
            classes=classes,
            disabled=disabled,
        )
        if title is not None:
            self.border_title = title
            self.add_class("panel")

    def set_title(self, title: str) -> None:
        """Update the border title."""
        self.border_title = title
