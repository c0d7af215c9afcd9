"""Main application class for ESDash TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from esdash.constants import APP_TITLE
from esdash.controllers import RefreshOrchestrator, SearchClusterController
from esdash.keyboard.app import APP_BINDINGS
from esdash.models.state.app_state import AppState
from esdash.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)

logger = logging.getLogger(__name__)


class ESDashApp(App[None]):
    """Main TUI application for ESDash."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings
    state: AppState

    def __init__(
        self,
        es_url: str | None = None,
        config_path: Path | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.es_url = es_url
        self.config_path = config_path

        # Load settings on startup
        self._load_settings()

        self.state = AppState(self.settings.es_url, page_size=self.settings.page_size)
        self.controller = SearchClusterController(
            self.settings.es_url, timeout=self.settings.request_timeout
        )
        self.orchestrator = RefreshOrchestrator(self.state, self.controller)

    def _load_settings(self) -> None:
        """Load settings from file and environment, applying CLI overrides."""
        try:
            self.settings = ConfigManager.load(self.config_path, url=self.es_url)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings = ConfigManager.defaults(url=self.es_url)

        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from esdash.screens import DashboardScreen

        self.push_screen(
            DashboardScreen(
                self.state,
                self.orchestrator,
                refresh_interval=self.settings.refresh_interval,
            )
        )
