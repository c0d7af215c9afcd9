"""Application state management."""

from esdash.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from esdash.models.state.app_state import AppState
from esdash.models.state.config_manager import ConfigManager
from esdash.models.state.document_browser import DocumentBrowser, PageCursor
from esdash.models.state.input_mode import EditCommit, InputModeError, InputModeMachine
from esdash.models.state.scope_catalog import ScopeCatalog, ScopeCollection

__all__ = [
    "AppSettings",
    "AppState",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DocumentBrowser",
    "EditCommit",
    "InputModeError",
    "InputModeMachine",
    "PageCursor",
    "ScopeCatalog",
    "ScopeCollection",
]
