"""Dashboard screen: scope navigation, query editing, results, and document drawer."""

from __future__ import annotations

import logging
from contextlib import suppress

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches, WrongType
from textual.timer import Timer
from textual.widgets import Footer

from esdash.constants.defaults import REFRESH_INTERVAL_DEFAULT
from esdash.constants.enums import ScopeKind
from esdash.constants.limits import DRAWER_HEIGHT_MIN
from esdash.controllers.refresh import RefreshOrchestrator
from esdash.keyboard import DASHBOARD_SCREEN_BINDINGS
from esdash.models.state.app_state import AppState
from esdash.screens.base_screen import BaseScreen
from esdash.screens.dashboard.config import (
    DOC_DRAWER_ID,
    ERROR_LINE_ID,
    FAVORITES_ID,
    LEFT_NAV_ID,
    PANEL_TITLES,
    QUERY_BLOCK_ID,
    RESULTS_TABLE_ID,
    RIGHT_MAIN_ID,
    SAVED_VIEWS_ID,
    SCOPE_FILTER_ID,
    SCOPE_LIST_ID,
    SCOPE_TABS_ID,
    TOP_BAR_ID,
)
from esdash.screens.dashboard.presenter import (
    DashboardDataLoaded,
    DashboardDataLoadFailed,
    DashboardPresenter,
)
from esdash.utils.text import drawer_width
from esdash.widgets import CustomStatic

logger = logging.getLogger(__name__)

# Top bar is one line of text inside a border.
_TOP_BAR_HEIGHT = 3
_FOOTER_HEIGHT = 1

_HELP_TEXT = (
    "Keybindings:\n"
    "  q - Quit\n"
    "  r - Refresh all\n"
    "  / - Edit query\n"
    "  Ctrl+F - Edit scope filter\n"
    "  Tab - Switch focus\n"
    "  1/2/3 - Indices / Aliases / DataStreams\n"
    "  Up/Down - Move selection\n"
    "  Enter/o - Toggle document drawer\n"
    "  Esc - Close drawer\n"
    "  d - Refresh documents\n"
    "  n/p - Next / previous page\n"
    "  v - Cycle document view\n"
    "  ? - Help"
)


class DashboardScreen(BaseScreen):
    """Single-screen cluster dashboard."""

    BINDINGS = DASHBOARD_SCREEN_BINDINGS

    DEFAULT_CSS = """
    DashboardScreen {
        layers: base overlay;
    }

    DashboardScreen .panel {
        border: round $primary;
        padding: 0 1;
    }

    #top-bar {
        height: 3;
    }

    #body {
        height: 1fr;
    }

    #left-nav {
        width: 20%;
    }

    #right-main {
        width: 80%;
    }

    #scope-tabs, #scope-filter {
        height: 3;
    }

    #scope-list {
        height: 1fr;
        min-height: 7;
    }

    #favorites {
        height: 5;
    }

    #saved-views {
        height: 7;
    }

    #query-block {
        height: 5;
    }

    #results-table {
        height: 1fr;
        border: round $primary;
    }

    #doc-drawer {
        layer: overlay;
        dock: right;
        offset-y: 3;
        background: $surface;
        display: none;
    }

    #error-line {
        height: 1;
    }
    """

    def __init__(
        self,
        state: AppState,
        orchestrator: RefreshOrchestrator,
        refresh_interval: float = REFRESH_INTERVAL_DEFAULT,
    ) -> None:
        super().__init__()
        self._state = state
        self._refresh_interval = refresh_interval
        self._refresh_timer: Timer | None = None
        self._presenter = DashboardPresenter(self, state, orchestrator)

    @property
    def screen_title(self) -> str:
        return "Dashboard"

    @property
    def presenter(self) -> DashboardPresenter:
        return self._presenter

    def compose(self) -> ComposeResult:
        yield CustomStatic(id=TOP_BAR_ID, title=PANEL_TITLES[TOP_BAR_ID])
        with Horizontal(id="body"):
            with Vertical(id=LEFT_NAV_ID):
                yield CustomStatic(id=SCOPE_TABS_ID, title=PANEL_TITLES[SCOPE_TABS_ID])
                yield CustomStatic(id=SCOPE_FILTER_ID, title=PANEL_TITLES[SCOPE_FILTER_ID])
                yield CustomStatic(
                    id=SCOPE_LIST_ID, title=self._presenter.scope_panel_title()
                )
                yield CustomStatic(id=FAVORITES_ID, title=PANEL_TITLES[FAVORITES_ID])
                yield CustomStatic(id=SAVED_VIEWS_ID, title=PANEL_TITLES[SAVED_VIEWS_ID])
            with Vertical(id=RIGHT_MAIN_ID):
                yield CustomStatic(id=QUERY_BLOCK_ID, title=PANEL_TITLES[QUERY_BLOCK_ID])
                yield CustomStatic(id=RESULTS_TABLE_ID)
        yield CustomStatic(id=DOC_DRAWER_ID, title=PANEL_TITLES[DOC_DRAWER_ID])
        yield CustomStatic(id=ERROR_LINE_ID)
        yield Footer()

    def on_mount(self) -> None:
        super().on_mount()
        self._refresh_timer = self.set_interval(
            self._refresh_interval, self._on_refresh_tick
        )
        self.render_state()

    def on_unmount(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None
        super().on_unmount()

    async def load_data(self) -> None:
        self._presenter.refresh_all()

    def _on_refresh_tick(self) -> None:
        self._presenter.refresh_all()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_state(self) -> None:
        """Push every view model into its widget."""
        presenter = self._presenter
        self.update_static(TOP_BAR_ID, presenter.build_top_bar())
        self.update_static(SCOPE_TABS_ID, presenter.build_scope_tabs())
        self.update_static(SCOPE_FILTER_ID, presenter.build_filter_line())
        self.update_static(SCOPE_LIST_ID, presenter.build_scope_list())
        self.update_static(FAVORITES_ID, presenter.build_favorites())
        self.update_static(SAVED_VIEWS_ID, presenter.build_saved_views())
        self.update_static(QUERY_BLOCK_ID, presenter.build_query_block())
        self.update_static(
            RESULTS_TABLE_ID, presenter.build_results_table(self._results_width())
        )
        self.update_static(ERROR_LINE_ID, presenter.build_error_line())
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{SCOPE_LIST_ID}", CustomStatic).set_title(
                presenter.scope_panel_title()
            )
        self._render_drawer()

    def _results_width(self) -> int:
        with suppress(NoMatches, WrongType):
            width = self.query_one(f"#{RESULTS_TABLE_ID}", CustomStatic).size.width
            if width:
                return width
        return self.size.width * 4 // 5

    def _render_drawer(self) -> None:
        with suppress(NoMatches, WrongType):
            drawer = self.query_one(f"#{DOC_DRAWER_ID}", CustomStatic)
            height = self.size.height - _TOP_BAR_HEIGHT - _FOOTER_HEIGHT
            if not self._state.show_doc_drawer or height < DRAWER_HEIGHT_MIN:
                drawer.display = False
                return
            drawer.styles.width = drawer_width(self.size.width)
            drawer.styles.height = height
            drawer.update(self._presenter.build_drawer(max(height - 2, 0)))
            drawer.display = True

    def on_resize(self, _: events.Resize) -> None:
        self.render_state()

    def on_dashboard_data_loaded(self, _: DashboardDataLoaded) -> None:
        self.render_state()

    def on_dashboard_data_load_failed(self, event: DashboardDataLoadFailed) -> None:
        self.render_state()
        self.notify(event.error, severity="error")

    # =========================================================================
    # Editing
    # =========================================================================

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable dashboard bindings while a text edit is in progress."""
        if self._state.input.is_editing:
            return False
        return True

    def on_key(self, event: events.Key) -> None:
        """Route keystrokes into the edit buffer while editing."""
        machine = self._state.input
        if not machine.is_editing:
            return
        event.stop()
        event.prevent_default()
        if event.key == "escape":
            self._state.cancel_edit()
            self._after_edit_finished(refetch=False)
        elif event.key == "enter":
            self._after_edit_finished(refetch=self._state.commit_edit())
        elif event.key == "backspace":
            machine.backspace()
        elif event.is_printable and event.character:
            machine.insert(event.character)
        self.render_state()

    def _after_edit_finished(self, *, refetch: bool) -> None:
        self.refresh_bindings()
        if refetch:
            self._presenter.refresh_documents()

    def action_start_query_edit(self) -> None:
        self._state.start_query_edit()
        self.refresh_bindings()
        self.render_state()

    def action_start_filter_edit(self) -> None:
        self._state.start_filter_edit()
        self.refresh_bindings()
        self.render_state()

    # =========================================================================
    # Navigation
    # =========================================================================

    def action_refresh(self) -> None:
        self._presenter.refresh_all()

    def action_refresh_documents(self) -> None:
        self._presenter.refresh_documents()

    def action_toggle_focus(self) -> None:
        self._state.toggle_focus()
        self.render_state()

    def action_scope_kind(self, kind: str) -> None:
        if self._state.switch_scope_kind(ScopeKind(kind)):
            self._presenter.refresh_documents()
        self.render_state()

    def action_move_selection(self, delta: int) -> None:
        if self._state.move_selection(delta):
            self._presenter.refresh_documents()
        self.render_state()

    def action_next_page(self) -> None:
        if self._state.browser.next_page():
            self._presenter.refresh_documents()
        self.render_state()

    def action_prev_page(self) -> None:
        if self._state.browser.prev_page():
            self._presenter.refresh_documents()
        self.render_state()

    # =========================================================================
    # Document drawer
    # =========================================================================

    def action_toggle_drawer(self) -> None:
        if self._state.toggle_drawer():
            self.render_state()

    def action_close_drawer(self) -> None:
        if self._state.close_drawer():
            self.render_state()

    def action_cycle_view_mode(self) -> None:
        if self._state.cycle_view_mode():
            self.render_state()

    def action_show_help(self) -> None:
        self.notify(_HELP_TEXT, severity="information", timeout=30)
