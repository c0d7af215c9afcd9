"""Dashboard screen presenter - refresh workers and view-model formatting."""

from __future__ import annotations

import logging
from typing import Any

from rich.table import Table
from rich.text import Text
from textual.message import Message
from textual.worker import Worker, WorkerState

from esdash.constants.enums import Focus, InputMode, ScopeKind
from esdash.constants.limits import FILTER_CHIP_MAX_LENGTH, SAVED_VIEW_SUMMARY_MAX_LENGTH
from esdash.constants.screens.dashboard import (
    SCOPE_KIND_LABELS,
    SCOPE_TAB_ORDER,
    SCOPE_TAB_TITLES,
    STATUS_NEVER,
)
from esdash.constants.values import (
    EMPTY_VALUE,
    NO_DOCUMENTS,
    NO_FAVORITES,
    NO_FILTERS,
    NO_ITEMS,
    NO_SAVED_VIEWS,
    QUERY_MODE_LABEL,
)
from esdash.controllers.refresh import RefreshOrchestrator
from esdash.models.scope import AliasEntry, DataStreamEntry, IndexEntry, ScopeEntry
from esdash.models.state.app_state import AppState
from esdash.screens.dashboard.config import (
    ACTIVE_TAB_STYLE,
    FILTER_CHIP_STYLE,
    FOCUSED_SELECTION_STYLE,
    HEALTH_STYLES,
    LABEL_STYLE,
    MATCH_HIGHLIGHT_STYLE,
    RESULTS_TABLE_CHROME_WIDTH,
    RESULTS_TABLE_COLUMNS,
    STATUS_OK_STYLE,
    STATUS_PROBLEM_STYLE,
    UNFOCUSED_SELECTION_STYLE,
)
from esdash.utils.document_renderer import HEADER_LINE_COUNT, raw_lines, render_document_lines
from esdash.utils.text import result_id_width, truncate_string

logger = logging.getLogger(__name__)

REFRESH_WORKER_GROUP = "refresh"
DOCUMENTS_WORKER_GROUP = "documents"

_ACTIVE_WORKER_STATES = (WorkerState.PENDING, WorkerState.RUNNING)


# =============================================================================
# Worker Messages
# =============================================================================


class DashboardDataLoaded(Message):
    """Message indicating a refresh pass finished and state is ready to draw."""

    def __init__(self, source: str) -> None:
        super().__init__()
        self.source = source


class DashboardDataLoadFailed(Message):
    """Message indicating a refresh worker crashed outside the cluster client."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


def health_style(status: str | None) -> str:
    return HEALTH_STYLES.get((status or "").lower(), LABEL_STYLE)


class DashboardPresenter:
    """Presenter for DashboardScreen - runs refreshes and builds rich view models."""

    def __init__(
        self,
        screen: Any,
        state: AppState,
        orchestrator: RefreshOrchestrator,
    ) -> None:
        self._screen = screen
        self._state = state
        self._orchestrator = orchestrator
        self._refresh_worker: Worker[None] | None = None

    @property
    def state(self) -> AppState:
        return self._state

    # =========================================================================
    # Data Loading
    # =========================================================================

    def refresh_all(self) -> bool:
        """Start a full refresh unless one is still running.

        A pass that is in flight is never cancelled, so a slow cluster still
        gets its failures aggregated and its refresh time stamped.

        Returns:
            True if a new pass was started, False if the request was dropped.
        """
        worker = self._refresh_worker
        if worker is not None and worker.state in _ACTIVE_WORKER_STATES:
            logger.debug("Full refresh still running, skipping")
            return False
        self._refresh_worker = self._screen.run_worker(
            self._refresh_all_worker,
            name="refresh-all",
            group=REFRESH_WORKER_GROUP,
            exclusive=False,
        )
        return True

    def refresh_documents(self) -> None:
        """Fetch the current document page, cancelling an older fetch."""
        self._screen.run_worker(
            self._refresh_documents_worker,
            name="refresh-documents",
            group=DOCUMENTS_WORKER_GROUP,
            exclusive=True,
        )

    async def _refresh_all_worker(self) -> None:
        try:
            await self._orchestrator.refresh_all()
        except Exception as exc:
            logger.exception("Full refresh crashed")
            self._screen.post_message(DashboardDataLoadFailed(self._friendly_error(exc)))
            return
        self._screen.post_message(DashboardDataLoaded(REFRESH_WORKER_GROUP))

    async def _refresh_documents_worker(self) -> None:
        try:
            await self._orchestrator.refresh_documents()
        except Exception as exc:
            logger.exception("Document refresh crashed")
            self._screen.post_message(DashboardDataLoadFailed(self._friendly_error(exc)))
            return
        self._screen.post_message(DashboardDataLoaded(DOCUMENTS_WORKER_GROUP))

    @staticmethod
    def _friendly_error(error: BaseException) -> str:
        """Convert an exception to a user-friendly error message."""
        msg = str(error)
        if "timed out" in msg.lower() or "timeout" in msg.lower():
            return "Connection timed out"
        if "connection refused" in msg.lower():
            return "Connection refused"
        # Truncate long messages
        if len(msg) > 80:
            return msg[:77] + "..."
        return msg or type(error).__name__

    # =========================================================================
    # Top bar
    # =========================================================================

    def scope_label(self) -> str:
        catalog = self._state.catalog
        name = catalog.selected_name() or EMPTY_VALUE
        return f"{SCOPE_KIND_LABELS[catalog.active_kind]}/{name}"

    def status_summary(self) -> tuple[str, str]:
        """Return the status text and its style."""
        summary = self._state.browser.summary
        hits = EMPTY_VALUE if summary.total is None else str(summary.total)
        took = EMPTY_VALUE if summary.took_ms is None else f"{summary.took_ms}ms"
        parts = [f"hits {hits}", f"took {took}"]
        if summary.shards_failed:
            parts.append(f"shard_fail {summary.shards_failed}")
        if summary.timed_out:
            parts.append("timeout")
        if self._state.last_error:
            failed = self._orchestrator.get_error_sources()
            parts.append(f"error {','.join(failed)}" if failed else "error")
        problem = summary.has_problems or bool(self._state.last_error)
        style = STATUS_PROBLEM_STYLE if problem else STATUS_OK_STYLE
        return f"status: {' | '.join(parts)}", style

    def build_top_bar(self) -> Text:
        state = self._state
        health = state.health
        text = Text()
        text.append("cluster:", style=LABEL_STYLE)
        text.append(" ")
        text.append(
            (health.cluster_name if health else None) or EMPTY_VALUE,
            style=health_style(health.status if health else None),
        )
        for label, value in (
            ("auth", state.auth_label),
            ("scope", self.scope_label()),
            ("mode", QUERY_MODE_LABEL),
        ):
            text.append("  ")
            text.append(f"{label}:", style=LABEL_STYLE)
            text.append(f" {value}")
        status_text, status_style = self.status_summary()
        text.append("  ")
        text.append(status_text, style=status_style)
        return text

    # =========================================================================
    # Left navigation
    # =========================================================================

    def build_scope_tabs(self) -> Text:
        active = self._state.catalog.active_kind
        text = Text()
        for index, kind in enumerate(SCOPE_TAB_ORDER):
            if index:
                text.append(" | ", style=LABEL_STYLE)
            text.append(
                f"{index + 1} {SCOPE_TAB_TITLES[kind]}",
                style=ACTIVE_TAB_STYLE if kind == active else "",
            )
        return text

    def build_filter_line(self) -> Text:
        machine = self._state.input
        if machine.mode == InputMode.EDITING_FILTER:
            value = machine.buffer
            label = "Filter*"
        else:
            value = self._state.catalog.filter_text
            label = "Filter"
        text = Text()
        text.append(label, style=LABEL_STYLE)
        text.append(f": {value or EMPTY_VALUE}")
        return text

    @staticmethod
    def scope_entry_line(entry: ScopeEntry) -> Text:
        text = Text()
        text.append(entry.identity_key, style="bold")
        if isinstance(entry, IndexEntry):
            health = entry.health or EMPTY_VALUE
            text.append(" ")
            text.append(health, style=health_style(entry.health))
            text.append(f" docs={entry.docs_count or EMPTY_VALUE}")
        elif isinstance(entry, AliasEntry):
            text.append(f" -> {entry.target_index}")
        elif isinstance(entry, DataStreamEntry):
            status = entry.status or EMPTY_VALUE
            generation = EMPTY_VALUE if entry.generation is None else entry.generation
            text.append(" ")
            text.append(status, style=health_style(entry.status))
            text.append(f" gen={generation} backing={entry.backing_index_count}")
        return text

    def build_scope_list(self) -> Text:
        catalog = self._state.catalog
        collection = catalog.active_collection
        positions = catalog.filtered_positions()
        if not positions:
            return Text(NO_ITEMS)
        selection_style = self._selection_style(Focus.LEFT_NAV)
        lines = []
        for position in positions:
            line = self.scope_entry_line(collection.entries[position])
            if position == collection.selected:
                line = Text("> ") + line
                line.stylize(selection_style)
            else:
                line = Text("  ") + line
            lines.append(line)
        return Text("\n").join(lines)

    def build_favorites(self) -> Text:
        if not self._state.favorites:
            return Text(NO_FAVORITES)
        return Text("\n".join(self._state.favorites))

    def build_saved_views(self) -> Text:
        views = self._state.saved_views
        if not views:
            return Text(NO_SAVED_VIEWS)
        return Text(
            "\n".join(
                truncate_string(
                    f"{view.name}  {view.scope}  {view.query}",
                    SAVED_VIEW_SUMMARY_MAX_LENGTH,
                )
                for view in views
            )
        )

    # =========================================================================
    # Query block and results
    # =========================================================================

    def build_query_block(self) -> Text:
        state = self._state
        machine = state.input
        editing = machine.mode == InputMode.EDITING_QUERY
        value = machine.buffer if editing else state.browser.query

        text = Text()
        text.append("Query*" if editing else "Query", style=LABEL_STYLE)
        text.append(f": {value or EMPTY_VALUE}\n")

        text.append("Filters", style=LABEL_STYLE)
        text.append(": ")
        committed = state.browser.query.strip()
        if committed:
            chip = truncate_string(committed, FILTER_CHIP_MAX_LENGTH)
            text.append(f" {chip} ", style=FILTER_CHIP_STYLE)
        else:
            text.append(NO_FILTERS)
        text.append("\n")

        summary = state.browser.summary
        hits = EMPTY_VALUE if summary.total is None else str(summary.total)
        took = EMPTY_VALUE if summary.took_ms is None else f"{summary.took_ms}ms"
        parts = [f"hits {hits}", f"took {took}"]
        if summary.shards_failed:
            parts.append(f"shard_fail {summary.shards_failed}")
        if summary.timed_out:
            parts.append("timeout")
        text.append("Results", style=LABEL_STYLE)
        text.append(": ")
        text.append(
            " | ".join(parts),
            style=STATUS_PROBLEM_STYLE if summary.has_problems else STATUS_OK_STYLE,
        )
        return text

    def build_results_table(self, width: int) -> Table:
        browser = self._state.browser
        id_width = result_id_width(width)
        preview_width = max(width - id_width - RESULTS_TABLE_CHROME_WIDTH, 0)

        table = Table(
            title=browser.page_label(),
            expand=True,
            show_edge=False,
            header_style=f"bold {LABEL_STYLE}",
        )
        table.add_column(RESULTS_TABLE_COLUMNS[0], width=id_width, no_wrap=True)
        table.add_column(RESULTS_TABLE_COLUMNS[1], no_wrap=True, overflow="ellipsis")

        if not browser.documents:
            table.add_row(NO_DOCUMENTS, "")
            return table
        selection_style = self._selection_style(Focus.RESULTS)
        for index, document in enumerate(browser.documents):
            table.add_row(
                truncate_string(document.id, id_width),
                truncate_string(raw_lines(document.source)[0], preview_width),
                style=selection_style if index == browser.selected else None,
            )
        return table

    def _selection_style(self, pane: Focus) -> str:
        if self._state.focus == pane:
            return FOCUSED_SELECTION_STYLE
        return UNFOCUSED_SELECTION_STYLE

    # =========================================================================
    # Drawer and status
    # =========================================================================

    def build_drawer(self, max_lines: int) -> Text:
        state = self._state
        lines = render_document_lines(
            state.browser.selected_document(),
            state.doc_view_mode,
            state.browser.query,
            max_lines,
        )
        rendered = []
        for index, line in enumerate(lines):
            highlight = ACTIVE_TAB_STYLE if index < HEADER_LINE_COUNT else MATCH_HIGHLIGHT_STYLE
            text = Text()
            for segment in line:
                text.append(segment.text, style=highlight if segment.highlighted else "")
            rendered.append(text)
        return Text("\n").join(rendered)

    def build_error_line(self) -> Text:
        state = self._state
        text = Text()
        if state.last_error:
            text.append(f"error: {state.last_error}", style=STATUS_PROBLEM_STYLE)
            text.append("  ")
        refreshed = (
            state.last_refreshed.astimezone().strftime("%H:%M:%S")
            if state.last_refreshed
            else STATUS_NEVER
        )
        text.append(f"last refresh: {refreshed}", style=LABEL_STYLE)
        return text

    def scope_panel_title(self) -> str:
        kind: ScopeKind = self._state.catalog.active_kind
        return SCOPE_TAB_TITLES[kind]
