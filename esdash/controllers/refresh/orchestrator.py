"""Refresh orchestration: run cluster fetches and fold results into AppState.

A full refresh runs five fetches strictly in sequence. Each one fails
independently; failures are aggregated into a single error summary while
the sources that succeeded still update their part of the state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from esdash.constants.enums import FetchSources, FetchState, ScopeKind
from esdash.constants.values import ERROR_SEPARATOR
from esdash.controllers.base import ClusterClient
from esdash.controllers.errors import ClusterClientError
from esdash.models.state.app_state import AppState

logger = logging.getLogger(__name__)

_SCOPE_SOURCES: tuple[tuple[FetchSources, ScopeKind], ...] = (
    (FetchSources.INDICES, ScopeKind.INDICES),
    (FetchSources.ALIASES, ScopeKind.ALIASES),
    (FetchSources.DATA_STREAMS, ScopeKind.DATA_STREAMS),
)


@dataclass
class FetchStatus:
    """Status tracking for a single data source fetch operation."""

    source_name: str
    state: FetchState = FetchState.SUCCESS


@dataclass(frozen=True)
class DocumentRequest:
    """Parameters of one document fetch, captured at dispatch time."""

    scope: str
    from_: int
    size: int
    query: str
    generation: int


class RefreshOrchestrator:
    """Applies cluster fetch results to one ``AppState``."""

    def __init__(self, state: AppState, client: ClusterClient) -> None:
        self.state = state
        self.client = client
        self._fetch_states: dict[str, FetchStatus] = {
            source.value: FetchStatus(source_name=source.value, state=FetchState.LOADING)
            for source in FetchSources
        }

    # ------------------------------------------------------------------
    # Fetch state tracking
    # ------------------------------------------------------------------

    def _update_fetch_state(self, source: str, state: FetchState) -> None:
        """Update the fetch state for a data source."""
        if source not in self._fetch_states:
            self._fetch_states[source] = FetchStatus(source_name=source)
        self._fetch_states[source].state = state

    def get_error_sources(self) -> list[str]:
        """Get list of data sources with errors."""
        return [
            source
            for source, status in self._fetch_states.items()
            if status.state == FetchState.ERROR
        ]

    # ------------------------------------------------------------------
    # Full refresh
    # ------------------------------------------------------------------

    async def refresh_all(self) -> None:
        """Refresh health, every scope collection, then the document page."""
        errors: list[str] = []

        await self._run_source(FetchSources.HEALTH, self._refresh_health, errors)
        for source, kind in _SCOPE_SOURCES:
            await self._run_source(source, self._scope_refresher(kind), errors)
        await self._run_source(FetchSources.DOCUMENTS, self._refresh_documents, errors)

        self.state.last_refreshed = datetime.now(timezone.utc)
        self.state.last_error = ERROR_SEPARATOR.join(errors) if errors else None

    async def _run_source(self, source: FetchSources, fetch: Any, errors: list[str]) -> None:
        self._update_fetch_state(source.value, FetchState.LOADING)
        try:
            await fetch()
        except ClusterClientError as exc:
            message = f"{source.value}: {exc}"
            logger.warning("Refresh of %s failed: %s", source.value, exc)
            self._update_fetch_state(source.value, FetchState.ERROR)
            errors.append(message)
            return
        self._update_fetch_state(source.value, FetchState.SUCCESS)

    async def _refresh_health(self) -> None:
        self.state.health = await self.client.get_health()

    def _scope_refresher(self, kind: ScopeKind) -> Any:
        async def _refresh() -> None:
            entries = await self.client.list_scope(kind)
            catalog = self.state.catalog
            previous = catalog.selected_name()
            catalog.replace_collection(kind, entries)
            if kind == catalog.active_kind and catalog.selected_name() != previous:
                self.state.browser.reset_pagination()

        return _refresh

    # ------------------------------------------------------------------
    # Document refresh
    # ------------------------------------------------------------------

    def snapshot_document_request(self) -> DocumentRequest | None:
        """Capture the parameters a document fetch would use right now."""
        scope = self.state.catalog.selected_name()
        if scope is None:
            return None
        browser = self.state.browser
        return DocumentRequest(
            scope=scope,
            from_=browser.cursor.from_,
            size=browser.cursor.size,
            query=browser.query,
            generation=browser.generation,
        )

    def _is_current(self, request: DocumentRequest) -> bool:
        return (
            request.generation == self.state.browser.generation
            and request.scope == self.state.catalog.selected_name()
        )

    async def _refresh_documents(self) -> bool:
        request = self.snapshot_document_request()
        if request is None:
            self.state.browser.clear_results()
            return True
        documents, summary = await self.client.search(
            request.scope, request.from_, request.size, request.query
        )
        if not self._is_current(request):
            logger.debug("Dropping stale documents for %s", request)
            return False
        self.state.browser.apply_fetch_result(documents, summary)
        return True

    async def refresh_documents(self) -> bool:
        """Fetch the current document page alone.

        Returns:
            True when the result was applied, False when it failed or was
            superseded by a newer request.
        """
        source = FetchSources.DOCUMENTS.value
        self._update_fetch_state(source, FetchState.LOADING)
        try:
            applied = await self._refresh_documents()
        except ClusterClientError as exc:
            logger.warning("Refresh of %s failed: %s", source, exc)
            self._update_fetch_state(source, FetchState.ERROR)
            self.state.last_error = f"{source}: {exc}"
            return False
        self._update_fetch_state(source, FetchState.SUCCESS)
        return applied
