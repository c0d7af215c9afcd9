"""Cluster client contract for ESDash.

Clients run their blocking I/O off the event loop so they can be
awaited from Textual workers without freezing the UI.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from esdash.constants.enums import ScopeKind
from esdash.models.scope import ClusterHealth, ScopeEntry
from esdash.models.search import Document, SearchSummary


@runtime_checkable
class ClusterClient(Protocol):
    """Read-only operations the refresh layer needs from a cluster."""

    async def get_health(self) -> ClusterHealth: ...

    async def list_scope(self, kind: ScopeKind) -> list[ScopeEntry]: ...

    async def search(
        self, scope: str, from_: int, size: int, query: str
    ) -> tuple[list[Document], SearchSummary]: ...
