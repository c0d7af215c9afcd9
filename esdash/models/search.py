"""Search result models."""

from typing import Any

from pydantic import BaseModel

from esdash.constants.enums import ScopeKind


class Document(BaseModel):
    """A single search hit."""

    id: str
    source: Any = None


class SearchSummary(BaseModel):
    """Search response metadata shown in the status bar."""

    total: int | None = None
    took_ms: int | None = None
    shards_failed: int | None = None
    timed_out: bool | None = None

    @property
    def has_problems(self) -> bool:
        return bool(self.shards_failed) or bool(self.timed_out)


class SavedView(BaseModel):
    """A named scope and query pair."""

    name: str
    scope_kind: ScopeKind = ScopeKind.INDICES
    scope: str
    query: str = ""
