"""Scope catalog state: the three browsable collections, filter, and selection.

Selection is always tracked as a position in ``entries`` and must reference
an entry that passes the current filter. Every mutation that can invalidate
that (filter change, refresh) reconciles it by identity key.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from esdash.constants.enums import ScopeKind
from esdash.models.scope import ScopeEntry

logger = logging.getLogger(__name__)


def filter_positions(entries: Sequence[ScopeEntry], needle: str) -> list[int]:
    """Return positions of entries whose identity key contains ``needle``.

    Matching is a case-insensitive substring test; a blank needle keeps
    every entry in order.
    """
    needle = needle.strip().lower()
    if not needle:
        return list(range(len(entries)))
    return [
        position
        for position, entry in enumerate(entries)
        if needle in entry.identity_key.lower()
    ]


@dataclass
class ScopeCollection:
    """Entries of one scope kind plus the selected position."""

    kind: ScopeKind
    entries: list[ScopeEntry] = field(default_factory=list)
    selected: int | None = None

    def selected_entry(self) -> ScopeEntry | None:
        if self.selected is None or not 0 <= self.selected < len(self.entries):
            return None
        return self.entries[self.selected]

    def selected_key(self) -> str | None:
        entry = self.selected_entry()
        return entry.identity_key if entry is not None else None

    def position_of(self, key: str) -> int | None:
        for position, entry in enumerate(self.entries):
            if entry.identity_key == key:
                return position
        return None

    def reconcile(self, needle: str) -> bool:
        """Make the selection reference a visible entry.

        Returns:
            True when the selected position changed.
        """
        visible = filter_positions(self.entries, needle)
        previous = self.selected
        if not visible:
            self.selected = None
        elif self.selected not in visible:
            self.selected = visible[0]
        return self.selected != previous


class ScopeCatalog:
    """Indices, aliases, and data streams with one shared filter."""

    def __init__(self, active_kind: ScopeKind = ScopeKind.INDICES) -> None:
        self._collections: dict[ScopeKind, ScopeCollection] = {
            kind: ScopeCollection(kind=kind) for kind in ScopeKind
        }
        self._active_kind = active_kind
        self._filter = ""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def active_kind(self) -> ScopeKind:
        return self._active_kind

    @property
    def active_collection(self) -> ScopeCollection:
        return self._collections[self._active_kind]

    @property
    def filter_text(self) -> str:
        return self._filter

    def collection(self, kind: ScopeKind) -> ScopeCollection:
        return self._collections[kind]

    def filtered_positions(self, kind: ScopeKind | None = None) -> list[int]:
        collection = self._collections[kind or self._active_kind]
        return filter_positions(collection.entries, self._filter)

    def filtered_entries(self, kind: ScopeKind | None = None) -> list[ScopeEntry]:
        collection = self._collections[kind or self._active_kind]
        return [
            collection.entries[position]
            for position in filter_positions(collection.entries, self._filter)
        ]

    def selected_entry(self) -> ScopeEntry | None:
        return self.active_collection.selected_entry()

    def selected_name(self) -> str | None:
        return self.active_collection.selected_key()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_active_kind(self, kind: ScopeKind) -> bool:
        """Switch the active collection.

        Returns:
            False when ``kind`` is already active.
        """
        if kind == self._active_kind:
            return False
        self._active_kind = kind
        return True

    def select_next(self) -> None:
        self._shift_selection(1)

    def select_prev(self) -> None:
        self._shift_selection(-1)

    def _shift_selection(self, delta: int) -> None:
        collection = self.active_collection
        visible = filter_positions(collection.entries, self._filter)
        if not visible:
            collection.selected = None
            return
        if collection.selected in visible:
            current = visible.index(collection.selected)
            collection.selected = visible[(current + delta) % len(visible)]
        elif delta >= 0:
            collection.selected = visible[0]
        else:
            collection.selected = visible[-1]

    def set_filter(self, text: str) -> None:
        """Store the trimmed filter. Selection is left for reconciliation."""
        self._filter = text.strip()

    def reconcile_selection_after_filter_change(self) -> bool:
        """Re-validate every collection's selection against the filter.

        Returns:
            True when the active collection's selection changed.
        """
        active_changed = False
        for kind, collection in self._collections.items():
            changed = collection.reconcile(self._filter)
            if kind == self._active_kind:
                active_changed = changed
        return active_changed

    def replace_collection(self, kind: ScopeKind, entries: Sequence[ScopeEntry]) -> None:
        """Replace a collection, keeping the selection by identity key."""
        collection = self._collections[kind]
        previous_key = collection.selected_key()
        collection.entries = list(entries)
        if not collection.entries:
            collection.selected = None
            return
        position = collection.position_of(previous_key) if previous_key else None
        collection.selected = position if position is not None else 0
        collection.reconcile(self._filter)
        logger.debug(
            "Replaced %s: %d entries, selected=%s",
            kind.value,
            len(collection.entries),
            collection.selected_key(),
        )
