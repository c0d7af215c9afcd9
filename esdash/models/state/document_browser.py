"""Document browsing state: committed query, page cursor, and results."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from esdash.constants.defaults import PAGE_SIZE_DEFAULT
from esdash.models.search import Document, SearchSummary

logger = logging.getLogger(__name__)


@dataclass
class PageCursor:
    """Offset pagination over search hits."""

    from_: int = 0
    size: int = PAGE_SIZE_DEFAULT
    total: int | None = None


class DocumentBrowser:
    """Query and page state for the results table.

    ``generation`` increases on every change that makes in-flight results
    obsolete. Callers snapshot it before a request and compare on arrival.
    """

    def __init__(self, page_size: int = PAGE_SIZE_DEFAULT) -> None:
        self.query = ""
        self.cursor = PageCursor(size=page_size)
        self.documents: list[Document] = []
        self.summary = SearchSummary()
        self.selected: int | None = None
        self.generation = 0

    def _invalidate(self) -> None:
        self.generation += 1

    # ------------------------------------------------------------------
    # Query and pagination
    # ------------------------------------------------------------------

    def commit_query(self, text: str) -> bool:
        """Store the trimmed query and restart pagination.

        Returns:
            Always True: documents must be fetched again.
        """
        self.query = text.strip()
        self.reset_pagination()
        return True

    def reset_pagination(self) -> None:
        self.cursor.from_ = 0
        self.cursor.total = None
        self.selected = None
        self._invalidate()

    def next_page(self) -> bool:
        cursor = self.cursor
        if cursor.total is not None and cursor.from_ + cursor.size >= cursor.total:
            return False
        cursor.from_ += cursor.size
        self._invalidate()
        return True

    def prev_page(self) -> bool:
        cursor = self.cursor
        if cursor.from_ == 0:
            return False
        cursor.from_ = max(0, cursor.from_ - cursor.size)
        self._invalidate()
        return True

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def apply_fetch_result(
        self, documents: Sequence[Document], summary: SearchSummary
    ) -> None:
        self.documents = list(documents)
        self.summary = summary
        self.cursor.total = summary.total
        if not self.documents:
            self.selected = None
        else:
            self.selected = min(self.selected or 0, len(self.documents) - 1)

    def clear_results(self) -> None:
        """Reset to the no-scope state."""
        self.documents = []
        self.summary = SearchSummary()
        self.cursor.total = None
        self.selected = None

    def select_next_document(self) -> None:
        if not self.documents:
            self.selected = None
        elif self.selected is None or self.selected + 1 >= len(self.documents):
            self.selected = 0
        else:
            self.selected += 1

    def select_prev_document(self) -> None:
        if not self.documents:
            self.selected = None
        elif not self.selected:
            self.selected = len(self.documents) - 1
        else:
            self.selected -= 1

    def selected_document(self) -> Document | None:
        if self.selected is None or not 0 <= self.selected < len(self.documents):
            return None
        return self.documents[self.selected]

    def page_label(self) -> str:
        cursor = self.cursor
        if cursor.total is None:
            return f"Results (from {cursor.from_}, size {cursor.size})"
        if cursor.total == 0:
            return "Results (0)"
        page = cursor.from_ // cursor.size + 1
        pages = math.ceil(cursor.total / cursor.size)
        return f"Results (page {page}/{pages}, total {cursor.total})"
