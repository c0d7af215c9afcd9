"""Unit tests for DocumentBrowser - query commit, pagination, and result selection."""

from __future__ import annotations

from esdash.models.search import Document, SearchSummary
from esdash.models.state.document_browser import DocumentBrowser


def _docs(count: int) -> list[Document]:
    return [Document(id=f"doc-{i}", source={"n": i}) for i in range(count)]


# =============================================================================
# Query and pagination
# =============================================================================


class TestDocumentBrowserPagination:
    """Test cursor movement and generation bumps."""

    def test_defaults(self) -> None:
        browser = DocumentBrowser(page_size=5)
        assert browser.query == ""
        assert browser.cursor.from_ == 0
        assert browser.cursor.size == 5
        assert browser.cursor.total is None

    def test_commit_query_trims_and_resets(self) -> None:
        browser = DocumentBrowser()
        browser.cursor.from_ = 10
        browser.cursor.total = 42
        generation = browser.generation
        assert browser.commit_query("  status:200 ") is True
        assert browser.query == "status:200"
        assert browser.cursor.from_ == 0
        assert browser.cursor.total is None
        assert browser.generation > generation

    def test_next_page_with_unknown_total(self) -> None:
        browser = DocumentBrowser(page_size=5)
        assert browser.next_page() is True
        assert browser.cursor.from_ == 5

    def test_next_page_stops_at_last_page(self) -> None:
        browser = DocumentBrowser(page_size=5)
        browser.cursor.from_ = 10
        browser.cursor.total = 12
        generation = browser.generation
        assert browser.next_page() is False
        assert browser.cursor.from_ == 10
        assert browser.generation == generation

    def test_next_page_when_more_hits_remain(self) -> None:
        browser = DocumentBrowser(page_size=5)
        browser.cursor.from_ = 5
        browser.cursor.total = 12
        assert browser.next_page() is True
        assert browser.cursor.from_ == 10

    def test_prev_page_at_start_is_noop(self) -> None:
        browser = DocumentBrowser()
        assert browser.prev_page() is False
        assert browser.cursor.from_ == 0

    def test_prev_page_does_not_go_negative(self) -> None:
        browser = DocumentBrowser(page_size=5)
        browser.cursor.from_ = 3
        assert browser.prev_page() is True
        assert browser.cursor.from_ == 0

    def test_next_then_prev_restores_offset_with_known_total(self) -> None:
        for start in (0, 5, 10, 15):
            browser = DocumentBrowser(page_size=5)
            browser.cursor.from_ = start
            browser.cursor.total = 23
            assert browser.next_page() is True
            assert browser.prev_page() is True
            assert browser.cursor.from_ == start

    def test_unaligned_offset_with_unknown_total(self) -> None:
        browser = DocumentBrowser(page_size=5)
        browser.cursor.from_ = 7
        assert browser.next_page() is True
        assert browser.cursor.from_ == 12
        assert browser.prev_page() is True
        assert browser.cursor.from_ == 7
        assert browser.prev_page() is True
        assert browser.cursor.from_ == 2
        assert browser.prev_page() is True
        assert browser.cursor.from_ == 0

    def test_reset_pagination_clears_selection(self) -> None:
        browser = DocumentBrowser()
        browser.selected = 2
        browser.reset_pagination()
        assert browser.selected is None


# =============================================================================
# Results
# =============================================================================


class TestDocumentBrowserResults:
    """Test applying results and selecting documents."""

    def test_apply_sets_total_and_selects_first(self) -> None:
        browser = DocumentBrowser()
        browser.apply_fetch_result(_docs(3), SearchSummary(total=30, took_ms=4))
        assert browser.cursor.total == 30
        assert browser.selected == 0
        assert browser.selected_document().id == "doc-0"

    def test_apply_clamps_previous_selection(self) -> None:
        browser = DocumentBrowser()
        browser.apply_fetch_result(_docs(5), SearchSummary(total=5))
        browser.selected = 4
        browser.apply_fetch_result(_docs(2), SearchSummary(total=2))
        assert browser.selected == 1

    def test_apply_empty_clears_selection(self) -> None:
        browser = DocumentBrowser()
        browser.apply_fetch_result([], SearchSummary(total=0))
        assert browser.selected is None
        assert browser.selected_document() is None

    def test_clear_results(self) -> None:
        browser = DocumentBrowser()
        browser.apply_fetch_result(_docs(2), SearchSummary(total=2, took_ms=1))
        browser.clear_results()
        assert browser.documents == []
        assert browser.summary == SearchSummary()
        assert browser.cursor.total is None

    def test_document_selection_wraps(self) -> None:
        browser = DocumentBrowser()
        browser.apply_fetch_result(_docs(2), SearchSummary(total=2))
        browser.select_next_document()
        assert browser.selected == 1
        browser.select_next_document()
        assert browser.selected == 0
        browser.select_prev_document()
        assert browser.selected == 1

    def test_document_selection_on_empty_page(self) -> None:
        browser = DocumentBrowser()
        browser.select_next_document()
        assert browser.selected is None


# =============================================================================
# Page label
# =============================================================================


class TestDocumentBrowserPageLabel:
    """Test the results table title."""

    def test_unknown_total(self) -> None:
        browser = DocumentBrowser(page_size=5)
        assert browser.page_label() == "Results (from 0, size 5)"

    def test_zero_total(self) -> None:
        browser = DocumentBrowser()
        browser.apply_fetch_result([], SearchSummary(total=0))
        assert browser.page_label() == "Results (0)"

    def test_known_total(self) -> None:
        browser = DocumentBrowser(page_size=5)
        browser.cursor.from_ = 5
        browser.apply_fetch_result(_docs(5), SearchSummary(total=12))
        assert browser.page_label() == "Results (page 2/3, total 12)"
