"""Unit tests for scalar constants, defaults, limits, and timeouts."""

from __future__ import annotations

from esdash.constants.defaults import (
    ES_URL_DEFAULT,
    ES_URL_ENV_VAR,
    PAGE_SIZE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from esdash.constants.limits import (
    DRAWER_WIDTH_MIN,
    DRAWER_WIDTH_PERCENT,
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
    RESULT_ID_WIDTH_MAX,
    RESULT_ID_WIDTH_MIN,
)
from esdash.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from esdash.constants.values import (
    APP_TITLE,
    ERROR_SEPARATOR,
    FLATTEN_COMPLEX,
    FLATTEN_EMPTY,
    FLATTEN_ROOT,
    NO_DOCUMENT_SELECTED,
    TRUNCATION_SENTINEL,
)

# =============================================================================
# Connection defaults
# =============================================================================


class TestConnectionDefaults:
    """Test connection-related defaults."""

    def test_es_url_default(self) -> None:
        assert ES_URL_DEFAULT == "http://localhost:9200"

    def test_es_url_env_var(self) -> None:
        assert ES_URL_ENV_VAR == "ES_URL"

    def test_request_timeout(self) -> None:
        assert CLUSTER_REQUEST_TIMEOUT == 3.0


# =============================================================================
# UI defaults and limits
# =============================================================================


class TestUIDefaults:
    """Test UI-related defaults and layout limits."""

    def test_page_size_default(self) -> None:
        assert PAGE_SIZE_DEFAULT == 5
        assert PAGE_SIZE_MIN <= PAGE_SIZE_DEFAULT <= PAGE_SIZE_MAX

    def test_refresh_interval_default_positive(self) -> None:
        assert REFRESH_INTERVAL_DEFAULT > 0

    def test_result_id_width_range(self) -> None:
        assert (RESULT_ID_WIDTH_MIN, RESULT_ID_WIDTH_MAX) == (12, 28)

    def test_drawer_width(self) -> None:
        assert DRAWER_WIDTH_MIN == 30
        assert DRAWER_WIDTH_PERCENT == 55


# =============================================================================
# Labels
# =============================================================================


class TestLabels:
    """Test user-visible labels and placeholders."""

    def test_app_title(self) -> None:
        assert APP_TITLE == "ESDash"

    def test_document_placeholders(self) -> None:
        assert NO_DOCUMENT_SELECTED == "No document selected"
        assert (FLATTEN_EMPTY, FLATTEN_ROOT, FLATTEN_COMPLEX) == (
            "<empty>",
            "<root>",
            "<complex>",
        )

    def test_truncation_sentinel(self) -> None:
        assert TRUNCATION_SENTINEL == "..."

    def test_error_separator(self) -> None:
        assert ERROR_SEPARATOR == " | "
