"""Constants module for ESDash TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (labels, placeholders)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (layout bounds, validation ranges)
- defaults.py: Default values for settings
- screens/: Screen-specific constants

Note: Keyboard bindings are defined in esdash.keyboard module.
"""

from esdash.constants.defaults import (
    ES_URL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from esdash.constants.enums import (
    DocViewMode,
    FetchSources,
    FetchState,
    Focus,
    HealthStatus,
    InputMode,
    ScopeKind,
)
from esdash.constants.limits import (
    REFRESH_INTERVAL_MIN,
    RESULT_ID_WIDTH_MAX,
    RESULT_ID_WIDTH_MIN,
)
from esdash.constants.screens.dashboard import (
    SCOPE_KIND_LABELS,
    SCOPE_TAB_ORDER,
    SCOPE_TAB_TITLES,
    STATUS_NEVER,
)
from esdash.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from esdash.constants.values import (
    APP_TITLE,
    ERROR_SEPARATOR,
    NO_DOCUMENT_SELECTED,
    TRUNCATION_SENTINEL,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "ERROR_SEPARATOR",
    # Defaults
    "ES_URL_DEFAULT",
    "NO_DOCUMENT_SELECTED",
    "PAGE_SIZE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    # Limits
    "REFRESH_INTERVAL_MIN",
    "RESULT_ID_WIDTH_MAX",
    "RESULT_ID_WIDTH_MIN",
    # Screen constants
    "SCOPE_KIND_LABELS",
    "SCOPE_TAB_ORDER",
    "SCOPE_TAB_TITLES",
    "STATUS_NEVER",
    "THEME_DEFAULT",
    "TRUNCATION_SENTINEL",
    # Enums
    "DocViewMode",
    "FetchSources",
    "FetchState",
    "Focus",
    "HealthStatus",
    "InputMode",
    "ScopeKind",
]
