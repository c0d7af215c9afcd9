"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Connection defaults
# ============================================================================

ES_URL_DEFAULT: Final = "http://localhost:9200"
ES_URL_ENV_VAR: Final = "ES_URL"
CONFIG_PATH_ENV_VAR: Final = "ESDASH_CONFIG"
CONFIG_PATH_DEFAULT: Final = "~/.config/esdash/settings.yaml"

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
REFRESH_INTERVAL_DEFAULT: Final = 10
PAGE_SIZE_DEFAULT: Final = 5

__all__ = [
    "CONFIG_PATH_DEFAULT",
    "CONFIG_PATH_ENV_VAR",
    "ES_URL_DEFAULT",
    "ES_URL_ENV_VAR",
    "PAGE_SIZE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "THEME_DEFAULT",
]
