"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Layout limits
# ============================================================================

RESULT_ID_WIDTH_MIN: Final = 12
RESULT_ID_WIDTH_MAX: Final = 28
DRAWER_WIDTH_MIN: Final = 30
DRAWER_WIDTH_PERCENT: Final = 55
DRAWER_HEIGHT_MIN: Final = 5
FILTER_CHIP_MAX_LENGTH: Final = 40
SAVED_VIEW_SUMMARY_MAX_LENGTH: Final = 60

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1
PAGE_SIZE_MIN: Final = 1
PAGE_SIZE_MAX: Final = 500

__all__ = [
    "DRAWER_HEIGHT_MIN",
    "DRAWER_WIDTH_MIN",
    "DRAWER_WIDTH_PERCENT",
    "FILTER_CHIP_MAX_LENGTH",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_MIN",
    "REFRESH_INTERVAL_MIN",
    "RESULT_ID_WIDTH_MAX",
    "RESULT_ID_WIDTH_MIN",
    "SAVED_VIEW_SUMMARY_MAX_LENGTH",
]
