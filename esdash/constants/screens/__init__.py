"""Screen-specific constants subpackage.

Re-exports all screen-specific constants for convenient imports.
"""

from esdash.constants.screens.dashboard import (
    SCOPE_KIND_LABELS,
    SCOPE_TAB_ORDER,
    SCOPE_TAB_TITLES,
    STATUS_NEVER,
)

__all__ = [
    "SCOPE_KIND_LABELS",
    "SCOPE_TAB_ORDER",
    "SCOPE_TAB_TITLES",
    "STATUS_NEVER",
]
