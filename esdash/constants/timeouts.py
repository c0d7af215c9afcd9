"""Timeout constants for the TUI.

All timeout and interval values for cluster requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# Cluster request timeouts (float, in seconds)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = 3.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
]
