"""Controllers module for ESDash TUI.

This module provides the cluster client, its error taxonomy, and the
refresh orchestrator that folds fetch results into application state.
"""

from __future__ import annotations

# Base classes
from esdash.controllers.base import ClusterClient

# Cluster domain
from esdash.controllers.cluster.controller import SearchClusterController

# Errors
from esdash.controllers.errors import (
    ClusterClientError,
    DecodeError,
    ProtocolError,
    TransportError,
)

# Refresh
from esdash.controllers.refresh import (
    DocumentRequest,
    FetchStatus,
    RefreshOrchestrator,
)

__all__ = [
    # Base
    "ClusterClient",
    # Errors
    "ClusterClientError",
    "DecodeError",
    # Refresh
    "DocumentRequest",
    "FetchStatus",
    "ProtocolError",
    "RefreshOrchestrator",
    # Domain Controllers
    "SearchClusterController",
    "TransportError",
]
