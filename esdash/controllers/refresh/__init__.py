"""Refresh orchestration."""

from esdash.controllers.refresh.orchestrator import (
    DocumentRequest,
    FetchStatus,
    RefreshOrchestrator,
)

__all__ = ["DocumentRequest", "FetchStatus", "RefreshOrchestrator"]
