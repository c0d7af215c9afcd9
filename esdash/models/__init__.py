"""Data models for ESDash."""

from esdash.models.scope import (
    AliasEntry,
    ClusterHealth,
    DataStreamEntry,
    IndexEntry,
    ScopeEntry,
)
from esdash.models.search import Document, SavedView, SearchSummary

__all__ = [
    "AliasEntry",
    "ClusterHealth",
    "DataStreamEntry",
    "Document",
    "IndexEntry",
    "SavedView",
    "ScopeEntry",
    "SearchSummary",
]
