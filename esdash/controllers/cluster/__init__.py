"""Init file for cluster module."""

from esdash.controllers.cluster.controller import SearchClusterController
from esdash.controllers.cluster.fetchers import ScopeFetcher, SearchFetcher
from esdash.controllers.cluster.parsers import ScopeParser, SearchParser

__all__ = [
    "ScopeFetcher",
    "ScopeParser",
    "SearchClusterController",
    "SearchFetcher",
    "SearchParser",
]
