"""Fetchers for cluster controller."""

from esdash.controllers.cluster.fetchers.scope_fetcher import ScopeFetcher
from esdash.controllers.cluster.fetchers.search_fetcher import (
    SearchFetcher,
    build_query_body,
)

__all__ = ["ScopeFetcher", "SearchFetcher", "build_query_body"]
