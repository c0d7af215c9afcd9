"""Parsers for cluster controller."""

from esdash.controllers.cluster.parsers.scope_parser import ScopeParser
from esdash.controllers.cluster.parsers.search_parser import SearchParser

__all__ = ["ScopeParser", "SearchParser"]
