"""Scope fetcher for cluster controller - fetches health and scope listings."""

from __future__ import annotations

import logging
from typing import Any

from esdash.constants.enums import ScopeKind

logger = logging.getLogger(__name__)


class ScopeFetcher:
    """Fetches cluster health and the three scope listings."""

    _HEALTH_PATH = "/_cluster/health"
    _SCOPE_PATHS = {
        ScopeKind.INDICES: "/_cat/indices?format=json",
        ScopeKind.ALIASES: "/_cat/aliases?format=json",
        ScopeKind.DATA_STREAMS: "/_data_stream",
    }

    def __init__(self, request_json_func: Any) -> None:
        """Initialize with HTTP JSON request function.

        Args:
            request_json_func: Async function ``(method, path, body=None)``
                returning the decoded JSON response
        """
        self._request_json = request_json_func

    async def fetch_health(self) -> Any:
        return await self._request_json("GET", self._HEALTH_PATH)

    async def fetch_scope(self, kind: ScopeKind) -> Any:
        path = self._SCOPE_PATHS[kind]
        logger.debug("Fetching %s from %s", kind.value, path)
        return await self._request_json("GET", path)
