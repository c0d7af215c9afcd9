"""Search fetcher for cluster controller - runs paginated document searches."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

logger = logging.getLogger(__name__)


def build_query_body(query: str) -> dict[str, Any]:
    """Build the search request body for a committed query.

    A blank query matches every document. Anything else is a query-string
    search whose terms are combined with AND.
    """
    query = query.strip()
    if not query:
        return {"query": {"match_all": {}}}
    return {
        "query": {
            "query_string": {
                "query": query,
                "default_operator": "AND",
            }
        }
    }


class SearchFetcher:
    """Fetches one page of search hits for a scope."""

    def __init__(self, request_json_func: Any) -> None:
        """Initialize with HTTP JSON request function.

        Args:
            request_json_func: Async function ``(method, path, body=None)``
                returning the decoded JSON response
        """
        self._request_json = request_json_func

    @staticmethod
    def search_path(scope: str, from_: int, size: int) -> str:
        return f"/{quote(scope, safe=',*')}/_search?from={from_}&size={size}"

    async def search(self, scope: str, from_: int, size: int, query: str) -> Any:
        path = self.search_path(scope, from_, size)
        logger.debug("Searching %s (query=%r)", path, query)
        return await self._request_json("POST", path, build_query_body(query))
