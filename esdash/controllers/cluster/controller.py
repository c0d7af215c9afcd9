"""Search cluster controller.

Talks to the cluster's REST API over HTTP and delegates raw response
handling to fetchers and parsers. Every request is blocking ``urllib``
I/O run through ``asyncio.to_thread`` with a per-request timeout.
"""

from __future__ import annotations

import asyncio
import base64
import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import unquote, urlsplit, urlunsplit

from esdash.constants.enums import ScopeKind
from esdash.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from esdash.controllers.cluster.fetchers import ScopeFetcher, SearchFetcher
from esdash.controllers.cluster.parsers import ScopeParser, SearchParser
from esdash.controllers.errors import (
    DecodeError,
    ProtocolError,
    TransportError,
)
from esdash.models.scope import ClusterHealth, ScopeEntry
from esdash.models.search import Document, SearchSummary

logger = logging.getLogger(__name__)


def split_credentials(es_url: str) -> tuple[str, str | None]:
    """Strip ``user:pass@`` from a URL.

    Returns:
        The base URL without credentials or trailing ``/``, and the value
        of a Basic ``Authorization`` header when credentials were present.
    """
    parts = urlsplit(es_url.strip())
    authorization = None
    netloc = parts.netloc
    if parts.username is not None:
        user = unquote(parts.username)
        password = unquote(parts.password or "")
        token = base64.b64encode(f"{user}:{password}".encode()).decode("ascii")
        authorization = f"Basic {token}"
        netloc = netloc.rsplit("@", 1)[1]
    base = urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
    return base.rstrip("/"), authorization


class SearchClusterController:
    """Read-only client for a search cluster's REST API."""

    def __init__(self, es_url: str, timeout: float = CLUSTER_REQUEST_TIMEOUT) -> None:
        """Initialize the controller.

        Args:
            es_url: Cluster base URL, optionally with embedded credentials.
            timeout: Per-request timeout in seconds.
        """
        self.es_url = es_url
        self.timeout = timeout
        self._base_url, self._authorization = split_credentials(es_url)

        # Initialize fetchers
        self._scope_fetcher = ScopeFetcher(self._request_json)
        self._search_fetcher = SearchFetcher(self._request_json)

        # Initialize parsers
        self._scope_parser = ScopeParser()
        self._search_parser = SearchParser()

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request_json_sync(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one HTTP request and decode the JSON body (thread target)."""
        url = f"{self._base_url}{path}"
        headers = {"Accept": "application/json"}
        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        if self._authorization:
            headers["Authorization"] = self._authorization
        request = urllib.request.Request(url, data=data, headers=headers, method=method)
        logger.debug("%s %s", method, url)

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                status = getattr(response, "status", 200)
                raw = response.read()
        except urllib.error.HTTPError as exc:
            raise ProtocolError(exc.code, str(exc.reason or "")) from exc
        except urllib.error.URLError as exc:
            raise TransportError(f"request failed: {exc.reason}") from exc
        except (TimeoutError, OSError) as exc:
            raise TransportError(f"request failed: {exc}") from exc
        except http.client.HTTPException as exc:
            raise TransportError(f"request failed: {type(exc).__name__}: {exc}") from exc

        if not 200 <= status < 300:
            raise ProtocolError(status)
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.exception("Invalid JSON from %s", url)
            raise DecodeError(f"invalid response json: {exc}") from exc

    async def _request_json(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> Any:
        return await asyncio.to_thread(self._request_json_sync, method, path, body)

    # ------------------------------------------------------------------
    # Cluster client operations
    # ------------------------------------------------------------------

    async def get_health(self) -> ClusterHealth:
        payload = await self._scope_fetcher.fetch_health()
        return self._scope_parser.parse_health(payload)

    async def list_scope(self, kind: ScopeKind) -> list[ScopeEntry]:
        payload = await self._scope_fetcher.fetch_scope(kind)
        return self._scope_parser.parse_scope(kind, payload)

    async def search(
        self, scope: str, from_: int, size: int, query: str
    ) -> tuple[list[Document], SearchSummary]:
        payload = await self._search_fetcher.search(scope, from_, size, query)
        return self._search_parser.parse_search(payload)
