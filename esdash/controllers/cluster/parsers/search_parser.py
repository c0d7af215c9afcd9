"""Search parser for cluster controller - parses search responses."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from esdash.controllers.errors import DecodeError
from esdash.models.search import Document, SearchSummary

logger = logging.getLogger(__name__)


class SearchParser:
    """Parses a ``_search`` response into documents and a summary."""

    def parse_search(self, payload: Any) -> tuple[list[Document], SearchSummary]:
        if not isinstance(payload, dict):
            raise DecodeError("search: expected an object")
        hits = payload.get("hits")
        if not isinstance(hits, dict):
            raise DecodeError("search: missing 'hits'")
        try:
            summary = SearchSummary(
                total=self._parse_total(hits.get("total")),
                took_ms=payload.get("took"),
                shards_failed=(payload.get("_shards") or {}).get("failed"),
                timed_out=payload.get("timed_out"),
            )
            documents = [
                Document(id=str(hit["_id"]), source=hit.get("_source"))
                for hit in hits.get("hits") or []
            ]
        except (AttributeError, KeyError, TypeError, ValidationError) as exc:
            logger.exception("Invalid search payload")
            raise DecodeError(f"search: {exc}") from exc
        return documents, summary

    @staticmethod
    def _parse_total(total: Any) -> int | None:
        # Object form since 7.x; bare integer before that.
        if isinstance(total, dict):
            return total.get("value")
        if isinstance(total, int):
            return total
        return None
