"""Scope parser for cluster controller - parses health and scope listings."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from esdash.constants.enums import ScopeKind
from esdash.controllers.errors import DecodeError
from esdash.models.scope import (
    AliasEntry,
    ClusterHealth,
    DataStreamEntry,
    IndexEntry,
    ScopeEntry,
)

logger = logging.getLogger(__name__)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


class ScopeParser:
    """Parses raw scope payloads into scope entry models."""

    def parse_health(self, payload: Any) -> ClusterHealth:
        if not isinstance(payload, dict):
            raise DecodeError("cluster health: expected an object")
        try:
            return ClusterHealth.model_validate(payload)
        except ValidationError as exc:
            logger.exception("Invalid cluster health payload")
            raise DecodeError(f"cluster health: {exc}") from exc

    def parse_scope(self, kind: ScopeKind, payload: Any) -> list[ScopeEntry]:
        if kind == ScopeKind.INDICES:
            return list(self.parse_indices(payload))
        if kind == ScopeKind.ALIASES:
            return list(self.parse_aliases(payload))
        return list(self.parse_data_streams(payload))

    def parse_indices(self, payload: Any) -> list[IndexEntry]:
        """Parse ``_cat/indices?format=json`` rows.

        Counts stay strings because the cat API reports them as text and
        may omit them for closed indices.
        """
        rows = self._require_rows(payload, "indices")
        try:
            return [
                IndexEntry(
                    name=row["index"],
                    health=_optional_str(row.get("health")),
                    docs_count=_optional_str(row.get("docs.count")),
                )
                for row in rows
            ]
        except (KeyError, TypeError, ValidationError) as exc:
            logger.exception("Invalid indices payload")
            raise DecodeError(f"indices: {exc}") from exc

    def parse_aliases(self, payload: Any) -> list[AliasEntry]:
        rows = self._require_rows(payload, "aliases")
        try:
            return [
                AliasEntry(alias=row["alias"], target_index=row["index"])
                for row in rows
            ]
        except (KeyError, TypeError, ValidationError) as exc:
            logger.exception("Invalid aliases payload")
            raise DecodeError(f"aliases: {exc}") from exc

    def parse_data_streams(self, payload: Any) -> list[DataStreamEntry]:
        if not isinstance(payload, dict):
            raise DecodeError("datastreams: expected an object")
        streams = payload.get("data_streams") or []
        if not isinstance(streams, list):
            raise DecodeError("datastreams: 'data_streams' is not a list")
        try:
            return [
                DataStreamEntry(
                    name=stream["name"],
                    status=_optional_str(stream.get("status")),
                    generation=stream.get("generation"),
                    backing_index_count=len(stream.get("indices") or []),
                )
                for stream in streams
            ]
        except (KeyError, TypeError, ValidationError) as exc:
            logger.exception("Invalid data streams payload")
            raise DecodeError(f"datastreams: {exc}") from exc

    @staticmethod
    def _require_rows(payload: Any, source: str) -> list[dict[str, Any]]:
        if not isinstance(payload, list):
            raise DecodeError(f"{source}: expected a list")
        return payload
