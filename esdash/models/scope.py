"""Cluster scope models: indices, aliases, data streams, and health."""

from typing import Union

from pydantic import BaseModel, ConfigDict

from esdash.constants.enums import HealthStatus


class IndexEntry(BaseModel):
    """One row of ``_cat/indices``."""

    name: str
    health: str | None = None
    docs_count: str | None = None

    @property
    def identity_key(self) -> str:
        return self.name


class AliasEntry(BaseModel):
    """One alias-to-index binding from ``_cat/aliases``."""

    alias: str
    target_index: str

    @property
    def identity_key(self) -> str:
        return self.alias


class DataStreamEntry(BaseModel):
    """One data stream from ``_data_stream``."""

    name: str
    status: str | None = None
    generation: int | None = None
    backing_index_count: int = 0

    @property
    def identity_key(self) -> str:
        return self.name


# Filtering, selection, and search targets all use ``identity_key``.
ScopeEntry = Union[IndexEntry, AliasEntry, DataStreamEntry]


class ClusterHealth(BaseModel):
    """Subset of ``_cluster/health``; unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    cluster_name: str | None = None
    status: str | None = None

    @property
    def health_status(self) -> HealthStatus:
        try:
            return HealthStatus((self.status or "").lower())
        except ValueError:
            return HealthStatus.UNKNOWN
