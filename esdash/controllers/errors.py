"""Cluster client error taxonomy.

Every failure of a cluster call surfaces as a ``ClusterClientError``
subclass so the refresh layer can treat them uniformly.
"""

from __future__ import annotations


class ClusterClientError(Exception):
    """Base exception for cluster request failures."""


class TransportError(ClusterClientError):
    """Connection refused, DNS failure, or timeout."""


class ProtocolError(ClusterClientError):
    """The cluster answered with a non-2xx HTTP status."""

    def __init__(self, status: int, message: str = "") -> None:
        self.status = status
        super().__init__(f"HTTP {status}" + (f": {message}" if message else ""))


class DecodeError(ClusterClientError):
    """The response body did not have the expected shape."""


__all__ = ["ClusterClientError", "DecodeError", "ProtocolError", "TransportError"]
