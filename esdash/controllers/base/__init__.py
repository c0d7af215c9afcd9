"""Base controller classes."""

from esdash.controllers.base.base_controller import ClusterClient

__all__ = ["ClusterClient"]
