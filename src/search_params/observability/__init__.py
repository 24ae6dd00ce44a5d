"""Observability – structured logging."""

from search_params.observability.logging import get_logger

__all__ = ["get_logger"]
