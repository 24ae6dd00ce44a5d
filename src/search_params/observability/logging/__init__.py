"""Observability – structured logging helpers."""
from search_params.observability.logging.logger import get_logger

__all__ = ["get_logger"]
