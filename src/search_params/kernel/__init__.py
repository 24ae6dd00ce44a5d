"""Kernel – framework-agnostic building blocks."""

from search_params.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    UnknownWireCodeError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "UnknownWireCodeError",
    "ValidationError",
]
