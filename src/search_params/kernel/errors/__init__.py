"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── UnknownWireCodeError
    └── ApplicationError     (application.py)
        └── ConfigError      (search_params.config.validation)
"""

from search_params.kernel.errors.application import ApplicationError
from search_params.kernel.errors.base import BaseError
from search_params.kernel.errors.domain import (
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
