"""Domain errors — malformed search constraints."""

from __future__ import annotations

from typing import Any

from search_params.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a search constraint cannot be represented."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnknownWireCodeError(ValidationError):
    """A wire code is not part of the known operator / order vocabulary.

    Only raised when decoding in strict mode; lenient decoding passes the
    code through unchanged.
    """

    default_code = "unknown_wire_code"

    def __init__(self, kind: str, wire_code: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown {kind} wire code: {wire_code!r}",
            errors=[{"field": kind, "value": wire_code}],
            detail={"kind": kind, "wire_code": wire_code},
            **kwargs,
        )
        self.kind = kind
        self.wire_code = wire_code


__all__ = ["DomainError", "UnknownWireCodeError", "ValidationError"]
