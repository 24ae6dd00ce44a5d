"""Application search – operator and sort-order vocabularies.

Both enums are ``str`` subclasses whose values are the wire codes, so a
member compares equal to its code (``FilterOperator.EQUALS == "eq"``).

Decoding is lenient by default: a code outside the vocabulary is passed
through as a plain ``str`` so it can be re-serialised verbatim.  With
``strict=True`` it raises :class:`UnknownWireCodeError` instead.
"""
from __future__ import annotations

from enum import Enum

from search_params.kernel.errors import UnknownWireCodeError
from search_params.observability.logging import get_logger

_log = get_logger(__name__)

type Dictionary = dict[str, str]


class FilterOperator(str, Enum):
    EQUALS = "eq"
    NOT_EQUALS = "neq"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    GREATER_THAN_OR_EQUALS = "gte"
    LESS_THAN_OR_EQUALS = "lte"
    CONTAINS = "contains"
    NOT_CONTAINS = "ncontains"
    NULL = "null"
    NOT_NULL = "notnull"


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def wire_code(value: FilterOperator | SortOrder | str) -> str:
    """Return the wire code for an enum member or a passed-through string."""
    if isinstance(value, Enum):
        return value.value
    return value


def is_unary(operator: FilterOperator | str) -> bool:
    return operator in (FilterOperator.NULL, FilterOperator.NOT_NULL)


def parse_operator(code: str, *, strict: bool = False) -> FilterOperator | str:
    try:
        return FilterOperator(code)
    except ValueError:
        if strict:
            raise UnknownWireCodeError("operator", code) from None
        _log.debug("search.wire_code_passed_through", kind="operator", wire_code=code)
        return code


def parse_order(code: str, *, strict: bool = False) -> SortOrder | str:
    try:
        return SortOrder(code)
    except ValueError:
        if strict:
            raise UnknownWireCodeError("order", code) from None
        _log.debug("search.wire_code_passed_through", kind="order", wire_code=code)
        return code


__all__ = [
    "Dictionary",
    "FilterOperator",
    "SortOrder",
    "is_unary",
    "parse_operator",
    "parse_order",
    "wire_code",
]
