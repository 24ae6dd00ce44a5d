"""Application – search request building blocks (framework-agnostic)."""

from search_params.application.search import (
    Filter,
    FilterOperator,
    Paging,
    SearchParameters,
    SortOrder,
    Sorting,
)

__all__ = [
    "Filter",
    "FilterOperator",
    "Paging",
    "SearchParameters",
    "SortOrder",
    "Sorting",
]
