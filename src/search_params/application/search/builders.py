"""Application search – fluent builders.

Builders are mutable accumulators; every setter returns the builder and
``build()`` produces the immutable value.  ``SearchParametersBuilder``
accepts each part as one of three variants:

* a finished value (``Filter``),
* a builder (``FilterBuilder``),
* a callable that configures a fresh builder and returns it.

Usage::

    params = (
        search()
        .filter(lambda f: f.field("Name").contains("Franco"))
        .sort_by(Sorting.desc("CreatedAt"))
        .page(2, 10)
        .build()
    )
"""
from __future__ import annotations

from typing import Callable

import httpx

from search_params.application.search.filter import Filter
from search_params.application.search.operators import Dictionary, FilterOperator, SortOrder
from search_params.application.search.paging import Paging
from search_params.application.search.parameters import SearchParameters
from search_params.application.search.sorting import Sorting
from search_params.config.settings import SearchSettings

type FilterInput = Filter | FilterBuilder | Callable[[FilterBuilder], FilterBuilder]
type SortingInput = Sorting | SortingBuilder | Callable[[SortingBuilder], SortingBuilder]
type PagingInput = Paging | PagingBuilder | Callable[[PagingBuilder], PagingBuilder]


class FilterBuilder:
    def __init__(self) -> None:
        self._fields: tuple[str, ...] = ()
        self._operator: FilterOperator | str = FilterOperator.EQUALS
        self._value: str | None = None
        self._case_sensitive = False

    def field(self, name: str) -> "FilterBuilder":
        self._fields = (name,)
        return self

    def fields(self, *names: str) -> "FilterBuilder":
        """Match any of *names* (OR)."""
        self._fields = names
        return self

    def op(self, operator: FilterOperator | str) -> "FilterBuilder":
        self._operator = operator
        return self

    def value(self, value: str | None) -> "FilterBuilder":
        self._value = value
        return self

    def case_sensitive(self, enabled: bool = True) -> "FilterBuilder":
        self._case_sensitive = enabled
        return self

    def equals(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.EQUALS).value(value)

    def not_equals(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.NOT_EQUALS).value(value)

    def greater_than(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.GREATER_THAN).value(value)

    def less_than(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.LESS_THAN).value(value)

    def greater_than_or_equals(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.GREATER_THAN_OR_EQUALS).value(value)

    def less_than_or_equals(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.LESS_THAN_OR_EQUALS).value(value)

    def contains(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.CONTAINS).value(value)

    def not_contains(self, value: str) -> "FilterBuilder":
        return self.op(FilterOperator.NOT_CONTAINS).value(value)

    def is_null(self) -> "FilterBuilder":
        return self.op(FilterOperator.NULL)

    def is_not_null(self) -> "FilterBuilder":
        return self.op(FilterOperator.NOT_NULL)

    def build(self) -> Filter:
        return Filter(self._fields, self._operator, self._value, self._case_sensitive)


class SortingBuilder:
    def __init__(self) -> None:
        self._property = ""
        self._order: SortOrder | str = SortOrder.ASCENDING

    def by(self, prop: str) -> "SortingBuilder":
        self._property = prop
        return self

    def asc(self) -> "SortingBuilder":
        self._order = SortOrder.ASCENDING
        return self

    def desc(self) -> "SortingBuilder":
        self._order = SortOrder.DESCENDING
        return self

    def build(self) -> Sorting:
        return Sorting(self._property, self._order)


class PagingBuilder:
    """Starts at skip 0 with ``SearchSettings.default_page_size`` as take.

    Without explicit *settings* they are read from the environment.
    """

    def __init__(self, settings: SearchSettings | None = None) -> None:
        self._skip = 0
        self._take = (settings or SearchSettings.from_env()).default_page_size

    def skip(self, count: int) -> "PagingBuilder":
        self._skip = count
        return self

    def take(self, count: int) -> "PagingBuilder":
        self._take = count
        return self

    def page(self, number: int, size: int) -> "PagingBuilder":
        """1-based page *number* of *size* items."""
        self._skip = (number - 1) * size
        self._take = size
        return self

    def build(self) -> Paging:
        return Paging(self._skip, self._take)


class SearchParametersBuilder:
    def __init__(self, settings: SearchSettings | None = None) -> None:
        self._settings = settings or SearchSettings.from_env()
        self._filters: list[Filter] = []
        self._sortings: list[Sorting] = []
        self._paging: Paging | None = None

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def filter(self, item: FilterInput) -> "SearchParametersBuilder":
        match item:
            case Filter():
                self._filters.append(item)
            case FilterBuilder():
                self._filters.append(item.build())
            case _ if callable(item):
                self._filters.append(item(FilterBuilder()).build())
            case _:
                raise TypeError(
                    f"Expected Filter, FilterBuilder or callable, got {type(item).__name__}"
                )
        return self

    def filters(self, *items: FilterInput) -> "SearchParametersBuilder":
        for item in items:
            self.filter(item)
        return self

    # ------------------------------------------------------------------
    # Sortings
    # ------------------------------------------------------------------

    def sort_by(self, item: SortingInput) -> "SearchParametersBuilder":
        match item:
            case Sorting():
                self._sortings.append(item)
            case SortingBuilder():
                self._sortings.append(item.build())
            case _ if callable(item):
                self._sortings.append(item(SortingBuilder()).build())
            case _:
                raise TypeError(
                    f"Expected Sorting, SortingBuilder or callable, got {type(item).__name__}"
                )
        return self

    def sortings(self, *items: SortingInput) -> "SearchParametersBuilder":
        for item in items:
            self.sort_by(item)
        return self

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------

    def paginate(self, item: PagingInput) -> "SearchParametersBuilder":
        match item:
            case Paging():
                self._paging = item
            case PagingBuilder():
                self._paging = item.build()
            case _ if callable(item):
                self._paging = item(PagingBuilder(self._settings)).build()
            case _:
                raise TypeError(
                    f"Expected Paging, PagingBuilder or callable, got {type(item).__name__}"
                )
        return self

    def page(self, number: int, size: int) -> "SearchParametersBuilder":
        self._paging = Paging.from_page(number, size)
        return self

    def skip_take(self, skip: int, take: int) -> "SearchParametersBuilder":
        self._paging = Paging.from_skip_take(skip, take)
        return self

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def build(self) -> SearchParameters:
        return SearchParameters(tuple(self._filters), tuple(self._sortings), self._paging)

    def to_dictionary(self) -> Dictionary:
        return self.build().to_dictionary()

    def to_query_params(self) -> httpx.QueryParams:
        return self.build().to_query_params()

    def to_query_string(self) -> str:
        return self.build().to_query_string()


def filter_() -> FilterBuilder:
    """Start a :class:`FilterBuilder` (trailing underscore avoids the builtin)."""
    return FilterBuilder()


def sorting() -> SortingBuilder:
    return SortingBuilder()


def paging(settings: SearchSettings | None = None) -> PagingBuilder:
    return PagingBuilder(settings)


def search(settings: SearchSettings | None = None) -> SearchParametersBuilder:
    return SearchParametersBuilder(settings)


__all__ = [
    "FilterBuilder",
    "FilterInput",
    "PagingBuilder",
    "PagingInput",
    "SearchParametersBuilder",
    "SortingBuilder",
    "SortingInput",
    "filter_",
    "paging",
    "search",
    "sorting",
]
