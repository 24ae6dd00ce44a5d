"""Application search – query constraints and their flat wire format."""
from search_params.application.search.builders import (
    FilterBuilder,
    PagingBuilder,
    SearchParametersBuilder,
    SortingBuilder,
    filter_,
    paging,
    search,
    sorting,
)
from search_params.application.search.filter import Filter
from search_params.application.search.operators import Dictionary, FilterOperator, SortOrder
from search_params.application.search.paging import Paging
from search_params.application.search.parameters import SearchParameters
from search_params.application.search.sorting import Sorting

__all__ = [
    "Dictionary",
    "Filter",
    "FilterBuilder",
    "FilterOperator",
    "Paging",
    "PagingBuilder",
    "SearchParameters",
    "SearchParametersBuilder",
    "SortOrder",
    "Sorting",
    "SortingBuilder",
    "filter_",
    "paging",
    "search",
    "sorting",
]
