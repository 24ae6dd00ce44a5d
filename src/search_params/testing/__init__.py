"""Testing support – Hypothesis strategies for search values."""

from search_params.testing.generators import (
    filter_strategy,
    paging_strategy,
    search_parameters_strategy,
    sorting_strategy,
)

__all__ = [
    "filter_strategy",
    "paging_strategy",
    "search_parameters_strategy",
    "sorting_strategy",
]
