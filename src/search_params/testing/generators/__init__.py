"""Testing generators – property-based strategies."""
from search_params.testing.generators.strategies import (
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
