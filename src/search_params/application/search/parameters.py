"""Application search – SearchParameters and the flat wire protocol.

Wire layout::

    filters[0][fields]=Name&filters[0][op]=contains&filters[0][val]=Franco
    &sortings[0][prop]=Name&sortings[0][ord]=asc
    &skip=10&take=10

Filters and sortings are re-keyed with their position; paging keys are
written unprefixed.
"""
from __future__ import annotations

import dataclasses
import re
from typing import Any, Final, Mapping

import httpx

from search_params.application.search import query_string
from search_params.application.search.filter import Filter
from search_params.application.search.operators import Dictionary
from search_params.application.search.paging import Paging
from search_params.application.search.query_string import QueryParamsInput
from search_params.application.search.sorting import Sorting
from search_params.observability.logging import get_logger

_log = get_logger(__name__)

_FILTER_KEY: Final = re.compile(r"filters\[([0-9]+)\]\[(.+)\]")
_SORTING_KEY: Final = re.compile(r"sortings\[([0-9]+)\]\[(.+)\]")
_PAGING_KEYS: Final = frozenset({"skip", "take"})


def _prefixed(prefix: str, index: int, data: Dictionary) -> Dictionary:
    return {f"{prefix}[{index}][{key}]": value for key, value in data.items()}


def _collect(groups: dict[str, Dictionary], match: re.Match[str], value: str) -> None:
    # Indices are kept as digit strings without leading zeros; ordering by
    # (length, text) is then numeric order for indices of any length.
    index = match.group(1).lstrip("0") or "0"
    groups.setdefault(index, {})[match.group(2)] = value


def _in_index_order(groups: dict[str, Dictionary]) -> list[Dictionary]:
    return [groups[i] for i in sorted(groups, key=lambda i: (len(i), i))]


@dataclasses.dataclass(frozen=True, slots=True)
class SearchParameters:
    """Filters, sortings and an optional paging window for one search request.

    Sequences are stored as tuples.  Duplicate sortings are kept in memory
    and only collapsed (first property occurrence wins) when serialising.
    """

    filters: tuple[Filter, ...] = ()
    sortings: tuple[Sorting, ...] = ()
    paging: Paging | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))
        object.__setattr__(self, "sortings", tuple(self.sortings))

    def copy_with(self, **changes: Any) -> "SearchParameters":
        return dataclasses.replace(self, **changes)

    def unique_sortings(self) -> tuple[Sorting, ...]:
        """Sortings with later duplicates of a property dropped."""
        seen: set[str] = set()
        unique: list[Sorting] = []
        for sorting in self.sortings:
            if sorting.property in seen:
                continue
            seen.add(sorting.property)
            unique.append(sorting)
        return tuple(unique)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dictionary(self) -> Dictionary:
        """Flatten into the indexed string-to-string wire mapping."""
        data: Dictionary = {}
        for index, f in enumerate(self.filters):
            data.update(_prefixed("filters", index, f.to_dictionary()))
        for index, s in enumerate(self.unique_sortings()):
            data.update(_prefixed("sortings", index, s.to_dictionary()))
        if self.paging is not None:
            data.update(self.paging.to_dictionary())
        return data

    def to_query_params(self) -> httpx.QueryParams:
        return httpx.QueryParams(self.to_dictionary())

    def to_query_string(self) -> str:
        """Form-urlencoded query string without the leading ``?``."""
        return query_string.encode(self.to_dictionary().items())

    # ------------------------------------------------------------------
    # Deserialisation
    # ------------------------------------------------------------------

    @classmethod
    def from_dictionary(
        cls, data: Mapping[str, str], *, strict: bool = False
    ) -> "SearchParameters":
        """Rebuild from a flat wire mapping.

        Keys that match neither ``filters[N][prop]``, ``sortings[N][prop]``,
        ``skip`` nor ``take`` are ignored.  Indices only define relative
        order, so gaps are fine.  Paging that fails to parse is dropped.

        With ``strict=True`` unknown operator / order codes raise
        :class:`~search_params.kernel.errors.UnknownWireCodeError`.
        """
        filter_groups: dict[str, Dictionary] = {}
        sorting_groups: dict[str, Dictionary] = {}
        paging_data: Dictionary = {}

        for key, value in data.items():
            if match := _FILTER_KEY.fullmatch(key):
                _collect(filter_groups, match, value)
            elif match := _SORTING_KEY.fullmatch(key):
                _collect(sorting_groups, match, value)
            elif key in _PAGING_KEYS:
                paging_data[key] = value
            else:
                _log.debug("search.key_ignored", key=key)

        filters = tuple(
            Filter.from_dictionary(group, strict=strict) for group in _in_index_order(filter_groups)
        )
        sortings = tuple(
            Sorting.from_dictionary(group, strict=strict) for group in _in_index_order(sorting_groups)
        )
        paging: Paging | None = None
        if paging_data:
            paging = Paging.from_dictionary(paging_data)
            if paging is None:
                _log.debug("search.paging_discarded", **paging_data)

        return cls(filters, sortings, paging)

    @classmethod
    def from_query_string(cls, query: str, *, strict: bool = False) -> "SearchParameters":
        """Parse a query string (a leading ``?`` is allowed)."""
        return cls.from_dictionary(query_string.to_dict(query_string.decode(query)), strict=strict)

    @classmethod
    def from_query_params(
        cls, params: QueryParamsInput, *, strict: bool = False
    ) -> "SearchParameters":
        """Parse ``httpx.QueryParams``, a mapping or an iterable of pairs."""
        return cls.from_dictionary(query_string.to_dict(query_string.iter_pairs(params)), strict=strict)


__all__ = ["SearchParameters"]
