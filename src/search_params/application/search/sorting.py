"""Application search – Sorting value object."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from search_params.application.search.operators import (
    Dictionary,
    SortOrder,
    parse_order,
    wire_code,
)


@dataclasses.dataclass(frozen=True, slots=True)
class Sorting:
    """Single sort criterion."""

    property: str
    order: SortOrder | str = SortOrder.ASCENDING

    @classmethod
    def asc(cls, prop: str) -> "Sorting":
        return cls(prop, SortOrder.ASCENDING)

    @classmethod
    def desc(cls, prop: str) -> "Sorting":
        return cls(prop, SortOrder.DESCENDING)

    def copy_with(self, **changes: Any) -> "Sorting":
        return dataclasses.replace(self, **changes)

    def to_dictionary(self) -> Dictionary:
        return {"prop": self.property, "ord": wire_code(self.order)}

    @classmethod
    def from_dictionary(cls, data: Mapping[str, str], *, strict: bool = False) -> "Sorting":
        """Missing ``prop`` becomes ``""``; missing ``ord`` means ascending."""
        raw_order = data.get("ord")
        return cls(
            data.get("prop", ""),
            SortOrder.ASCENDING if raw_order is None else parse_order(raw_order, strict=strict),
        )


__all__ = ["Sorting"]
