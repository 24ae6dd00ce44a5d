"""Application search – Paging value object."""
from __future__ import annotations

import dataclasses
import re
from typing import Any, Final, Mapping

from search_params.application.search.operators import Dictionary

# Leading-integer parse: optional whitespace and sign, then digits; the rest
# of the string is ignored ("10abc" -> 10).
_LEADING_INT: Final = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # beyond the interpreter's int string conversion limit
        return None


@dataclasses.dataclass(frozen=True, slots=True)
class Paging:
    """Skip/take window with 1-based page-number views.

    Example::

        p = Paging.from_page(3, 10)
        assert (p.skip, p.take, p.page) == (20, 10, 3)
    """

    skip: int
    take: int

    @property
    def page(self) -> int:
        """Current page number (1-based); always 1 when ``take`` is 0."""
        if self.take == 0:
            return 1
        return self.skip // self.take + 1

    @property
    def page_size(self) -> int:
        return self.take

    @classmethod
    def from_page(cls, page: int, page_size: int) -> "Paging":
        """Build from a 1-based page number and page size."""
        return cls(skip=(page - 1) * page_size, take=page_size)

    @classmethod
    def from_skip_take(cls, skip: int, take: int) -> "Paging":
        return cls(skip=skip, take=take)

    def copy_with(self, **changes: Any) -> "Paging":
        return dataclasses.replace(self, **changes)

    def to_dictionary(self) -> Dictionary:
        return {"skip": str(self.skip), "take": str(self.take)}

    @classmethod
    def from_dictionary(cls, data: Mapping[str, str]) -> "Paging | None":
        """Parse ``skip`` and ``take``; ``None`` unless both are integers."""
        skip = _parse_int(data.get("skip"))
        take = _parse_int(data.get("take"))
        if skip is None or take is None:
            return None
        return cls(skip=skip, take=take)


__all__ = ["Paging"]
