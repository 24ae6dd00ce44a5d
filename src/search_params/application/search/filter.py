"""Application search – Filter value object."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping

from search_params.application.search.operators import (
    Dictionary,
    FilterOperator,
    is_unary,
    parse_operator,
    wire_code,
)


@dataclasses.dataclass(frozen=True, slots=True)
class Filter:
    """A condition over one or more fields (matched with OR).

    ``fields`` accepts a single name or any iterable of names and is always
    stored as a tuple.  Unary operators (``NULL`` / ``NOT_NULL``) carry no
    value: whatever is passed is dropped.

    Example::

        Filter(["Name", "Description"], FilterOperator.CONTAINS, "search")
    """

    fields: tuple[str, ...]
    operator: FilterOperator | str
    value: str | None = None
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        fields: str | Iterable[str] = self.fields
        object.__setattr__(
            self, "fields", (fields,) if isinstance(fields, str) else tuple(fields)
        )
        if is_unary(self.operator):
            object.__setattr__(self, "value", None)

    def copy_with(self, **changes: Any) -> "Filter":
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dictionary(self) -> Dictionary:
        """Serialise to the ``fields`` / ``op`` / ``val`` / ``case`` mapping.

        ``val`` is omitted when there is no value and ``case`` is only written
        (as ``"true"``) for case-sensitive filters.
        """
        data: Dictionary = {
            "fields": ",".join(self.fields),
            "op": wire_code(self.operator),
        }
        if self.value is not None:
            data["val"] = self.value
        if self.case_sensitive:
            data["case"] = "true"
        return data

    @classmethod
    def from_dictionary(cls, data: Mapping[str, str], *, strict: bool = False) -> "Filter":
        """Inverse of :meth:`to_dictionary`.

        Missing keys fall back to defaults: no fields, ``EQUALS``, no value,
        case-insensitive.  Only the exact string ``"true"`` enables ``case``.
        """
        raw_fields = data.get("fields")
        raw_op = data.get("op")
        return cls(
            tuple(raw_fields.split(",")) if raw_fields is not None else (),
            FilterOperator.EQUALS if raw_op is None else parse_operator(raw_op, strict=strict),
            data.get("val"),
            data.get("case") == "true",
        )


__all__ = ["Filter"]
