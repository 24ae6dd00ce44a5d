"""Application search – form-urlencoded query-string codec.

Serialisation follows the WHATWG ``URLSearchParams`` rules so the output is
byte-for-byte identical to what a browser / Node client produces for the
same pairs: space becomes ``+`` and only ``A-Z a-z 0-9 * - . _`` are left
unescaped.  :func:`urllib.parse.quote_plus` keeps ``~`` as well, so it is
escaped explicitly.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import parse_qsl, quote_plus

import httpx

type Pairs = Iterable[tuple[str, str]]
type QueryParamsInput = httpx.QueryParams | Mapping[str, str] | Pairs


def _quote(text: str) -> str:
    return quote_plus(text, safe="*").replace("~", "%7E")


def encode(pairs: Pairs) -> str:
    """Encode key/value pairs as ``k=v`` joined by ``&`` (no leading ``?``)."""
    return "&".join(f"{_quote(key)}={_quote(value)}" for key, value in pairs)


def decode(query: str) -> list[tuple[str, str]]:
    """Decode a query string into ordered pairs.

    A single leading ``?`` is ignored and keys without ``=`` or with an empty
    value are kept with ``""``.
    """
    if query.startswith("?"):
        query = query[1:]
    return parse_qsl(query, keep_blank_values=True)


def to_dict(pairs: Pairs) -> dict[str, str]:
    """Fold pairs into a dict; the last value for a repeated key wins."""
    result: dict[str, str] = {}
    for key, value in pairs:
        result[key] = value
    return result


def iter_pairs(params: QueryParamsInput) -> Pairs:
    """Yield every pair of an ``httpx.QueryParams``, mapping or pair iterable."""
    if isinstance(params, httpx.QueryParams):
        return params.multi_items()
    if isinstance(params, Mapping):
        return params.items()
    return params


__all__ = ["Pairs", "QueryParamsInput", "decode", "encode", "iter_pairs", "to_dict"]
