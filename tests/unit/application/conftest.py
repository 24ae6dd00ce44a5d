"""Shared fixtures for the search wire-protocol tests."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest


@pytest.fixture()
def int_digit_limit() -> Iterator[int]:
    """Pin the interpreter's int string conversion limit to its default."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)


@pytest.fixture(autouse=True)
def default_search_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Builders read ``SEARCH_PARAMS_*`` variables; start every test without them."""
    monkeypatch.delenv("SEARCH_PARAMS_DEFAULT_PAGE_SIZE", raising=False)
