"""Shared pytest fixtures for minicalc tests."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest


@pytest.fixture
def sample_source() -> str:
    """A short program exercising every statement form."""
    return "var x = 5\ny = x * 2 + 1\n\ny - x\n"


@pytest.fixture
def int_digit_limit() -> Iterator[int]:
    """Pin the int/str conversion limit to CPython's default of 4300 digits."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
