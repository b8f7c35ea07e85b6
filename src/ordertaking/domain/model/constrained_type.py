"""Reusable smart constructors for constrained types.

Each helper takes the name of the field being validated (used in the
error message), the constructor of the wrapping type and the raw
value.  It returns ``Success`` with the wrapped value, or ``Failure``
with a human-readable message.  Nothing here raises.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal
from typing import TypeVar

from returns.result import Failure, Result, Success

T = TypeVar("T")


def create_string(
    field_name: str, ctor: Callable[[str], T], max_len: int, value: str | None
) -> Result[T, str]:
    """Non-empty string of at most *max_len* characters."""
    if value is None:
        return Failure(f"{field_name} must not be null")
    if value == "":
        return Failure(f"{field_name} must not be empty")
    if len(value) > max_len:
        return Failure(f"{field_name} must not be more than {max_len} chars")
    return Success(ctor(value))


def create_string_option(
    field_name: str, ctor: Callable[[str], T], max_len: int, value: str | None
) -> Result[T | None, str]:
    """Like ``create_string`` but a missing or empty value is ``None``.

    Only a value that is too long fails.
    """
    if not value:
        return Success(None)
    if len(value) > max_len:
        return Failure(f"{field_name} must not be more than {max_len} chars")
    return Success(ctor(value))


def create_int(
    field_name: str, ctor: Callable[[int], T], min_value: int, max_value: int, value: int
) -> Result[T, str]:
    if value < min_value:
        return Failure(f"{field_name}: Must not be less than {min_value}")
    if value > max_value:
        return Failure(f"{field_name}: Must not be greater than {max_value}")
    return Success(ctor(value))


def create_decimal(
    field_name: str,
    ctor: Callable[[Decimal], T],
    min_value: Decimal,
    max_value: Decimal,
    value: Decimal,
) -> Result[T, str]:
    if value < min_value:
        return Failure(f"{field_name}: Must not be less than {min_value}")
    if value > max_value:
        return Failure(f"{field_name}: Must not be greater than {max_value}")
    return Success(ctor(value))


def create_like(
    field_name: str, ctor: Callable[[str], T], pattern: re.Pattern[str], value: str | None
) -> Result[T, str]:
    """String that matches *pattern* in full."""
    if value is None:
        return Failure(f"{field_name}: Must not be null")
    if value == "":
        return Failure(f"{field_name}: Must not be empty")
    if pattern.fullmatch(value) is None:
        return Failure(
            f"{field_name}: '{value}' must match the pattern '{pattern.pattern}'"
        )
    return Success(ctor(value))
