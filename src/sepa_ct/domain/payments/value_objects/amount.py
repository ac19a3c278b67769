"""Amount codec between minor units (cents) and two-decimal strings.

All arithmetic on amounts happens on integer minor units; the decimal form
only exists in the rendered document.
"""

from __future__ import annotations

from typing import Iterable

# InstdAmt and CtrlSum allow 18 total digits; with two fraction digits that
# bounds the minor-unit value.
MAX_AMOUNT_DIGITS = 18
MAX_MINOR_UNITS = 10**MAX_AMOUNT_DIGITS - 1


def to_decimal(minor_units: int | str) -> str:
    """Convert a minor-unit amount into a decimal string with two fraction digits.

    An existing decimal point is dropped first, so already-converted values
    round-trip unchanged.

    >>> to_decimal("1000")
    '10.00'
    >>> to_decimal("5")
    '0.05'
    """
    digits = str(minor_units).replace(".", "")
    whole, fraction = digits[:-2], digits[-2:]
    whole = whole.lstrip("0") or "0"
    return f"{whole}.{fraction.zfill(2)}"


def to_minor_units(decimal: str) -> str:
    """Convert a two-decimal string back into minor units by dropping the point."""
    return decimal.replace(".", "")


def parse_minor_units(value: int | str) -> int:
    """Return the integer value of a minor-unit amount or decimal string."""
    return int(to_minor_units(str(value)))


def sum_decimals(values: Iterable[str]) -> str:
    """Sum decimal strings exactly, returning the total as a decimal string."""
    return to_decimal(sum(parse_minor_units(value) for value in values))
