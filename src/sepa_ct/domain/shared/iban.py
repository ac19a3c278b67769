"""IBAN normalization and ISO 7064 MOD97-10 checksum utilities."""

from __future__ import annotations

import string

# First window is 9 digits, every following window is the carried remainder
# (at most 2 digits) plus 7 fresh digits, so no window exceeds 9 digits.
FIRST_WINDOW = 9
NEXT_WINDOW = 7
MODULUS = 97

_CHAR_VALUES = {
    char: str(index) for index, char in enumerate(string.digits + string.ascii_uppercase)
}


def normalize_iban(value: str | None) -> str | None:
    """Normalize an IBAN for stable comparisons/storage.

    - Removes all spaces
    - Strips surrounding whitespace
    - Uppercases

    Returns None if value is None.
    """
    if value is None:
        return None
    normalized = value.strip().replace(" ", "").upper()
    return normalized or None


def iban_to_digits(iban: str) -> str:
    """Rearrange an IBAN and expand it into its decimal digit string.

    The country code and check digits move to the end, and every letter is
    replaced by its two-digit value (A=10 ... Z=35).

    Raises
    ------
    ValueError
        If the IBAN contains characters outside 0-9 / A-Z
    """
    rearranged = iban.upper()
    rearranged = rearranged[4:] + rearranged[:4]
    try:
        return "".join(_CHAR_VALUES[char] for char in rearranged)
    except KeyError as exc:
        msg = f"Invalid IBAN character: {exc.args[0]!r}"
        raise ValueError(msg) from exc


def mod97(digits: str) -> int:
    """Reduce an arbitrarily long decimal digit string modulo 97.

    The reduction never converts more than nine digits at a time, so the
    intermediate values stay small regardless of the input length.
    """
    remainder = int(digits[:FIRST_WINDOW]) % MODULUS
    rest = digits[FIRST_WINDOW:]
    while rest:
        window = f"{remainder}{rest[:NEXT_WINDOW]}"
        remainder = int(window) % MODULUS
        rest = rest[NEXT_WINDOW:]
    return remainder


def is_valid_iban_checksum(iban: str) -> bool:
    """Return True if the IBAN passes the MOD97-10 check."""
    try:
        digits = iban_to_digits(iban)
    except ValueError:
        return False
    if not digits:
        return False
    return mod97(digits) == 1
