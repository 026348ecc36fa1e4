"""
Mod-10 check digit used by UPC/EAN numbers.

The last character carries weight 3, the one before it weight 1, and so on
backwards, so one routine serves UPC-A (11 digits) and
EAN-13 (12 digits) payloads.
"""

from __future__ import annotations

__all__ = ["compute_check_digit", "is_plausible_ean"]


def _is_decimal(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return bool(value) and all("0" <= ch <= "9" for ch in value)


def compute_check_digit(digits: str) -> int:
    """
    Compute the weighted mod-10 check digit of a numeric string.

    Args:
        digits: Decimal digits without the check digit.

    Returns:
        Check digit 0..9.

    Raises:
        ValueError: If ``digits`` contains a non-decimal character.

    Example:
        >>> compute_check_digit("590123412345")
        7
    """
    if not all("0" <= ch <= "9" for ch in digits):
        raise ValueError(f"Check digit source must be decimal digits: {digits!r}")
    total = 0
    weight = 3
    for ch in reversed(digits):
        total += int(ch) * weight
        weight = 4 - weight
    return (10 - total % 10) % 10


def is_plausible_ean(value: str) -> bool:
    """
    Heuristic used by dispatch to decide whether a code looks like EAN/UPC.

    True for any 11-digit string, and for 12/13-digit strings whose last
    digit is the check digit of the preceding ones.
    """
    if not isinstance(value, str) or not _is_decimal(value):
        return False
    if len(value) == 11:
        return True
    if len(value) in (12, 13):
        return compute_check_digit(value[:-1]) == int(value[-1])
    return False
