"""
Módulo 11 check digit computation for Chilean RUTs.

The Chilean RUT check digit algorithm:
1. Multiply each digit (from right to left) by sequence 2,3,4,5,6,7,2,3,4...
2. Sum all products
3. Take the remainder of the sum modulo 11
4. If the remainder is 0, DV is 0; if 1, DV is K; otherwise DV is 11 - remainder

Digits are consumed one at a time, so bodies of any length work without
converting the body to a number.
"""

from typing import Any, Literal, Union

from .shape import BODY_PATTERN

FIRST_WEIGHT = 2
LAST_WEIGHT = 7


def compute_check_digit(body: Any) -> Union[str, Literal[False]]:
    """
    Compute the check digit for a RUT body.

    Args:
        body: RUT body (digits only, no check digit)

    Returns:
        Check digit ('0'-'9' or 'K'), or False if the body is empty or
        contains non-digit characters

    Examples:
        >>> compute_check_digit("18927589")
        '7'
        >>> compute_check_digit("20901792")
        'K'
        >>> compute_check_digit("12a")
        False
    """
    if not isinstance(body, str) or not BODY_PATTERN.fullmatch(body):
        return False

    total = 0
    multiplier = FIRST_WEIGHT

    for digit in reversed(body):
        total += int(digit) * multiplier
        multiplier = FIRST_WEIGHT if multiplier == LAST_WEIGHT else multiplier + 1

    remainder = total % 11

    if remainder == 0:
        return "0"
    if remainder == 1:
        return "K"
    return str(11 - remainder)


def check_digit_matches(body: str, check_digit: str) -> bool:
    """Return True if ``check_digit`` is the computed digit for ``body``."""
    expected = compute_check_digit(body)
    if expected is False or not isinstance(check_digit, str):
        return False
    return expected == check_digit.upper()
