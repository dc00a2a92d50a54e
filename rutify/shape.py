"""
Shape checks for sanitized RUT strings.

A RUT is shaped when it is one or more digits followed by exactly one
check digit (a digit or ``K``).
"""

import re
from typing import Any, Tuple

from .sanitizer import sanitize

RUT_PATTERN = re.compile(r"^([0-9]+)([0-9K])$")
BODY_PATTERN = re.compile(r"^[0-9]+$")

MIN_LENGTH = 2


def is_valid_shape(value: Any, strict: bool = False, normalize: bool = True) -> bool:
    """
    Check whether a value has the shape of a body + check digit pair.

    Args:
        value: Raw RUT string
        strict: Also require every character except the last to be a digit
        normalize: Sanitization mode (see ``sanitize``)

    Returns:
        True if the sanitized value is shaped like a RUT

    Examples:
        >>> is_valid_shape("18.927.589-7")
        True
        >>> is_valid_shape("K")
        False
        >>> is_valid_shape("1K9")
        False
    """
    if not isinstance(value, str):
        return False

    cleaned = sanitize(value, normalize=normalize)
    if len(cleaned) < MIN_LENGTH:
        return False

    if not RUT_PATTERN.fullmatch(cleaned):
        return False

    if strict and not BODY_PATTERN.fullmatch(cleaned[:-1]):
        return False

    return True


def split_identifier(cleaned: str) -> Tuple[str, str]:
    """
    Split a sanitized RUT into (body, check_digit).

    The caller is responsible for checking the shape first.

    Examples:
        >>> split_identifier("20901792K")
        ('20901792', 'K')
    """
    return cleaned[:-1], cleaned[-1]
