"""
Input sanitization for RUT strings.

Reduces raw input to the canonical alphabet ``[0-9K]``.
"""

import re
from typing import Any

# Everything outside the RUT alphabet (normalize mode)
_NON_RUT_CHARS = re.compile(r"[^0-9kK]+")

# Formatting noise only: dots, whitespace and hyphens (preserve-structure mode)
_SEPARATOR_CHARS = re.compile(r"[.\s-]+")


def sanitize(value: Any, normalize: bool = True) -> str:
    """
    Strip formatting from a RUT and uppercase it.

    Normalization steps:
    1. Treat non-string input as empty
    2. Strip leading/trailing whitespace
    3. Remove every character outside [0-9kK] (normalize=True), or only
       dots, whitespace and hyphens (normalize=False)
    4. Convert to uppercase

    Args:
        value: Raw RUT value
        normalize: Remove all foreign characters instead of separators only

    Returns:
        Sanitized RUT, possibly empty

    Examples:
        >>> sanitize("  18.927.589-7 ")
        '189275897'
        >>> sanitize("20.901.792-k")
        '20901792K'
        >>> sanitize("RUT: 1-9")
        '19'
        >>> sanitize("RUT: 1-9", normalize=False)
        'RUT:19'
        >>> sanitize(None)
        ''
    """
    if not isinstance(value, str):
        return ""

    result = value.strip()

    if normalize:
        result = _NON_RUT_CHARS.sub("", result)
    else:
        result = _SEPARATOR_CHARS.sub("", result)

    return result.upper()
