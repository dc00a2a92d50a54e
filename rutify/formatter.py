"""
Rendering of a body + check digit pair into one of the RUT layouts.
"""

from typing import List

from .options import DEFAULT_OPTIONS, RutFormat, RutifyOptions

GROUP_SIZE = 3


def group_digits(body: str, separator: str = ".") -> str:
    """
    Group a body into right-aligned triplets.

    The leftmost group holds whatever is left over (1-3 digits).

    Examples:
        >>> group_digits("18927589")
        '18.927.589'
        >>> group_digits("1234567", ",")
        '1,234,567'
        >>> group_digits("123")
        '123'
    """
    groups: List[str] = []
    end = len(body)

    while end > 0:
        start = max(end - GROUP_SIZE, 0)
        groups.append(body[start:end])
        end = start

    return separator.join(reversed(groups))


def format_identifier(
    body: str,
    check_digit: str,
    options: RutifyOptions = DEFAULT_OPTIONS,
) -> str:
    """
    Render a RUT in the layout selected by ``options.format``.

    Args:
        body: RUT body (digits only)
        check_digit: Check digit ('0'-'9' or 'K')
        options: Resolved options

    Returns:
        Formatted RUT

    Examples:
        >>> format_identifier("18927589", "7")
        '18.927.589-7'
        >>> format_identifier("18927589", "7", RutifyOptions(format="compact"))
        '18927589-7'
        >>> format_identifier("18927589", "7", RutifyOptions(format="clean"))
        '189275897'
    """
    if options.format == RutFormat.COMPACT:
        return f"{body}-{check_digit}"

    if options.format == RutFormat.CLEAN:
        return f"{body}{check_digit}"

    return f"{group_digits(body, options.separator)}-{check_digit}"
