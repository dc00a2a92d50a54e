"""
Public RUT operations.

Composes sanitization, shape checks, the módulo 11 checksum and the
formatter into the public API. Every operation is total: rejected input
yields ``False`` (or a ``RutifyResult`` with ``is_valid=False``) and never
raises. Invalid options and unexpected faults are logged through structlog
and converted to the same sentinels.
"""

import functools
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Optional, Tuple, TypeVar, Union

from .checksum import check_digit_matches, compute_check_digit
from .errors import ErrorKind, RutifyError
from .formatter import format_identifier
from .log_config import get_logger, log_option_error
from .options import OptionsInput, RutFormat, RutifyOptions, resolve_options
from .sanitizer import sanitize
from .shape import is_valid_shape, split_identifier

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

EMPTY_INPUT_ERROR = "RUT must be a non-empty string"
INVALID_SHAPE_ERROR = "Invalid RUT format"
INTERNAL_ERROR = "Internal error while processing RUT"


@dataclass(frozen=True)
class RutifyResult:
    """Combined outcome of formatting and validating a RUT."""
    formatted: Union[str, Literal[False]]
    is_valid: bool
    error: Optional[str] = None
    body: Optional[str] = None
    check_digit: Optional[str] = None
    kind: Optional[ErrorKind] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formatted": self.formatted,
            "is_valid": self.is_valid,
            "error": self.error,
            "body": self.body,
            "check_digit": self.check_digit,
            "kind": self.kind.value if self.kind else None,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def _false_on_error(func: F) -> F:
    """Log unexpected exceptions from ``func`` and return False instead."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.exception(
                "Unexpected error",
                operation=func.__name__,
                error=str(e),
                error_type=type(e).__name__
            )
            return False

    return wrapper  # type: ignore[return-value]


def _resolve(operation: str, options: OptionsInput) -> Optional[RutifyOptions]:
    """Resolve options, logging and swallowing configuration errors."""
    try:
        return resolve_options(options)
    except RutifyError as e:
        log_option_error(logger, operation, e)
        return None


def _parts(value: Any, options: RutifyOptions) -> Optional[Tuple[str, str]]:
    """Return (body, check_digit) if ``value`` is shaped like a RUT."""
    if not is_valid_shape(value, strict=options.strict, normalize=options.normalize):
        return None
    return split_identifier(sanitize(value, normalize=options.normalize))


@_false_on_error
def rutify(value: Any, options: OptionsInput = None) -> Union[str, Literal[False]]:
    """
    Format a RUT string.

    The check digit is not verified; use ``validate_rut`` for that.

    Args:
        value: RUT in any format
        options: Formatting options (separator, strict, normalize, format)

    Returns:
        Formatted RUT, or False if the input is empty or not shaped like a RUT

    Examples:
        >>> rutify("18927589-7")
        '18.927.589-7'
        >>> rutify("20901792k")
        '20.901.792-K'
        >>> rutify("18927589-7", {"format": "clean"})
        '189275897'
        >>> rutify("")
        False
    """
    opts = _resolve("rutify", options)
    if opts is None:
        return False

    parts = _parts(value, opts)
    if parts is None:
        return False

    body, check_digit = parts
    return format_identifier(body, check_digit, opts)


@_false_on_error
def validate_rut(value: Any, options: OptionsInput = None) -> bool:
    """
    Validate a RUT using the módulo 11 algorithm.

    Args:
        value: RUT in any format
        options: Processing options (strict, normalize)

    Returns:
        True if the check digit matches the body

    Examples:
        >>> validate_rut("18.927.589-7")
        True
        >>> validate_rut("18.927.589-8")
        False
        >>> validate_rut(None)
        False
    """
    opts = _resolve("validate_rut", options)
    if opts is None:
        return False

    parts = _parts(value, opts)
    if parts is None:
        return False

    return check_digit_matches(*parts)


def rutify_and_validate(value: Any, options: OptionsInput = None) -> RutifyResult:
    """
    Format and validate a RUT in a single operation.

    Args:
        value: RUT in any format
        options: Processing options

    Returns:
        RutifyResult with the formatted RUT, validity, extracted parts
        and, on failure, an error message and kind

    Examples:
        >>> result = rutify_and_validate("18927589-7")
        >>> result.formatted, result.is_valid, result.body, result.check_digit
        ('18.927.589-7', True, '18927589', '7')
    """
    try:
        try:
            opts = resolve_options(options)
        except RutifyError as e:
            log_option_error(logger, "rutify_and_validate", e)
            return RutifyResult(
                formatted=False,
                is_valid=False,
                error=e.message,
                kind=e.code,
            )

        if not isinstance(value, str) or not value.strip():
            return RutifyResult(
                formatted=False,
                is_valid=False,
                error=EMPTY_INPUT_ERROR,
                kind=ErrorKind.INVALID_SHAPE,
            )

        parts = _parts(value, opts)
        if parts is None:
            return RutifyResult(
                formatted=False,
                is_valid=False,
                error=INVALID_SHAPE_ERROR,
                kind=ErrorKind.INVALID_SHAPE,
            )

        body, check_digit = parts
        is_valid = check_digit_matches(body, check_digit)

        return RutifyResult(
            formatted=format_identifier(body, check_digit, opts),
            is_valid=is_valid,
            body=body,
            check_digit=check_digit,
            kind=None if is_valid else ErrorKind.CHECKSUM_MISMATCH,
        )

    except Exception as e:
        logger.exception(
            "Unexpected error",
            operation="rutify_and_validate",
            error=str(e),
            error_type=type(e).__name__
        )
        return RutifyResult(formatted=False, is_valid=False, error=INTERNAL_ERROR)


@_false_on_error
def extract_body(value: Any, options: OptionsInput = None) -> Union[str, Literal[False]]:
    """
    Extract the body (digits without check digit) from a RUT.

    Examples:
        >>> extract_body("18.927.589-7")
        '18927589'
        >>> extract_body("")
        False
    """
    opts = _resolve("extract_body", options)
    if opts is None:
        return False

    parts = _parts(value, opts)
    if parts is None:
        return False

    return parts[0]


@_false_on_error
def extract_check_digit(value: Any, options: OptionsInput = None) -> Union[str, Literal[False]]:
    """
    Extract the check digit from a RUT.

    Examples:
        >>> extract_check_digit("20901792k")
        'K'
    """
    opts = _resolve("extract_check_digit", options)
    if opts is None:
        return False

    parts = _parts(value, opts)
    if parts is None:
        return False

    return parts[1]


@_false_on_error
def generate_check_digit(body: Any) -> Union[str, Literal[False]]:
    """
    Generate the check digit for a RUT body.

    Args:
        body: RUT body, digits only

    Returns:
        Check digit ('0'-'9' or 'K'), or False if the body is empty or
        not numeric

    Examples:
        >>> generate_check_digit("18927589")
        '7'
        >>> generate_check_digit("abc")
        False
    """
    return compute_check_digit(body)


@_false_on_error
def normalize(value: Any) -> Union[str, Literal[False]]:
    """
    Remove all formatting from a RUT.

    Examples:
        >>> normalize(" 18.927.589-7 ")
        '189275897'
        >>> normalize("20.901.792-k")
        '20901792K'
        >>> normalize("-")
        False
    """
    cleaned = sanitize(value, normalize=True)
    if not is_valid_shape(cleaned):
        return False
    return cleaned


@_false_on_error
def is_format(value: Any, fmt: Union[str, RutFormat]) -> bool:
    """
    Check whether a RUT is already written in the given format.

    Args:
        value: RUT string
        fmt: Format name ('standard', 'compact', 'clean')

    Returns:
        True if formatting ``value`` with ``fmt`` reproduces it exactly

    Examples:
        >>> is_format("18.927.589-7", "standard")
        True
        >>> is_format("18927589-7", "standard")
        False
        >>> is_format("18927589-7", "compact")
        True
    """
    if not isinstance(value, str):
        return False

    opts = _resolve("is_format", {"format": fmt})
    if opts is None:
        return False

    return rutify(value, opts) == value
