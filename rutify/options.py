"""
Option resolution for RUT formatting and validation.

Caller options are merged over defaults with a Pydantic model. Malformed
options are a programmer error, so ``resolve_options`` raises
``RutifyError`` with code ``INVALID_OPTION`` instead of returning a sentinel.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ErrorKind, RutifyError


class RutFormat(str, Enum):
    """Output layouts for a formatted RUT."""

    STANDARD = "standard"  # 12.345.678-5
    COMPACT = "compact"    # 12345678-5
    CLEAN = "clean"        # 123456785


class RutifyOptions(BaseModel):
    """
    Options accepted by every public operation.

    Unknown keys are ignored and missing keys take their defaults.
    Instances are immutable.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
    )

    separator: str = Field(
        default=".",
        description="Thousands separator used by the standard format"
    )

    strict: bool = Field(
        default=False,
        description="Require every character but the last to be a digit"
    )

    normalize: bool = Field(
        default=True,
        description="Strip every character outside [0-9kK] before processing"
    )

    format: RutFormat = Field(
        default=RutFormat.STANDARD,
        description="Output format (standard, compact, clean)"
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v):
        """Validate separator is a single character."""
        if len(v) != 1:
            raise ValueError("separator must be exactly one character")
        return v


DEFAULT_OPTIONS = RutifyOptions()


OptionsInput = Optional[Union[RutifyOptions, Mapping[str, Any]]]


def resolve_options(options: OptionsInput = None) -> RutifyOptions:
    """
    Merge caller options over the defaults.

    Args:
        options: None, a mapping of option names to values, or a
            ``RutifyOptions`` instance

    Returns:
        Resolved ``RutifyOptions``

    Raises:
        RutifyError: With code ``INVALID_OPTION`` if any option is malformed

    Examples:
        >>> resolve_options({"format": "compact"}).format
        <RutFormat.COMPACT: 'compact'>
        >>> resolve_options({"separator": "::"})
        Traceback (most recent call last):
        ...
        rutify.errors.RutifyError: Invalid option(s): separator
    """
    if options is None:
        return DEFAULT_OPTIONS

    if isinstance(options, RutifyOptions):
        return options

    if not isinstance(options, Mapping):
        raise RutifyError(
            "Options must be a mapping",
            ErrorKind.INVALID_OPTION,
            {"type": type(options).__name__},
        )

    try:
        return RutifyOptions.model_validate(dict(options))
    except ValidationError as e:
        fields = [
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        ]
        raise RutifyError(
            f"Invalid option(s): {', '.join(fields)}",
            ErrorKind.INVALID_OPTION,
            {
                "fields": fields,
                "messages": [err["msg"] for err in e.errors()],
            },
        ) from e
