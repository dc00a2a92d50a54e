"""
rutify

Formatting and validation of Chilean RUTs (Rol Único Tributario):
- Módulo 11 check digit computation
- Standard (12.345.678-5), compact (12345678-5) and clean (123456785) formats
- Pydantic options with a single configurable separator
- Structured logging with structlog
"""

__version__ = "1.1.0"

from .core import (
    RutifyResult,
    extract_body,
    extract_check_digit,
    generate_check_digit,
    is_format,
    normalize,
    rutify,
    rutify_and_validate,
    validate_rut,
)
from .errors import ErrorKind, RutifyError
from .options import DEFAULT_OPTIONS, RutFormat, RutifyOptions, resolve_options

__all__ = [
    "__version__",
    "rutify",
    "validate_rut",
    "rutify_and_validate",
    "extract_body",
    "extract_check_digit",
    "generate_check_digit",
    "normalize",
    "is_format",
    "resolve_options",
    "RutifyOptions",
    "RutFormat",
    "DEFAULT_OPTIONS",
    "RutifyResult",
    "RutifyError",
    "ErrorKind",
]
