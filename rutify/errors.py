"""
Error kinds for RUT processing.

Callers branch on ``ErrorKind`` rather than on exception types. Only
configuration misuse is ever raised (as ``RutifyError``); shape problems and
checksum mismatches are reported through return values.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Machine-readable reason a RUT or its options were rejected."""

    INVALID_OPTION = "INVALID_OPTION"
    INVALID_SHAPE = "INVALID_SHAPE"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"


class RutifyError(Exception):
    """
    Structured fault carrying an ``ErrorKind`` code.

    Args:
        message: Human-readable description
        code: Error kind
        details: Extra context (offending fields, values)
    """

    def __init__(
        self,
        message: str,
        code: ErrorKind = ErrorKind.INVALID_OPTION,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code.value,
            "details": self.details,
        }
