"""
Reflector Client Error Model

This module provides the error handling framework for the Reflector client,
with numeric codes so callers can branch on failures without string matching.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Reflector client error codes."""

    # General errors (1-99)
    UNKNOWN = 1

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_FORMAT = 101
    OUT_OF_RANGE = 102


class ReflectorError(Exception):
    """
    Base class for all Reflector client errors.

    Carries a code, free-form details and the underlying cause, if any.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Reflector error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodingError(ReflectorError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class FormatError(EncodingError):
    """Input could not be parsed as a signed base-10 integer."""

    def __init__(self, message: str = "Invalid integer format",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_FORMAT, details, cause)


class RangeError(EncodingError):
    """Value does not fit the signed 128-bit range."""

    def __init__(self, message: str = "Value out of range",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.OUT_OF_RANGE, details, cause)


__all__ = [
    "ErrorCode",
    "ReflectorError",
    "EncodingError",
    "FormatError",
    "RangeError",
]
