"""Runtime helpers for the Reflector client"""

from .errors import ErrorCode, ReflectorError, EncodingError, FormatError, RangeError

__all__ = [
    "ErrorCode",
    "ReflectorError",
    "EncodingError",
    "FormatError",
    "RangeError",
]
