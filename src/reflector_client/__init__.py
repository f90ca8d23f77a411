"""
Reflector Python Client

Client-side helpers for the Reflector price oracle contract. Provides the
signed 128-bit codec used for price and fee arguments and results.
"""

from .codec import *
from .runtime.errors import *

__version__ = "0.1.0"
__all__ = [
    # Codec
    "I64_MAX",
    "I64_MIN",
    "I128_MAX",
    "I128_MIN",
    "TWO_POW_64",
    "CodecConfig",
    "HiLoPair",
    "Int128Codec",
    "decode_i128",
    "decode_pair",
    "encode_i128",
    "parse_decimal_int",
    # Errors
    "ErrorCode",
    "ReflectorError",
    "EncodingError",
    "FormatError",
    "RangeError",
]
