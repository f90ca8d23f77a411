"""
Reflector Codec Module

Converts oracle price and fee values to and from the {hi, lo} representation
of the contract's signed 128-bit integer field.

Key components:
- int128.py: Int128Codec, HiLoPair and the i128 range constants
"""

from .int128 import (
    I64_MAX,
    I64_MIN,
    I128_MAX,
    I128_MIN,
    TWO_POW_64,
    CodecConfig,
    HiLoPair,
    Int128Codec,
    decode_i128,
    decode_pair,
    encode_i128,
    parse_decimal_int,
)

__all__ = [
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
]
