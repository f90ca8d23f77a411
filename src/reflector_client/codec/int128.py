"""
Int128 Codec - signed 128-bit price and fee values

Converts between Python ints and the {hi, lo} decimal-string pair that the
oracle contract call builder packs into a 128-bit integer field.

The split is a truncating division by 2^64: ``hi`` is the quotient rounded
toward zero and ``lo`` is the remainder, carrying the sign of the value.
Both halves may be negative independently, e.g. -1 -> {hi: "0", lo: "-1"}.
Consumers expect exactly this layout, so it must not be replaced with the
usual unsigned-low two's-complement split.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, field_validator

from ..runtime.errors import FormatError, RangeError

TWO_POW_64 = 2 ** 64

I128_MIN = -(2 ** 127)
I128_MAX = 2 ** 127 - 1

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1

# ASCII digits only; int() would also take underscores, spaces and non-ASCII digits
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

# Widest half accepted by HiLoPair; keeps str() well under the interpreter's digit limit
_MAX_HALF_BITS = 4096

# Wider ints are reported by size only
_MAX_REPR_BITS = 1024

IntLike = Union[int, str]


def _bounded_str(number: int) -> str:
    """Render an int for messages without stringifying huge values."""
    if number.bit_length() > _MAX_REPR_BITS:
        return f"<{'-' if number < 0 else ''}{number.bit_length()} bits>"
    return str(number)


def parse_decimal_int(value: Any, name: str = "value") -> int:
    """
    Parse a signed base-10 integer.

    Args:
        value: ``int`` or decimal string such as ``"-42"``
        name: Field name used in error messages

    Returns:
        Parsed integer

    Raises:
        FormatError: If the value is not an int or a well-formed decimal string
    """
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise FormatError(
            f"{name} must be an int or a base-10 string, got {type(value).__name__}",
            details={name: repr(value)},
        )
    if isinstance(value, int):
        return value
    if not _DECIMAL_RE.fullmatch(value):
        raise FormatError(f"{name} is not a base-10 integer: {value!r}", details={name: value})
    try:
        return int(value)
    except ValueError as exc:
        # Digit-count limit on str -> int conversion
        raise FormatError(f"{name} could not be converted", details={name: f"<{len(value)} digits>"}, cause=exc) from exc


class HiLoPair(BaseModel):
    """
    Immutable {hi, lo} pair of canonical signed decimal strings.

    The represented value is ``int(hi) * 2**64 + int(lo)``.
    """

    hi: str
    lo: str

    model_config = {"frozen": True}

    @field_validator("hi", "lo", mode="before")
    @classmethod
    def canonical_decimal(cls, value: Any, info) -> str:
        """Normalize to canonical form: no '+', no leading zeros, no '-0'."""
        number = parse_decimal_int(value, info.field_name)
        if number.bit_length() > _MAX_HALF_BITS:
            raise FormatError(
                f"{info.field_name} is wider than {_MAX_HALF_BITS} bits",
                details={info.field_name: _bounded_str(number)},
            )
        return str(number)

    def to_int(self) -> int:
        """Reconstruct the integer value."""
        return int(self.hi) * TWO_POW_64 + int(self.lo)

    def as_tuple(self) -> Tuple[str, str]:
        """Return ``(hi, lo)``."""
        return self.hi, self.lo

    def to_dict(self) -> Dict[str, str]:
        """Convert to the ``{"hi": ..., "lo": ...}`` mapping used by call builders."""
        return {"hi": self.hi, "lo": self.lo}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HiLoPair":
        """Create a pair from a mapping with ``hi`` and ``lo`` keys."""
        if not isinstance(data, Mapping):
            raise FormatError(f"Expected a mapping with 'hi' and 'lo', got {type(data).__name__}")
        missing = [key for key in ("hi", "lo") if key not in data]
        if missing:
            raise FormatError(f"Missing field(s): {', '.join(missing)}", details={"missing": missing})
        return cls(hi=data["hi"], lo=data["lo"])


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for the Int128 codec."""

    check_range: bool = True
    debug: bool = False


class Int128Codec:
    """
    Bidirectional i128 <-> {hi, lo} converter.

    Instances are stateless apart from their config and may be shared
    between threads.
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        """
        Initialize the codec.

        Args:
            config: Codec configuration; defaults to ``CodecConfig()``
        """
        self.config = config or CodecConfig()

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

    def encode(self, value: Union[int, str, Decimal, None]) -> HiLoPair:
        """
        Split a signed integer into its {hi, lo} pair.

        Args:
            value: ``int``, base-10 string or integral ``Decimal``;
                ``None`` encodes as zero

        Returns:
            HiLoPair with ``hi * 2**64 + lo == value``

        Raises:
            FormatError: If the value is not an integer
            RangeError: If range checking is enabled and the value
                is outside [I128_MIN, I128_MAX]
        """
        number = self._coerce(value)

        if not I128_MIN <= number <= I128_MAX:
            if self.config.check_range:
                raise self._range_error(_bounded_str(number))
            self.logger.warning("Encoding out-of-range i128 value %s without range check", _bounded_str(number))

        # divmod floors; split the magnitude and reapply the sign to truncate toward zero
        hi, lo = divmod(abs(number), TWO_POW_64)
        if number < 0:
            hi, lo = -hi, -lo

        pair = HiLoPair(hi=hi, lo=lo)
        self.logger.debug("Encoded i128 %s -> hi=%s lo=%s", _bounded_str(number), pair.hi, pair.lo)
        return pair

    def decode(self, hi: IntLike, lo: IntLike) -> int:
        """
        Reconstruct a signed integer from its halves.

        ``lo`` is not limited to the signed 64-bit range; values such as
        ``"18446744073709551615"`` are decoded exactly.

        Args:
            hi: High half as int or base-10 string
            lo: Low half as int or base-10 string

        Returns:
            ``hi * 2**64 + lo``

        Raises:
            FormatError: If either half is malformed
        """
        hi_int = parse_decimal_int(hi, "hi")
        lo_int = parse_decimal_int(lo, "lo")
        value = hi_int * TWO_POW_64 + lo_int

        if not I128_MIN <= value <= I128_MAX:
            self.logger.warning("Decoded value %s is outside the i128 range", _bounded_str(value))
        self.logger.debug(
            "Decoded hi=%s lo=%s -> i128 %s", _bounded_str(hi_int), _bounded_str(lo_int), _bounded_str(value)
        )
        return value

    def decode_pair(self, pair: Union[HiLoPair, Mapping[str, Any]]) -> int:
        """Decode a HiLoPair or a ``{"hi", "lo"}`` mapping."""
        if not isinstance(pair, HiLoPair):
            pair = HiLoPair.from_dict(pair)
        return self.decode(pair.hi, pair.lo)

    @staticmethod
    def _range_error(value: str) -> RangeError:
        return RangeError(
            "Value does not fit in a signed 128-bit integer",
            details={"value": value, "min": str(I128_MIN), "max": str(I128_MAX)},
        )

    def _coerce(self, value: Union[int, str, Decimal, None]) -> int:
        if value is None:
            return 0
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise FormatError(f"Decimal is not finite: {value}", details={"value": str(value)})
            if value != value.to_integral_value():
                raise FormatError(f"Decimal is not integral: {value}", details={"value": str(value)})
            # Compare before int() so huge exponents are never expanded
            if self.config.check_range and not I128_MIN <= value <= I128_MAX:
                raise self._range_error(str(value))
            if value.adjusted() >= _MAX_HALF_BITS:
                raise FormatError(f"Decimal is too wide to encode: {value}", details={"value": str(value)})
            return int(value)
        return parse_decimal_int(value)


_default_codec = Int128Codec()


def encode_i128(value: Union[int, str, Decimal, None]) -> HiLoPair:
    """Encode with the default codec. See :meth:`Int128Codec.encode`."""
    return _default_codec.encode(value)


def decode_i128(hi: IntLike, lo: IntLike) -> int:
    """Decode with the default codec. See :meth:`Int128Codec.decode`."""
    return _default_codec.decode(hi, lo)


def decode_pair(pair: Union[HiLoPair, Mapping[str, Any]]) -> int:
    """Decode a pair or mapping with the default codec."""
    return _default_codec.decode_pair(pair)
