"""
Primitive decoders for JSON leaves.

Each decoder is a plain function ``value -> Ok | Err``. ``bool`` is never
accepted as a number even though Python treats it as an ``int``.
"""

from __future__ import annotations

import math
from typing import Any, TypeVar

from .errors import ErrorKind, Val
from .types import DecodeResult, Decoder, Err, Ok

T = TypeVar("T")


def is_number(value: Any) -> bool:
    """True for JSON numbers: ``int`` or ``float`` but not ``bool``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def string(value: Any) -> DecodeResult[str]:
    if isinstance(value, str):
        return Ok(value)
    return Err(Val(ErrorKind.EXPECTED_STRING, value))


def number(value: Any) -> DecodeResult[float]:
    """
    Any JSON number, returned as ``float``.

    Integers too large to represent as a float fail with EXPECTED_NUMBER.
    """
    if is_number(value):
        try:
            return Ok(float(value))
        except OverflowError:
            # Integer beyond float range
            return Err(Val(ErrorKind.EXPECTED_NUMBER, value))
    return Err(Val(ErrorKind.EXPECTED_NUMBER, value))


def integer(value: Any) -> DecodeResult[int]:
    """
    A JSON number with no fractional part, returned as ``int``.

    Non-numbers fail with EXPECTED_NUMBER; numbers with a fractional part
    (and NaN or infinities) fail with EXPECTED_INT.
    """
    if not is_number(value):
        return Err(Val(ErrorKind.EXPECTED_NUMBER, value))
    if isinstance(value, int):
        return Ok(value)
    if math.isfinite(value) and value.is_integer():
        return Ok(int(value))
    return Err(Val(ErrorKind.EXPECTED_INT, value))


def boolean(value: Any) -> DecodeResult[bool]:
    if isinstance(value, bool):
        return Ok(value)
    return Err(Val(ErrorKind.EXPECTED_BOOL, value))


def null(default: T) -> Decoder[T]:
    """Succeed with ``default`` when the value is JSON null."""

    def decode_null(value: Any) -> DecodeResult[T]:
        if value is None:
            return Ok(default)
        return Err(Val(ErrorKind.EXPECTED_NULL, value))

    return decode_null


def value(value: Any) -> DecodeResult[Any]:
    """Pass the raw JSON value through unchanged."""
    return Ok(value)

