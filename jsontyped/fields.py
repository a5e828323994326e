"""
Object field decoders.

The distinction between an *optional field* and an *optional value*:

- ``optional_field("x", d)`` accepts the key being absent or null
- ``field("x", optional(d))`` accepts null, but a missing key still fails
  with ``MissingField``
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, TypeVar

from .errors import MISSING_FIELD, ErrorKind, InvalidField, Val, field_error
from .types import DecodeResult, Decoder, Err, Ok

T = TypeVar("T")


def field(name: str, decoder: Decoder[T]) -> Decoder[T]:
    """
    Decode the value under ``name`` of a JSON object.

    Returns:
        Ok(decoded) when the key is present and decodes
        Err(Val(EXPECTED_OBJECT, v)) when ``v`` is not an object
        Err(Obj([(name, MissingField())])) when the key is absent
        Err(Obj([(name, InvalidField(e))])) when the value fails with ``e``
    """

    def decode_field(value: Any) -> DecodeResult[T]:
        if not isinstance(value, dict):
            return Err(Val(ErrorKind.EXPECTED_OBJECT, value))
        if name not in value:
            return Err(field_error(name, MISSING_FIELD))
        result = decoder(value[name])
        if isinstance(result, Err):
            return Err(field_error(name, InvalidField(result.error)))
        return result

    return decode_field


def field_with_fallback(name: str, decoder: Decoder[T], default: T) -> Decoder[T]:
    """Like :func:`field` but any failure yields ``Ok(default)``."""
    decode_field = field(name, decoder)

    def decode_with_fallback(value: Any) -> DecodeResult[T]:
        result = decode_field(value)
        if isinstance(result, Err):
            return Ok(default)
        return result

    return decode_with_fallback


def optional_field(name: str, decoder: Decoder[T]) -> Decoder[Optional[T]]:
    """
    Decode ``name`` if present and non-null, otherwise ``Ok(None)``.

    A present, non-null value that fails ``decoder`` reports the failure
    as ``InvalidField``, same as :func:`field`.
    """
    decode_field = field(name, decoder)

    def decode_optional_field(value: Any) -> DecodeResult[Optional[T]]:
        if isinstance(value, dict) and value.get(name) is None:
            return Ok(None)
        return decode_field(value)

    return decode_optional_field


def optional(decoder: Decoder[T]) -> Decoder[Optional[T]]:
    """Accept JSON null as ``None``; anything else must satisfy ``decoder``."""

    def decode_optional(value: Any) -> DecodeResult[Optional[T]]:
        if value is None:
            return Ok(None)
        return decoder(value)

    return decode_optional


def path(keys: Sequence[str], decoder: Decoder[T]) -> Decoder[T]:
    """
    Decode a value nested under successive object keys.

    Usage:
        path(["user", "name"], string)({"user": {"name": "Ada"}})   # Ok("Ada")

    Failures nest: a bad ``user.name`` is reported as
    ``Obj([("user", InvalidField(Obj([("name", ...)])))])``.
    """
    if not keys:
        raise ValueError("path requires at least one key")

    nested = decoder
    for key in reversed(keys):
        nested = field(key, nested)
    return nested
