"""
Container decoders: arrays, tuples, and homogeneous objects.

Every child is visited even after a failure so the resulting error lists
all failing positions, not just the first.
"""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

from .errors import Arr, ErrorKind, InvalidField, Obj, Val, index_error
from .nonempty import NonEmpty
from .types import DecodeResult, Decoder, Err, Ok

T = TypeVar("T")


def _decode_items(
    decoders: Iterable[Decoder[Any]], items: Iterable[Any]
) -> DecodeResult[list[Any]]:
    values: list[Any] = []
    errors = []

    for i, (decoder, item) in enumerate(zip(decoders, items)):
        result = decoder(item)
        if isinstance(result, Err):
            errors.append((i, result.error))
        else:
            values.append(result.value)

    if errors:
        return Err(Arr(NonEmpty.from_iterable(errors)))
    return Ok(values)


def list_of(decoder: Decoder[T]) -> Decoder[list[T]]:
    """
    Decode a JSON array whose elements all use ``decoder``.

    Usage:
        list_of(integer)([1, 2])       # Ok([1, 2])
        list_of(integer)(["a", 2])     # Err(Arr([(0, Val(EXPECTED_NUMBER, "a"))]))
    """

    def decode_list(value: Any) -> DecodeResult[list[T]]:
        if not isinstance(value, list):
            return Err(Val(ErrorKind.EXPECTED_ARRAY, value))
        return _decode_items((decoder for _ in value), value)

    return decode_list


def array(decoder: Decoder[T]) -> Decoder[tuple[T, ...]]:
    """Like :func:`list_of` but produces an immutable tuple."""
    decode_list = list_of(decoder)

    def decode_array(value: Any) -> DecodeResult[tuple[T, ...]]:
        result = decode_list(value)
        if isinstance(result, Err):
            return result
        return Ok(tuple(result.value))

    return decode_array


def at(index: int, decoder: Decoder[T]) -> Decoder[T]:
    """
    Decode the element at ``index`` of a JSON array.

    A missing position fails as ``Arr([(index, Val(INDEX_OUT_OF_RANGE, v))])``.
    """

    def decode_at(value: Any) -> DecodeResult[T]:
        if not isinstance(value, list):
            return Err(Val(ErrorKind.EXPECTED_ARRAY, value))
        if not 0 <= index < len(value):
            return Err(index_error(index, Val(ErrorKind.INDEX_OUT_OF_RANGE, value)))
        result = decoder(value[index])
        if isinstance(result, Err):
            return Err(index_error(index, result.error))
        return result

    return decode_at


def tuple_of(*decoders: Decoder[Any]) -> Decoder[tuple[Any, ...]]:
    """
    Decode a fixed-length JSON array, position ``i`` with ``decoders[i]``.

    A wrong length fails with EXPECTED_ARITY; otherwise every failing
    position is reported.
    """

    def decode_tuple(value: Any) -> DecodeResult[tuple[Any, ...]]:
        if not isinstance(value, list):
            return Err(Val(ErrorKind.EXPECTED_ARRAY, value))
        if len(value) != len(decoders):
            return Err(Val(ErrorKind.EXPECTED_ARITY, value))
        result = _decode_items(decoders, value)
        if isinstance(result, Err):
            return result
        return Ok(tuple(result.value))

    return decode_tuple


def dict_of(decoder: Decoder[T]) -> Decoder[dict[str, T]]:
    """Decode a JSON object whose values all use ``decoder``."""

    def decode_dict(value: Any) -> DecodeResult[dict[str, T]]:
        if not isinstance(value, dict):
            return Err(Val(ErrorKind.EXPECTED_OBJECT, value))

        decoded: dict[str, T] = {}
        errors = []
        for key, item in value.items():
            result = decoder(item)
            if isinstance(result, Err):
                errors.append((key, InvalidField(result.error)))
            else:
                decoded[key] = result.value

        if errors:
            return Err(Obj(NonEmpty.from_iterable(errors)))
        return Ok(decoded)

    return decode_dict
