"""
Decoder combinators.

``apply`` is applicative: when both sides fail their errors are merged, so
a record built from several field decoders reports every bad field in one
pass. ``and_then`` is the short-circuiting alternative for decoders that
depend on an earlier result.
"""

from __future__ import annotations

import inspect
from functools import partial
from typing import Any, Callable, Sequence, TypeVar

from .errors import ErrorKind, Val, merge
from .types import DecodeResult, Decoder, Err, Ok

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


def succeed(value: T) -> Decoder[T]:
    """Ignore the input and succeed with ``value``."""
    return lambda _: Ok(value)


def fail(kind: ErrorKind = ErrorKind.NO_MATCH) -> Decoder[Any]:
    """Always fail with ``Val(kind, input)``."""
    return lambda value: Err(Val(kind, value))


def fmap(f: Callable[[A], B], decoder: Decoder[A]) -> Decoder[B]:
    """Apply ``f`` to a successful result; errors pass through."""

    def decode_mapped(value: Any) -> DecodeResult[B]:
        result = decoder(value)
        if isinstance(result, Err):
            return result
        return Ok(f(result.value))

    return decode_mapped


def apply(df: Decoder[Callable[[A], B]], da: Decoder[A]) -> Decoder[B]:
    """
    Applicative sequencing with error accumulation.

    Both decoders always run. Two failures are merged (see
    :func:`jsontyped.errors.merge`); a single failure propagates alone.
    """

    def decode_applied(value: Any) -> DecodeResult[B]:
        rf = df(value)
        ra = da(value)
        if isinstance(rf, Err) and isinstance(ra, Err):
            return Err(merge(rf.error, ra.error))
        if isinstance(rf, Err):
            return rf
        if isinstance(ra, Err):
            return ra
        return Ok(rf.value(ra.value))

    return decode_applied


def alt(*decoders: Decoder[Any]) -> Decoder[Any]:
    """
    Try each decoder on the same input; the first success wins.

    If all fail, the last failure is returned. No accumulation.
    """
    if not decoders:
        return fail()

    def decode_alt(value: Any) -> DecodeResult[Any]:
        result: DecodeResult[Any] = Err(Val(ErrorKind.NO_MATCH, value))
        for decoder in decoders:
            result = decoder(value)
            if isinstance(result, Ok):
                return result
        return result

    return decode_alt


def one_of(decoders: Sequence[Decoder[Any]]) -> Decoder[Any]:
    return alt(*decoders)


def and_then(decoder: Decoder[A], f: Callable[[A], Decoder[B]]) -> Decoder[B]:
    """
    Run ``decoder`` then the decoder chosen by ``f`` on the same input.

    Short-circuits on the first failure.

    Usage:
        shape = and_then(field("kind", string), lambda k: SHAPES[k])
    """

    def decode_then(value: Any) -> DecodeResult[B]:
        result = decoder(value)
        if isinstance(result, Err):
            return result
        return f(result.value)(value)

    return decode_then


def _curry(f: Callable[..., T], arity: int) -> Callable[..., Any]:
    if arity <= 1:
        return f

    def take(arg: Any) -> Callable[..., Any]:
        return _curry(partial(f, arg), arity - 1)

    return take


def lift(f: Callable[..., T], *decoders: Decoder[Any]) -> Decoder[T]:
    """
    Build a decoder calling ``f`` with one decoded value per decoder.

    Equivalent to ``f <$> d1 <*> d2 <*> ...``: every failing decoder
    contributes to the error.

    Usage:
        person = lift(Person, field("name", string), field("age", integer))
    """
    if not decoders:
        raise TypeError("lift requires at least one decoder")

    combined = fmap(_curry(f, len(decoders)), decoders[0])
    for decoder in decoders[1:]:
        combined = apply(combined, decoder)
    return combined


def record(
    constructor: Callable[..., T], /, **decoders: Decoder[Any]
) -> Decoder[T]:
    """
    Keyword form of :func:`lift`.

    Usage:
        person = record(Person, name=field("name", string), age=field("age", integer))
    """
    names = list(decoders)
    if names and not _accepts(constructor, names):
        raise TypeError(
            f"{getattr(constructor, '__name__', constructor)!r} does not accept {names}"
        )

    def build(*values: Any) -> T:
        return constructor(**dict(zip(names, values)))

    if not names:
        return lambda _: Ok(constructor())
    return lift(build, *decoders.values())


def _accepts(constructor: Callable[..., Any], names: list[str]) -> bool:
    try:
        inspect.signature(constructor).bind_partial(**dict.fromkeys(names))
    except TypeError:
        return False
    except ValueError:
        # Builtins without an introspectable signature
        return True
    return True
