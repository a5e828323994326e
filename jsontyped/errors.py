"""
Structured error model for decoders.

A failed decode produces a ParseError value:

- ``Val(kind, value)``: a leaf mismatch, keeping the offending JSON value
- ``Arr(errors)``: one or more ``(index, ParseError)`` pairs
- ``Obj(errors)``: one or more ``(field_name, FieldError)`` pairs

Errors are immutable data and compare structurally, so tests can assert on
``Err(...) == Err(...)`` directly.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .nonempty import NonEmpty


class ErrorKind(Enum):
    """What a leaf decoder expected but did not find."""

    EXPECTED_STRING = "expected string"
    EXPECTED_NUMBER = "expected number"
    EXPECTED_INT = "expected integer"
    EXPECTED_BOOL = "expected boolean"
    EXPECTED_NULL = "expected null"
    EXPECTED_ARRAY = "expected array"
    EXPECTED_OBJECT = "expected object"
    EXPECTED_ARITY = "expected array of different length"
    INDEX_OUT_OF_RANGE = "index out of range"
    NO_MATCH = "no decoder matched"
    VALIDATION_FAILED = "model validation failed"


@dataclass(frozen=True, slots=True)
class Val:
    """Leaf type mismatch on ``value``."""

    kind: ErrorKind
    value: Any


@dataclass(frozen=True, slots=True)
class Arr:
    """Failures of individual array positions, ascending by index."""

    errors: NonEmpty[tuple[int, ParseError]]


@dataclass(frozen=True, slots=True)
class Obj:
    """Failures of individual object fields, in the order they were checked."""

    errors: NonEmpty[tuple[str, FieldError]]


@dataclass(frozen=True, slots=True)
class MissingField:
    """The key is absent from the object."""


@dataclass(frozen=True, slots=True)
class InvalidField:
    """The key is present but its value failed to decode."""

    error: ParseError


ParseError = Union[Val, Arr, Obj]
FieldError = Union[MissingField, InvalidField]
Path = tuple[Union[str, int], ...]

MISSING_FIELD = MissingField()


def field_error(name: str, error: FieldError) -> Obj:
    """Single-entry object error."""
    return Obj(NonEmpty.pure((name, error)))


def index_error(index: int, error: ParseError) -> Arr:
    """Single-entry array error."""
    return Arr(NonEmpty.pure((index, error)))


def merge(left: ParseError, right: ParseError) -> ParseError:
    """
    Combine two independent failures into one.

    Object errors concatenate their field lists and array errors their
    index lists, left entries first. Any other pairing keeps ``left``.
    """
    if isinstance(left, Obj) and isinstance(right, Obj):
        return Obj(left.errors.concat(right.errors))
    if isinstance(left, Arr) and isinstance(right, Arr):
        return Arr(left.errors.concat(right.errors))
    return left


def error_paths(error: ParseError, path: Path = ()) -> list[tuple[Path, str]]:
    """
    Flatten an error tree into ``(path, message)`` pairs, one per leaf.

    Usage:
        error_paths(Obj(NonEmpty.pure(("age", MISSING_FIELD))))
        # [(("age",), "missing field")]
    """
    match error:
        case Val(kind=kind, value=value):
            return [(path, f"{kind.value}, got {_preview(value)}")]
        case Arr(errors=errors):
            flat: list[tuple[Path, str]] = []
            for index, child in errors:
                flat.extend(error_paths(child, (*path, index)))
            return flat
        case Obj(errors=errors):
            flat = []
            for name, reason in errors:
                if isinstance(reason, MissingField):
                    flat.append(((*path, name), "missing field"))
                else:
                    flat.extend(error_paths(reason.error, (*path, name)))
            return flat
    raise TypeError(f"Not a ParseError: {type(error).__name__}")


def format_path(path: Path) -> str:
    """Render a path as ``field 'a'[0]['b']``-style text."""
    if not path:
        return "value"
    head, *rest = path
    text = f"field {head!r}" if isinstance(head, str) else f"index {head}"
    for part in rest:
        text += f"[{part!r}]"
    return text


def format_error(error: ParseError) -> str:
    """
    Human readable report, one line per failing leaf.

    Example:
        field 'age': expected number, got "x"
    """
    return "\n".join(
        f"{format_path(path)}: {message}" for path, message in error_paths(error)
    )


def _preview(value: Any, limit: int = 50) -> str:
    try:
        text = json.dumps(value)
    except (TypeError, ValueError):
        text = repr(value)
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


class DecodeError(ValueError):
    """Raised by the strict entry points when decoding fails."""

    def __init__(self, error: ParseError):
        self.error = error
        super().__init__(format_error(error))
