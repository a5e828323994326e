"""
Entry points for running decoders.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from .context import is_strict
from .errors import DecodeError, format_error
from .observability import get_logger
from .types import DecodeResult, Decoder, Err

T = TypeVar("T")

logger = get_logger()


def decode(decoder: Decoder[T], value: Any) -> DecodeResult[T]:
    """
    Run ``decoder`` on an already parsed JSON value.

    Returns:
        The decoder's result

    Raises:
        DecodeError: In strict mode, if decoding fails
        TypeError: If ``decoder`` is not callable

    Examples:
        decode(field("name", string), {"name": "Ada"})   # Ok("Ada")
        decode(list_of(integer), ["a"])                  # Err(Arr(...))
    """
    if not callable(decoder):
        raise TypeError(f"Decoder must be callable, got {type(decoder).__name__}")

    result = decoder(value)

    if isinstance(result, Err):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("decode failed: %s", format_error(result.error))
        if is_strict():
            logger.debug("strict mode: raising DecodeError")
            raise DecodeError(result.error)

    return result


def decode_json(decoder: Decoder[T], text: str | bytes) -> DecodeResult[T]:
    """
    Parse JSON text with the standard ``json`` module, then :func:`decode`.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON
        DecodeError: In strict mode, if decoding fails
    """
    return decode(decoder, json.loads(text))
