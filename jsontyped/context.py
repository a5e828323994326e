"""
Decoding configuration scoped to the current context.

Strict mode changes how the entry points in :mod:`jsontyped.core` report a
failed decode: a returned ``Err`` becomes a raised ``DecodeError``. The
setting lives in a ``ContextVar``, so threads and asyncio tasks each see
their own value.
"""

from contextlib import contextmanager
from contextvars import ContextVar

_strict_mode: ContextVar[bool] = ContextVar("jsontyped_strict_mode", default=False)


def is_strict() -> bool:
    """True inside ``decoding_context(strict=True)``."""
    return _strict_mode.get()


@contextmanager
def decoding_context(*, strict: bool = False):
    """
    Scope strict mode to a block.

    Args:
        strict: If True, decode() and decode_json() raise DecodeError
               carrying the ParseError instead of returning Err. Individual
               decoders never read this flag; calling one directly always
               returns a result, so error accumulation is unaffected.

    Example:
        from jsontyped import decode, decoding_context, field, integer

        age = field("age", integer)

        decode(age, {})        # Err(Obj([("age", MissingField())]))

        with decoding_context(strict=True):
            decode(age, {})    # DecodeError: field 'age': missing field
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
