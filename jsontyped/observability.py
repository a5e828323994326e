"""
Package logger.

The library is silent by default; applications attach their own handlers
to the ``jsontyped`` logger.
"""

from __future__ import annotations

import logging
from typing import Final

_LOGGER: Final[logging.Logger] = logging.getLogger("jsontyped")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""
    return _LOGGER
