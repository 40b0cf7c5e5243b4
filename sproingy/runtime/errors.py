"""Shared runtime exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Bounded set tolerated at window/renderer backend seams.
RecoverableRuntimeErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_RUNTIME_ERRORS: RecoverableRuntimeErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
    ImportError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.DEBUG,
) -> None:
    """Log a tolerated exception with its traceback."""
    logger.log(level, message, *args, exc_info=True)
