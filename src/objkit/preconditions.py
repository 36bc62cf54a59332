"""Argument checks used by the objkit helpers."""

import logging
from typing import TypeVar

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check_not_null(
    reference: T | None, message: str | None = None, *, argument: str | None = None
) -> T:
    """Ensure that ``reference`` is not ``None``.

    Args:
        reference: The value to check.
        message: Optional error message used if the check fails.
        argument: Optional name of the parameter being checked, recorded on the
            raised error and used to build a default message.

    Returns:
        ``reference``, unchanged.

    Raises:
        InvalidArgumentError: If ``reference`` is ``None``.
    """
    if reference is None:
        logger.debug("Null check failed (argument=%s)", argument or "<unnamed>")
        raise InvalidArgumentError(message, argument=argument)
    return reference
