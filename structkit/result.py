"""
Result constructors, predicates and unwrap helpers.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .types import Err, Ok, Result, StructError

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger(__name__)


def ok(value: T) -> Ok[T]:
    """Create a new Ok result."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Create a new Err result."""
    return Err(error)


def is_ok(result: Result[Any, Any]) -> bool:
    """Check if result is an Ok."""
    return isinstance(result, Ok)


def is_err(result: Result[Any, Any]) -> bool:
    """Check if result is an Err."""
    return not is_ok(result)


def unwrap(result: Result[T, Any]) -> T:
    """
    Return the inner value of an Ok.

    Raises:
        The carried error if the result is an Err. Errors that are not
        exceptions are wrapped in a StructError.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            logger.debug("unwrap() called on Err: %r", error)
            if isinstance(error, BaseException):
                raise error
            raise StructError(str(error), error)

    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def unwrap_or(result: Result[T, Any], default: T) -> T:
    """Return the inner value of an Ok, or `default` if the result is an Err."""
    return result.value if isinstance(result, Ok) else default
