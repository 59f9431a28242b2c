"""
Type definitions for structkit.

Provides the Result type (Ok/Err), the MISSING sentinel, and StructError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


class _Missing(Enum):
    """
    Sentinel for an absent value (key or argument not supplied).

    Kept distinct from None so that "not supplied" and "supplied as null"
    can be validated differently (see optional() and nullable()).
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type aliases
Result = Union[Ok[T], Err[E]]
Path = tuple[Union[str, int], ...]


class StructError(ValueError):
    """
    A failed validation.

    Attributes:
        message: What check failed (caller label or a per-type default)
        input: The offending leaf value, not the root input
        path: Keys/indices from the root input down to the offending value
    """

    def __init__(self, message: str, input: Any = MISSING, path: Path = ()):
        super().__init__(message)
        self.message = message
        self.input = input
        self.path: Path = tuple(path)

    def prefixed(self, key: str | int) -> StructError:
        """Return a copy of this error located one level deeper under `key`."""
        return StructError(self.message, self.input, (key, *self.path))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructError):
            return NotImplemented
        return (self.message, self.input, self.path) == (
            other.message,
            other.input,
            other.path,
        )

    def __hash__(self) -> int:
        return hash((self.message, self.path))

    def __repr__(self) -> str:
        return (
            f"StructError(message={self.message!r}, input={self.input!r}, "
            f"path={self.path!r})"
        )

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.message} at {format_path(self.path)}"


def format_path(path: Path) -> str:
    """Render a path as `a.b[0].c`."""
    out = ""
    for index, segment in enumerate(path):
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif index == 0:
            out = segment
        else:
            out += f".{segment}"
    return out
