"""
Core Struct class and functional composition over the success channel.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .types import MISSING, Err, Ok, Result, StructError

T = TypeVar("T")
O = TypeVar("O")

StructFn = Callable[[Any], Result[Any, StructError]]


@dataclass(frozen=True, slots=True)
class Struct(Generic[T]):
    """
    Immutable validator.

    Wraps a function from an untrusted input to a Result. The remaining
    fields only describe how the struct was built; they are read by
    to_pydantic() and never during validation.
    """

    fn: StructFn
    kind: str = "custom"
    type_hint: Any = Any
    inner: Struct[Any] | None = None
    shape: Mapping[str, Struct[Any]] | None = None

    def __call__(self, value: Any = MISSING) -> Result[T, StructError]:
        """
        Validate a value. Calling with no argument validates absence.

        Returns:
            Ok(value) if validation passes
            Err(StructError) if validation fails
        """
        return self.fn(value)


def map(
    struct: Struct[T], map_fn: Callable[[T], Result[O, StructError]]
) -> Struct[O]:
    """
    Feed the output of `struct` into another struct.

    `map_fn` receives the validated value and may itself fail. It is not
    called when `struct` fails. The output type is not known to the
    struct, so to_pydantic() types mapped fields as Any.

    Usage:
        port = map(string(), parse_port)
    """

    def run(value: Any) -> Result[O, StructError]:
        result = struct(value)
        return map_fn(result.value) if isinstance(result, Ok) else result

    return Struct(fn=run, kind="map")


def chain(struct: Struct[T], *fns: Callable[[T], T]) -> Struct[T]:
    """
    Feed the output of `struct` through functions that accept and return the
    same type, left to right.

    The functions cannot fail; use map() or refine() for fallible steps.

    Usage:
        name = chain(string(), str.strip, str.lower)
    """

    def run(value: Any) -> Result[T, StructError]:
        result = struct(value)
        if isinstance(result, Err):
            return result
        out = result.value
        for fn in fns:
            out = fn(out)
        return Ok(out)

    return Struct(
        fn=run,
        kind="chain",
        type_hint=getattr(struct, "type_hint", Any),
        inner=struct if isinstance(struct, Struct) else None,
    )


def refine(
    struct: Struct[T], predicate: Callable[[T], bool], message: str
) -> Struct[T]:
    """
    Add a check on the validated value.

    Usage:
        port = refine(number(), lambda n: 0 < n < 65536, "Port out of range")
    """

    def run(value: Any) -> Result[T, StructError]:
        result = struct(value)
        if isinstance(result, Err):
            return result
        if not predicate(result.value):
            return Err(StructError(message, result.value))
        return result

    return Struct(
        fn=run,
        kind="refine",
        type_hint=getattr(struct, "type_hint", Any),
        inner=struct if isinstance(struct, Struct) else None,
    )
