"""
Built-in structs for structkit.

Primitive constructors validate a single value against a predicate.
optional(), nullable(), object() and list_of() compose smaller structs and
locate child errors by prefixing the key or index they were found under.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date as _date
from datetime import datetime as _datetime
from typing import Any, Callable, Union

from .context import current_config
from .core import Struct
from .lib.predicates import (
    is_array,
    is_boolean,
    is_date,
    is_function,
    is_null,
    is_number,
    is_object,
    is_string,
    is_undefined,
)
from .types import MISSING, Err, Ok, Result, StructError

logger = logging.getLogger(__name__)

UNEXPECTED_KEY = "Unexpected key"


def _primitive(
    predicate: Callable[[Any], bool], label: str | None, default: str, type_hint: Any
) -> Struct[Any]:
    message = default if label is None else label

    def run(value: Any) -> Result[Any, StructError]:
        if predicate(value):
            return Ok(value)
        return Err(StructError(message, value))

    return Struct(fn=run, kind="primitive", type_hint=type_hint)


def string(label: str | None = None) -> Struct[str]:
    """Validate that the input is a string."""
    return _primitive(is_string, label, "Expected a string", str)


def number(label: str | None = None) -> Struct[int | float]:
    """
    Validate that the input is a finite number.

    NaN, infinities and bools are rejected.
    """
    return _primitive(is_number, label, "Expected a number", Union[int, float])


def boolean(label: str | None = None) -> Struct[bool]:
    """Validate that the input is a boolean."""
    return _primitive(is_boolean, label, "Expected a boolean", bool)


def date(label: str | None = None) -> Struct[_date]:
    """Validate that the input is a date or datetime."""
    return _primitive(
        is_date, label, "Expected a date", Union[_date, _datetime]
    )


def array(label: str | None = None) -> Struct[list[Any]]:
    """Validate that the input is a list or tuple, without checking items."""
    return _primitive(is_array, label, "Expected an array", list[Any])


def function(label: str | None = None) -> Struct[Callable[..., Any]]:
    """Validate that the input is callable."""
    return _primitive(is_function, label, "Expected a function", Any)


def optional(inner: Struct[Any]) -> Struct[Any]:
    """
    Accept an absent value, validate if present.

    Usage:
        optional(string())       # MISSING or valid string
    """

    def run(value: Any) -> Result[Any, StructError]:
        if is_undefined(value):
            return Ok(MISSING)
        return inner(value)

    return Struct(
        fn=run, kind="optional", type_hint=getattr(inner, "type_hint", Any), inner=inner
    )


def nullable(inner: Struct[Any]) -> Struct[Any]:
    """
    Accept None, validate otherwise.

    Usage:
        nullable(number())       # None or valid number
    """

    def run(value: Any) -> Result[Any, StructError]:
        if is_null(value):
            return Ok(None)
        return inner(value)

    return Struct(
        fn=run, kind="nullable", type_hint=getattr(inner, "type_hint", Any), inner=inner
    )


def object(shape: Mapping[str, Struct[Any]], label: str | None = None) -> Struct[dict]:
    """
    Validate a mapping field by field.

    Fields are checked in shape order and validation stops at the first
    failing field; its error is returned with the field name prepended to
    its path. The output is a new dict holding only shape keys. Absent
    optional fields are left out of it.

    Usage:
        user = object({
            "name": string(),
            "age": optional(number()),
        }, "Expected a user")
    """
    if not isinstance(shape, Mapping):
        raise TypeError(f"Shape must be a mapping, got {type(shape).__name__}")

    message = "Expected an object" if label is None else label
    fields = dict(shape)

    def run(value: Any) -> Result[dict, StructError]:
        if not is_object(value):
            return Err(StructError(message, value))

        output: dict[str, Any] = {}
        for key, struct in fields.items():
            result = struct(value.get(key, MISSING))
            if isinstance(result, Err):
                logger.debug("Field %r failed: %s", key, result.error.message)
                return Err(result.error.prefixed(key))
            if result.value is not MISSING:
                output[key] = result.value

        if current_config().strict:
            for key, extra in value.items():
                if key not in fields:
                    logger.debug("Unexpected key %r in strict mode", key)
                    return Err(StructError(UNEXPECTED_KEY, extra, (key,)))

        return Ok(output)

    return Struct(fn=run, kind="object", type_hint=dict, shape=fields)


def list_of(item: Struct[Any], label: str | None = None) -> Struct[list]:
    """
    Validate a list or tuple item by item.

    Stops at the first failing item and prepends its index to the error path.

    Usage:
        tags = list_of(string())
    """
    message = "Expected an array" if label is None else label

    def run(value: Any) -> Result[list, StructError]:
        if not is_array(value):
            return Err(StructError(message, value))

        output = []
        for index, element in enumerate(value):
            result = item(element)
            if isinstance(result, Err):
                logger.debug("Item %d failed: %s", index, result.error.message)
                return Err(result.error.prefixed(index))
            output.append(result.value)

        return Ok(output)

    return Struct(fn=run, kind="list", type_hint=list, inner=item)
