"""
Pydantic interop for structkit.

Provides to_pydantic(), compiling an object() struct into a model class.
"""

from __future__ import annotations

from typing import Any
from typing import Optional as TypingOptional

from pydantic import create_model

from .core import Struct


def to_pydantic(name: str, struct: Struct[Any]) -> type:
    """
    Compile an object struct to a Pydantic model.

    Args:
        name: Name of the generated model class
        struct: A struct built with object()

    Returns:
        A Pydantic BaseModel subclass

    Fields built with map() are typed Any. date() fields accept both dates
    and datetimes, as the struct does.

    Usage:
        User = to_pydantic("User", object({
            "name": string(),
            "email": optional(string()),
        }))
        user = User(name="Alice")
    """
    if (
        not isinstance(struct, Struct)
        or struct.kind != "object"
        or struct.shape is None
    ):
        raise TypeError("to_pydantic() requires a struct built with object()")

    fields: dict[str, Any] = {}

    for key, field_struct in struct.shape.items():
        fields[key] = _extract_pydantic_field(f"{name}_{key}", field_struct)

    return create_model(name, **fields)


def _extract_pydantic_field(name: str, s: Any) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a struct."""
    match s:
        case Struct(kind="optional", inner=inner):
            field_type, _ = _extract_pydantic_field(name, inner)
            return (TypingOptional[field_type], None)
        case _:
            return (_extract_type(name, s), ...)


def _extract_type(name: str, s: Any) -> Any:
    """Extract the Pydantic annotation for a struct."""
    match s:
        case Struct(kind="object"):
            return to_pydantic(name.title().replace("_", ""), s)
        case Struct(kind="nullable", inner=inner):
            return TypingOptional[_extract_type(name, inner)]
        case Struct(kind="optional", inner=inner):
            return TypingOptional[_extract_type(name, inner)]
        case Struct(kind="list", inner=inner):
            return list[_extract_type(name, inner)]  # type: ignore[misc]
        case Struct(kind="chain" | "refine", inner=Struct() as inner):
            return _extract_type(name, inner)
        case Struct(type_hint=t):
            return t

    return Any
