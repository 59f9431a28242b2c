from .clone import clone_value
from .predicates import (
    is_array,
    is_boolean,
    is_date,
    is_defined,
    is_empty_object,
    is_function,
    is_not_empty_object,
    is_null,
    is_number,
    is_object,
    is_string,
    is_undefined,
)

__all__ = [
    "clone_value",
    "is_array",
    "is_boolean",
    "is_date",
    "is_defined",
    "is_empty_object",
    "is_function",
    "is_not_empty_object",
    "is_null",
    "is_number",
    "is_object",
    "is_string",
    "is_undefined",
]
