"""
Copy helpers for validated values.
"""

from typing import Any

from .predicates import is_array, is_object


def clone_value(value: Any, deep: bool = False) -> Any:
    """
    Copy lists, tuples and mappings; return anything else as is.

    Shallow by default: only the outer container is new. With deep=True,
    nested lists, tuples and mappings are copied recursively. Leaf values
    (strings, numbers, dates, arbitrary objects) are always shared.

    Mappings come back as plain dicts.
    """
    if is_array(value):
        items = [clone_value(item, deep=True) for item in value] if deep else list(value)
        return tuple(items) if isinstance(value, tuple) else items

    if is_object(value):
        if deep:
            return {key: clone_value(item, deep=True) for key, item in value.items()}
        return dict(value)

    return value
