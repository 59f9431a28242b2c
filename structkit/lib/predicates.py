"""
Type guards used by the primitive structs.
"""

import math
from collections.abc import Mapping
from datetime import date
from typing import Any

from ..types import MISSING


def is_string(value: Any) -> bool:
    """Check if value is a string."""
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Check if value is a finite int or float (bools excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_boolean(value: Any) -> bool:
    """Check if value is a boolean."""
    return isinstance(value, bool)


def is_undefined(value: Any) -> bool:
    """Check if value is the MISSING sentinel."""
    return value is MISSING


def is_defined(value: Any) -> bool:
    """Check if value is anything but MISSING."""
    return not is_undefined(value)


def is_date(value: Any) -> bool:
    """Check if value is a date or datetime."""
    return isinstance(value, date)


def is_array(value: Any) -> bool:
    """Check if value is a list or tuple."""
    return isinstance(value, (list, tuple))


def is_null(value: Any) -> bool:
    """Check if value is None."""
    return value is None


def is_object(value: Any) -> bool:
    """Check if value is a mapping."""
    return isinstance(value, Mapping)


def is_not_empty_object(value: Any) -> bool:
    return is_object(value) and len(value) > 0


def is_empty_object(value: Any) -> bool:
    return is_object(value) and len(value) == 0


def is_function(value: Any) -> bool:
    """Check if value is callable."""
    return callable(value)
