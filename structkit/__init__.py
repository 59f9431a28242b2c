"""
structkit - Composable validators ("structs") returning Ok/Err results.

Usage:
    from structkit import object, optional, string, number, unwrap

    user = object({
        "name": string(),
        "age": optional(number()),
    })

    result = user(payload)           # Ok({...}) or Err(StructError)
    data = unwrap(result)            # raises StructError on Err
"""

from .context import (
    ValidationConfig,
    current_config,
    is_strict,
    validation_context,
)
from .core import Struct, chain, map, refine
from .result import err, is_err, is_ok, ok, unwrap, unwrap_or
from .schema import to_pydantic
from .structs import (
    array,
    boolean,
    date,
    function,
    list_of,
    nullable,
    number,
    object,
    optional,
    string,
)
from .types import MISSING, Err, Ok, Path, Result, StructError

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "StructError",
    "Path",
    "MISSING",
    # Result algebra
    "ok",
    "err",
    "is_ok",
    "is_err",
    "unwrap",
    "unwrap_or",
    # Core
    "Struct",
    "map",
    "chain",
    "refine",
    # Structs
    "string",
    "number",
    "boolean",
    "date",
    "array",
    "function",
    "optional",
    "nullable",
    "object",
    "list_of",
    # Config
    "ValidationConfig",
    "current_config",
    "validation_context",
    "is_strict",
    # Schema
    "to_pydantic",
]
