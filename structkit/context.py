"""
Validation configuration, scoped with a context manager.

Structs read the active ValidationConfig when they run, not when they are
built, so one struct can be applied under different settings.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """
    Settings read by structs at validation time.

    Attributes:
        strict: object() rejects input keys that are not part of its shape
    """

    strict: bool = False


_config: ContextVar[ValidationConfig] = ContextVar(
    "validation_config", default=ValidationConfig()
)


def current_config() -> ValidationConfig:
    """Return the configuration active in this context."""
    return _config.get()


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return current_config().strict


@contextmanager
def validation_context(*, strict: bool | None = None):
    """
    Override validation settings within a block.

    Args:
        strict: If True, object() fails on input keys missing from its shape
               instead of silently dropping them. None keeps the enclosing
               setting.

    Example:
        from structkit import object, string, validation_context

        user = object({"name": string()})

        # Normal: extra keys are ignored
        user({"name": "Alice", "admin": True})  # Ok({"name": "Alice"})

        # Strict: extra keys fail
        with validation_context(strict=True):
            user({"name": "Alice", "admin": True})  # Err(... path=("admin",))
    """
    config = current_config()
    if strict is not None:
        config = replace(config, strict=strict)

    token = _config.set(config)
    try:
        yield config
    finally:
        _config.reset(token)
