# src/pyeither/config/core.py

"""Configuration schema and resolution for the safe-wrapping layer.

- ``Settings``: pydantic schema wall holding field types, defaults and rules
- ``FrozenConfig``: immutable runtime payload handed to ``safe_sync``/``safe_async``
- ``config_scope``: ambient override for a block of code, async-safe

Resolution precedence: defaults < programmatic overrides. Nothing is read from
the process environment or from files.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import logging
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from pyeither.errors import HINTS, ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping
    from types import TracebackType

log = logging.getLogger(__name__)

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic settings schema for configuration validation and defaults."""

    # Indentation used when a structured thrown payload is serialized
    json_indent: int = Field(default=2, ge=0)
    # Emit a DEBUG record whenever an exception is converted into Err
    log_caught: bool = Field(default=True)
    log_exc_info: bool = Field(default=False)

    model_config = {"extra": "forbid"}

    @field_validator("json_indent", mode="before")
    @classmethod
    def validate_indent_nonnegative(cls, v: Any) -> Any:
        """Keep a readable message on top of Field(ge=0)."""
        try:
            iv = int(v)
        except Exception:
            return v
        if iv < 0:
            raise ValueError("json_indent must be >= 0")
        return v


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Validated configuration consumed by the safe-wrapping functions."""

    json_indent: int = 2
    log_caught: bool = True
    log_exc_info: bool = False


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "pyeither_ambient_config", default=None
)


class ConfigScope:
    """Context manager that sets the ambient configuration until exit."""

    def __init__(self, cfg: FrozenConfig):
        self._token: contextvars.Token[FrozenConfig | None] | None = None
        self._cfg = cfg

    def __enter__(self) -> FrozenConfig:
        self._token = _AMBIENT.set(self._cfg)
        return self._cfg

    def __exit__(
        self,
        _: type[BaseException] | None,
        __: BaseException | None,
        ___: TracebackType | None,
    ) -> Literal[False]:
        if self._token is not None:
            _AMBIENT.reset(self._token)
        return False


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    Args:
        cfg_or_overrides: A FrozenConfig to use directly, or a mapping of
            overrides applied on top of the defaults.
        **overrides: Additional overrides, merged with a mapping argument.

    Yields:
        The FrozenConfig active inside the block.

    Example:
        with config_scope(json_indent=4, log_caught=False):
            result = safe_sync(load, error_constructor=LoadError)
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        combined = {**(cfg_or_overrides or {}), **overrides}
        cfg = resolve_config(overrides=combined)

    with ConfigScope(cfg):
        yield cfg


# --- Public resolution API ---


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Validate ``overrides`` on top of the defaults into a FrozenConfig.

    Raises:
        ConfigurationError: If an override fails validation.
    """
    merged: dict[str, Any] = {**_default_settings(), **(overrides or {})}

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        msg = err.get("msg") or ""
        # Drop pydantic's "Value error, " wrapper
        if msg.startswith("Value error, "):
            msg = msg[13:]
        field = ".".join(str(p) for p in err.get("loc", ()))
        raise ConfigurationError(
            f"Configuration validation failed: {field}: {msg}",
            hint=HINTS.get(field),
        ) from e

    frozen = FrozenConfig(**settings.model_dump())
    log.debug("Resolved configuration: %s", frozen)
    return frozen


_DEFAULT = FrozenConfig()


def current_config() -> FrozenConfig:
    """Return the ambient configuration, or the defaults outside a scope.    """
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient
    return _DEFAULT
