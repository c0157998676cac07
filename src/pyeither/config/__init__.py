# src/pyeither/config/__init__.py

"""Configuration for the safe-wrapping layer.

Validate once, freeze, then flow: programmatic overrides are validated into an
immutable FrozenConfig, which ``safe_sync``/``safe_async`` read either
explicitly or from the ambient ``config_scope``.
"""

# ruff: noqa: I001

from .core import (
    ConfigScope,
    FrozenConfig,
    Settings,
    config_scope,
    current_config,
    resolve_config,
)

__all__ = [  # noqa: RUF022
    "resolve_config",
    "current_config",
    "FrozenConfig",
    "config_scope",
    "ConfigScope",
    "Settings",
]
