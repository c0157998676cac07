"""pyeither: an explicit success-or-failure value for Python.

Public API:
    - Ok / Err: the two variants of ``Either``
    - safe_sync() / safe_async(): turn raising operations into Either values
    - from_nullable() / from_predicate(): build Either values from plain values
    - sequence() / partition() / traverse() / collect_all_errors(): collections
"""

from __future__ import annotations

import logging

from pyeither.combinators import (
    collect_all_errors,
    partition,
    sequence,
    sequence_all,
    traverse,
)
from pyeither.config import (
    FrozenConfig,
    Settings,
    config_scope,
    current_config,
    resolve_config,
)
from pyeither.convert import from_nullable, from_predicate
from pyeither.core import Either, Err, Ok, is_either
from pyeither.errors import (
    ConfigurationError,
    EitherError,
    InvalidStateAccess,
    RejectedError,
    SerializationError,
)
from pyeither.safe import error_message, safe_async, safe_sync

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pyeither")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("pyeither").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Either",
    "EitherError",
    "Err",
    "FrozenConfig",
    "InvalidStateAccess",
    "Ok",
    "RejectedError",
    "SerializationError",
    "Settings",
    "collect_all_errors",
    "config_scope",
    "current_config",
    "error_message",
    "from_nullable",
    "from_predicate",
    "is_either",
    "partition",
    "resolve_config",
    "safe_async",
    "safe_sync",
    "sequence",
    "sequence_all",
    "traverse",
]
