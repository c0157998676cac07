"""Adapt raising operations into Either values.

``safe_sync`` and ``safe_async`` are the only places in the library that
catch exceptions. A caught exception is described as a message string by
``error_message`` and handed to the caller's ``error_constructor``; the result
becomes the ``Err`` payload.

Only ``Exception`` subclasses are converted. ``asyncio.CancelledError``,
``KeyboardInterrupt`` and ``SystemExit`` keep propagating so cancellation
stays with the caller's event loop.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, overload

from pydantic import BaseModel
from pydantic_core import to_json

from pyeither.config import FrozenConfig, current_config
from pyeither.core import Either, Err, Ok, is_either
from pyeither.errors import HINTS, SerializationError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

__all__ = ["error_message", "safe_async", "safe_sync"]

log = logging.getLogger(__name__)

_STRUCTURED_SEQUENCES = (list, tuple, set, frozenset)


def _is_structured(value: object) -> bool:
    if isinstance(value, (Mapping, BaseModel, *_STRUCTURED_SEQUENCES)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _serialize(value: object, indent: int) -> str:
    try:
        # indent=0 means compact output
        raw = to_json(value, indent=indent or None, fallback=str)
    except (ValueError, RecursionError) as exc:
        raise SerializationError(
            f"Cannot serialize thrown value of type {type(value).__name__}: {exc}",
            hint=HINTS["cyclic"],
        ) from exc
    return raw.decode()


def error_message(value: object, *, indent: int = 2) -> str:
    """Describe a thrown value as a message string.

    Rules, first match wins:

    1. An exception whose only argument is a string is described by that
       string, and one whose only argument is a structured object by that
       object; any other exception by ``str(exc)``.
    2. A string is used verbatim.
    3. A structured object (mapping, list, tuple, set, dataclass instance,
       pydantic model) is serialized to JSON indented by ``indent`` spaces.
    4. Anything else is converted with ``str``.

    Raises:
        SerializationError: If a structured value is self-referential.
    """
    if isinstance(value, BaseException):
        if len(value.args) == 1 and isinstance(value.args[0], str):
            return value.args[0]
        if len(value.args) == 1 and _is_structured(value.args[0]):
            value = value.args[0]
        else:
            return str(value)
    if isinstance(value, str):
        return value
    if _is_structured(value):
        return _serialize(value, indent)
    return str(value)


def _describe(operation: object) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


def _to_error[E](
    exc: Exception,
    operation: object,
    error_constructor: Callable[[str], E],
    config: FrozenConfig | None,
) -> E:
    cfg = config if config is not None else current_config()
    message = error_message(exc, indent=cfg.json_indent)
    if cfg.log_caught:
        log.debug(
            "Operation %s raised %s: %s",
            _describe(operation),
            type(exc).__name__,
            message,
            exc_info=exc if cfg.log_exc_info else None,
        )
    return error_constructor(message)


def safe_sync[T, E](
    operation: Callable[[], T],
    *,
    error_constructor: Callable[[str], E],
    config: FrozenConfig | None = None,
) -> Either[T, E]:
    """Run ``operation`` now and capture its outcome.

    Args:
        operation: Zero-argument callable to execute.
        error_constructor: Builds the failure payload from a message string,
            usually an exception class.
        config: Explicit configuration; defaults to ``current_config()``.

    Returns:
        ``Ok(result)`` on a normal return, else ``Err(error_constructor(msg))``.

    Example:
        result = safe_sync(lambda: int(raw), error_constructor=ParseError)
    """
    try:
        value = operation()
    except Exception as exc:
        return Err(_to_error(exc, operation, error_constructor, config))
    return Ok(value)


@overload
async def safe_async[U, F, E](
    operation: Callable[[], Awaitable[Either[U, F]]],
    *,
    error_constructor: Callable[[str], E],
    config: FrozenConfig | None = None,
) -> Either[U, F | E]: ...


@overload
async def safe_async[T, E](
    operation: Callable[[], Awaitable[T]],
    *,
    error_constructor: Callable[[str], E],
    config: FrozenConfig | None = None,
) -> Either[T, E]: ...


async def safe_async(
    operation: Callable[[], Awaitable[Any]],
    *,
    error_constructor: Callable[[str], Any],
    config: FrozenConfig | None = None,
) -> Either[Any, Any]:
    """Await ``operation()`` and capture its outcome.

    An awaited value that is already an Either is returned as is, so an
    operation written in Either style is not wrapped twice. Exceptions raised
    while calling ``operation`` or while awaiting its result both become
    ``Err(error_constructor(msg))``.

    Example:
        user = await safe_async(lambda: client.get_user(uid), error_constructor=FetchError)
    """
    try:
        value = await operation()
    except Exception as exc:
        return Err(_to_error(exc, operation, error_constructor, config))
    if is_either(value):
        return value
    return Ok(value)
