"""Build Either values from plain Python values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyeither.core import Either, Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["from_nullable", "from_predicate"]

NULL_VALUE_MESSAGE = "Value is null or undefined"


def from_nullable[T](value: T | None) -> Either[T, ValueError]:
    """Return ``Ok(value)`` unless *value* is None.

    Falsy values such as ``0``, ``""`` and ``False`` are present and stay Ok.
    """
    if value is None:
        return Err(ValueError(NULL_VALUE_MESSAGE))
    return Ok(value)


def from_predicate[T, E](
    value: T, predicate: Callable[[T], bool], error: E
) -> Either[T, E]:
    """Return ``Ok(value)`` when ``predicate(value)`` holds, else ``Err(error)``."""
    return Ok(value) if predicate(value) else Err(error)
