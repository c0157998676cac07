"""Lift the single-value Either algebra to collections.

Two policies are on offer. ``sequence`` and ``traverse`` fail fast: they stop
at the first ``Err`` and report only that one. ``collect_all_errors`` walks the
whole input and reports every failure, in order.

Only the public queries of the Either variants are used here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyeither.core import Either, Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = [
    "collect_all_errors",
    "partition",
    "sequence",
    "sequence_all",
    "traverse",
]


def sequence[T, E](eithers: Iterable[Either[T, E]]) -> Either[list[T], E]:
    """Collect every success value, or return the first failure.

    Example:
        >>> sequence([Ok(1), Err("a"), Err("b")])
        Err('a')
    """
    values: list[T] = []
    for either in eithers:
        if either.is_error():
            return Err(either.get_error())
        values.append(either.get_value())
    return Ok(values)


def partition[T, E](eithers: Iterable[Either[T, E]]) -> tuple[list[T], list[E]]:
    """Split into ``(success values, failure payloads)``, each in input order."""
    oks: list[T] = []
    errors: list[E] = []
    for either in eithers:
        if either.is_ok():
            oks.append(either.get_value())
        else:
            errors.append(either.get_error())
    return oks, errors


def traverse[T, U, E](
    values: Iterable[T], fn: Callable[[T], Either[U, E]]
) -> Either[list[U], E]:
    """Map ``fn`` over *values* and sequence the results.

    ``fn`` is applied left to right and is not called again after the first
    failure.
    """
    return sequence(fn(value) for value in values)


def collect_all_errors[T, E](
    eithers: Iterable[Either[T, E]],
) -> Either[list[T], list[E]]:
    """Return every failure payload if any element failed, else every value.

    Example:
        >>> collect_all_errors([Ok(1), Err("a"), Err("b")])
        Err(['a', 'b'])
    """
    oks, errors = partition(eithers)
    if errors:
        return Err(errors)
    return Ok(oks)


# Earlier name of collect_all_errors
sequence_all = collect_all_errors
