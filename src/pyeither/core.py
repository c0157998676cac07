"""The Either value type.

``Either[T, E]`` is a sealed pair of frozen variants: ``Ok`` carries a success
payload and ``Err`` carries a failure payload. The variant is the
discriminant, so a value in neither state cannot be built. Every operation
returns a new value (or, where documented, the receiver itself); nothing
mutates.

Callbacks handed to the combinators are never guarded. An exception raised by
``fn`` in ``map(fn)`` propagates to the caller of ``map``; converting
exceptions into ``Err`` is the job of :mod:`pyeither.safe`.

Example:
    >>> Ok(5).map(lambda x: x * 2).get_or_else(0)
    10
    >>> match Err("boom").recover(len):
    ...     case Ok(value):
    ...         print(value)
    4
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine
import dataclasses
from typing import Any, Literal, Never, TypeIs

from pyeither.errors import InvalidStateAccess, RejectedError

__all__ = ["Either", "Err", "Ok", "is_either"]


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """The success variant."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    # --- Queries ---

    def is_ok(self) -> Literal[True]:
        return True

    def is_error(self) -> Literal[False]:
        return False

    # --- Extraction ---

    def get_value(self) -> T:
        return self.value

    def get_error(self) -> Never:
        raise InvalidStateAccess("Cannot access error in a non-Error instance")

    def get_or_else(self, default: T) -> T:
        del default
        return self.value

    def fold[R](
        self, *, on_ok: Callable[[T], R], on_error: Callable[[Any], R]
    ) -> R:
        """Return ``on_ok(value)``; ``on_error`` is not called."""
        del on_error
        return on_ok(self.value)

    def to_optional(self) -> T | None:
        return self.value

    def to_awaitable(self) -> Coroutine[Any, Any, T]:
        """Return a coroutine that resolves to the success payload."""

        async def resolve() -> T:
            return self.value

        return resolve()

    # --- Transformation ---

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def flat_map[U, F](self, fn: Callable[[T], Either[U, F]]) -> Either[U, F]:
        return fn(self.value)

    def map_error(self, fn: Callable[[Any], Any]) -> Ok[T]:
        del fn
        return self

    def filter[F](self, predicate: Callable[[T], bool], error_if_fails: F) -> Either[T, F]:
        """Keep this value when ``predicate`` holds, else fail with ``error_if_fails``."""
        if predicate(self.value):
            return self
        return Err(error_if_fails)

    find = flat_map

    def swap(self) -> Err[T]:
        return Err(self.value)

    # --- Combination ---

    def zip[U, F](self, other: Either[U, F]) -> Either[tuple[T, U], F]:
        if isinstance(other, Err):
            return other
        return Ok((self.value, other.value))

    def zip_with[U, F, R](
        self, other: Either[U, F], combine: Callable[[T, U], R]
    ) -> Either[R, F]:
        return self.zip(other).map(lambda pair: combine(pair[0], pair[1]))

    # --- Recovery ---

    def recover(self, fn: Callable[[Any], T]) -> Ok[T]:
        del fn
        return Ok(self.value)

    def recover_with(self, fn: Callable[[Any], Either[T, Any]]) -> Ok[T]:
        del fn
        return self

    # --- Side effects ---

    def tap(self, fn: Callable[[T], object]) -> Ok[T]:
        fn(self.value)
        return self

    def tap_error(self, fn: Callable[[Any], object]) -> Ok[T]:
        del fn
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """The failure variant. The payload may be any value, not only exceptions."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    # --- Queries ---

    def is_ok(self) -> Literal[False]:
        return False

    def is_error(self) -> Literal[True]:
        return True

    # --- Extraction ---

    def get_value(self) -> Never:
        raise InvalidStateAccess("Cannot access value in a non-Ok instance")

    def get_error(self) -> E:
        return self.error

    def get_or_else[T](self, default: T) -> T:
        return default

    def fold[R](
        self, *, on_ok: Callable[[Any], R], on_error: Callable[[E], R]
    ) -> R:
        """Return ``on_error(error)``; ``on_ok`` is not called."""
        del on_ok
        return on_error(self.error)

    def to_optional(self) -> None:
        return None

    def to_awaitable(self) -> Coroutine[Any, Any, Never]:
        """Return a coroutine that raises the failure payload when awaited.

        Exception payloads are raised as they are; anything else is raised
        wrapped in ``RejectedError``.
        """

        async def resolve() -> Never:
            if isinstance(self.error, BaseException):
                raise self.error
            raise RejectedError(self.error)

        return resolve()

    # --- Transformation ---

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        del fn
        return self

    def flat_map(self, fn: Callable[[Any], Any]) -> Err[E]:
        del fn
        return self

    def map_error[F](self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def filter[F](self, predicate: Callable[[Any], bool], error_if_fails: F) -> Err[F]:
        """Fail with ``error_if_fails``.

        The predicate is not consulted and the current error is replaced.
        """
        del predicate
        return Err(error_if_fails)

    find = flat_map

    def swap(self) -> Ok[E]:
        return Ok(self.error)

    # --- Combination ---

    def zip(self, other: Either[Any, Any]) -> Err[E]:
        del other
        return self

    def zip_with(
        self, other: Either[Any, Any], combine: Callable[[Any, Any], Any]
    ) -> Err[E]:
        del other, combine
        return self

    # --- Recovery ---

    def recover[T](self, fn: Callable[[E], T]) -> Ok[T]:
        return Ok(fn(self.error))

    def recover_with[T, F](self, fn: Callable[[E], Either[T, F]]) -> Either[T, F]:
        return fn(self.error)

    # --- Side effects ---

    def tap(self, fn: Callable[[Any], object]) -> Err[E]:
        del fn
        return self

    def tap_error(self, fn: Callable[[E], object]) -> Err[E]:
        fn(self.error)
        return self


type Either[T, E] = Ok[T] | Err[E]


def is_either(obj: object) -> TypeIs[Ok[Any] | Err[Any]]:
    """Return True when *obj* is one of the two Either variants."""
    return isinstance(obj, (Ok, Err))
