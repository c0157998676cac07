"""Exception hierarchy for pyeither.

Modeled failures travel inside ``Err`` and are never raised. The classes here
signal defects: a call that contradicts the variant it was made on, a thrown
value that cannot be described, or invalid configuration.
"""

from __future__ import annotations

from typing import Any


class EitherError(Exception):
    """Base exception for all pyeither errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is attached."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class InvalidStateAccess(EitherError):
    """A payload was extracted from the wrong variant."""


class SerializationError(EitherError, ValueError):
    """A thrown value could not be serialized into an error message."""


class ConfigurationError(EitherError):
    """Configuration validation or resolution failed."""


class RejectedError(EitherError):
    """Raised when awaiting an ``Err`` whose payload is not an exception.

    The original payload is kept on ``error``.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(f"Either resolved to an error: {error!r}")
        self.error = error


HINTS = {
    "cyclic": (
        "Raise an exception carrying a message or an acyclic payload "
        "instead of a self-referential structure."
    ),
    "json_indent": "json_indent controls how thrown payloads are serialized; use 0 or more.",
}
