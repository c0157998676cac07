"""Test helpers (small, reusable doubles)."""

from __future__ import annotations

from dataclasses import dataclass


class DomainError(Exception):
    """Error type handed to ``error_constructor`` in tests."""


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def identity[T](value: T) -> T:
    return value
