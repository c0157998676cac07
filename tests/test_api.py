"""Public surface of the top-level package."""

from __future__ import annotations

import logging

import pytest

import pyeither

pytestmark = [pytest.mark.unit, pytest.mark.smoke]


def test_all_exports_resolve() -> None:
    for name in pyeither.__all__:
        assert hasattr(pyeither, name), name


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("pyeither").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_version_is_a_string() -> None:
    assert isinstance(pyeither.__version__, str)


def test_end_to_end_validation_pipeline() -> None:
    """Parse, validate and combine several inputs, collecting every failure."""

    def parse_port(raw: str) -> pyeither.Either[int, str]:
        return pyeither.safe_sync(lambda: int(raw), error_constructor=str).flat_map(
            lambda p: pyeither.from_predicate(
                p, lambda q: 0 < q < 65536, f"port out of range: {raw}"
            )
        )

    ok_ports = [parse_port(raw) for raw in ("80", "443")]
    assert pyeither.sequence(ok_ports) == pyeither.Ok([80, 443])

    mixed = [parse_port(raw) for raw in ("80", "http", "70000")]
    result = pyeither.collect_all_errors(mixed)
    assert result.is_error()
    assert result.get_error() == [
        "invalid literal for int() with base 10: 'http'",
        "port out of range: 70000",
    ]
    assert pyeither.partition(mixed)[0] == [80]


@pytest.mark.asyncio
async def test_async_pipeline_with_recovery() -> None:
    attempts: list[int] = []

    async def flaky() -> int:
        attempts.append(len(attempts))
        if len(attempts) < 2:
            raise ConnectionError("try again")
        return 42

    first = await pyeither.safe_async(flaky, error_constructor=RuntimeError)
    assert first.is_error()

    second = await pyeither.safe_async(flaky, error_constructor=RuntimeError)
    assert second.zip(pyeither.from_nullable("cached")).get_value() == (42, "cached")
