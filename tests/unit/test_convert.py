"""from_nullable / from_predicate."""

from __future__ import annotations

import pytest

from pyeither import Err, Ok, from_nullable, from_predicate

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("value", ["hello", 0, "", False, [], 0.0])
def test_from_nullable_keeps_present_values(value: object) -> None:
    assert from_nullable(value) == Ok(value)


def test_from_nullable_rejects_none() -> None:
    result = from_nullable(None)

    assert result.is_error()
    error = result.get_error()
    assert isinstance(error, ValueError)
    assert str(error) == "Value is null or undefined"


def test_from_predicate_passes() -> None:
    assert from_predicate(5, lambda x: x > 3, ValueError("too small")) == Ok(5)


def test_from_predicate_returns_error_verbatim() -> None:
    error = ValueError("too small")
    result = from_predicate(1, lambda x: x > 3, error)
    assert result.get_error() is error


def test_from_predicate_accepts_non_exception_errors() -> None:
    assert from_predicate("", bool, {"field": "name"}) == Err({"field": "name"})


def test_from_predicate_does_not_catch_predicate_errors() -> None:
    def predicate(_: object) -> bool:
        raise TypeError("predicate failed")

    with pytest.raises(TypeError, match="predicate failed"):
        from_predicate(1, predicate, "unused")


def test_from_predicate_with_composite_predicate() -> None:
    user = {"name": "ada", "age": 36}

    def is_adult_with_name(u: dict[str, object]) -> bool:
        return bool(u.get("name")) and int(u.get("age", 0)) >= 18  # type: ignore[arg-type]

    assert from_predicate(user, is_adult_with_name, "invalid user") == Ok(user)
    assert from_predicate({"name": "", "age": 40}, is_adult_with_name, "invalid user") == Err(
        "invalid user"
    )
