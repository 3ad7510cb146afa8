"""Tests for runtime value kinds and same-value equality."""

from __future__ import annotations

import math
import pickle

import pytest

from structcheck.domain.values import (
    Symbol,
    is_bigint,
    is_keyed,
    is_number,
    is_scalar,
    is_sequence,
    same_value,
    undefined,
)


class TestUndefined:
    def test_singleton_and_falsy(self) -> None:
        assert undefined is not None
        assert not undefined
        assert repr(undefined) == "undefined"

    def test_survives_pickling(self) -> None:
        assert pickle.loads(pickle.dumps(undefined)) is undefined


class TestSymbol:
    def test_identity(self) -> None:
        a, b = Symbol("x"), Symbol("x")
        assert a == a
        assert a != b

    def test_repr(self) -> None:
        assert repr(Symbol()) == "Symbol()"
        assert repr(Symbol("id")) == "Symbol('id')"


class TestKindPredicates:
    def test_number(self) -> None:
        assert is_number(1) and is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")

    def test_bigint(self) -> None:
        assert is_bigint(10**30)
        assert not is_bigint(1.0)
        assert not is_bigint(False)

    def test_sequence(self) -> None:
        assert is_sequence([]) and is_sequence(())
        assert not is_sequence("ab")
        assert not is_sequence({})

    def test_keyed(self) -> None:
        assert is_keyed({})
        assert not is_keyed([])

    def test_scalar(self) -> None:
        for value in ("a", 1, 1.5, True, None, undefined):
            assert is_scalar(value)
        assert not is_scalar([])
        assert not is_scalar(Symbol())


class TestSameValue:
    @pytest.mark.parametrize(
        "a,b",
        [
            (math.nan, math.nan),
            (0.0, -0.0),
            (0, -0.0),
            (1, 1.0),
            ("a", "a"),
            (None, None),
            (undefined, undefined),
            (True, True),
        ],
    )
    def test_equal(self, a: object, b: object) -> None:
        assert same_value(a, b) is True
        assert same_value(b, a) is True

    @pytest.mark.parametrize(
        "a,b",
        [
            (True, 1),
            (False, 0),
            (None, undefined),
            (None, 0),
            ("1", 1),
            (math.nan, 0.0),
            ("a", "b"),
        ],
    )
    def test_not_equal(self, a: object, b: object) -> None:
        assert same_value(a, b) is False
        assert same_value(b, a) is False
