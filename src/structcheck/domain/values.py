"""Runtime value kinds as seen by the validator.

Python has a single ``None``; the ``undefined`` sentinel stands for an
absent value so that ``NULL``, ``UNDEFINED``, ``NULLISH`` and ``VOID``
stay distinguishable. ``Symbol`` is an opaque identity token.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any


class _Undefined(Enum):
    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


undefined = _Undefined.UNDEFINED


class Symbol:
    """Unique token; two symbols are equal only if they are the same object."""

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


# Payload types accepted by ``literal``.
SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool, type(None), _Undefined)


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def is_number(value: Any) -> bool:
    """``int`` or ``float``, excluding ``bool``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_bigint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_nullish(value: Any) -> bool:
    return value is None or value is undefined


def is_sequence(value: Any) -> bool:
    """Ordered, indexable values: ``list`` and ``tuple`` only.

    ``str`` and ``bytes`` are sequences to Python but never to a schema.
    """
    return isinstance(value, (list, tuple))


def is_keyed(value: Any) -> bool:
    return isinstance(value, Mapping)


def same_value(a: Any, b: Any) -> bool:
    """Equality where NaN equals NaN and signed zeros are equal.

    Booleans never equal numbers, and ``None`` never equals ``undefined``.

    Examples:
        >>> same_value(float("nan"), float("nan"))
        True
        >>> same_value(0.0, -0.0)
        True
        >>> same_value(True, 1)
        False
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return True
        return a == b
    if is_nullish(a) or is_nullish(b):
        return a is b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return type(a) is type(b) and a == b
