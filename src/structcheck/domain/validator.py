"""Validator — ``is_valid(value, schema) -> bool``.

Walks the schema tree against the value, one branch per
:class:`SchemaKind`. A mismatch is a plain ``False``: nothing is raised
and nothing is logged. The only exceptions that escape are misuse
(:class:`UnboundRecursionError`) and Python's own ``RecursionError`` when
a value is nested deeper than the interpreter stack allows.

Recursion markers are resolved by dynamic scope: each ``RECURSIVE`` node
pushes its body while its value is checked and pops it afterwards, and a
marker always means the innermost body currently pushed. The binding
stack belongs to a single ``is_valid`` call, so one schema can be shared
freely between threads.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from structcheck.domain.errors import UnboundRecursionError
from structcheck.domain.keys import key_forms
from structcheck.domain.schema import Schema
from structcheck.domain.types import SchemaKind
from structcheck.domain.values import (
    Symbol,
    is_bigint,
    is_keyed,
    is_nullish,
    is_number,
    is_sequence,
    same_value,
    undefined,
)


def is_valid(value: Any, schema: Schema) -> bool:
    """Return whether *value* conforms to *schema*.

    Raises:
        UnboundRecursionError: ``RECURSION`` was reached with no enclosing
            ``recursive`` schema.
    """
    return _Validator().check(value, schema)


class _Validator:
    """State of a single validation: the active recursive bodies."""

    def __init__(self) -> None:
        self._bindings: list[Schema] = []

    def check(self, value: Any, schema: Schema) -> bool:
        kind = schema.kind

        # --- Primitives ---
        if kind is SchemaKind.STRING:
            return isinstance(value, str)
        if kind is SchemaKind.NUMBER:
            return is_number(value)
        if kind is SchemaKind.BOOLEAN:
            return isinstance(value, bool)
        if kind is SchemaKind.BIGINT:
            return is_bigint(value)
        if kind is SchemaKind.SYMBOL:
            return isinstance(value, Symbol)
        if kind is SchemaKind.UNDEFINED or kind is SchemaKind.VOID:
            return value is undefined
        if kind is SchemaKind.NULL:
            return value is None
        if kind is SchemaKind.NULLISH:
            return is_nullish(value)
        if kind is SchemaKind.UNKNOWN or kind is SchemaKind.ANY:
            return True
        if kind is SchemaKind.NEVER:
            return False

        # --- Composite ---
        if kind is SchemaKind.LITERAL:
            return any(same_value(value, v) for v in schema.literals)
        if kind is SchemaKind.ARRAY:
            return is_sequence(value) and self._all_match(value, schema.element)
        if kind is SchemaKind.NON_EMPTY_ARRAY:
            return (
                is_sequence(value)
                and len(value) > 0
                and self._all_match(value, schema.element)
            )
        if kind is SchemaKind.TUPLE:
            return self._check_tuple(value, schema.members)
        if kind is SchemaKind.OBJECT:
            return self._check_object(value, schema)
        if kind is SchemaKind.RECORD:
            return self._check_record(value, schema)
        if kind is SchemaKind.UNION:
            return any(self.check(value, m) for m in schema.members)
        if kind is SchemaKind.INTERSECTION:
            return all(self.check(value, m) for m in schema.members)
        if kind is SchemaKind.CLASS:
            return not is_nullish(value) and isinstance(value, schema.ctor)

        # --- Recursion ---
        if kind is SchemaKind.RECURSIVE:
            self._bindings.append(schema.body)
            try:
                return self.check(value, schema.body)
            finally:
                self._bindings.pop()
        if kind is SchemaKind.RECURSION_MARKER:
            if not self._bindings:
                raise UnboundRecursionError(
                    "RECURSION used outside of any recursive() schema"
                )
            return self.check(value, self._bindings[-1])

        return False

    def _all_match(self, items: Sequence[Any], element: Schema) -> bool:
        return all(self.check(item, element) for item in items)

    def _check_tuple(self, value: Any, members: tuple[Schema, ...]) -> bool:
        if not is_sequence(value) or len(value) != len(members):
            return False
        return all(self.check(item, m) for item, m in zip(value, members))

    def _check_object(self, value: Any, schema: Schema) -> bool:
        if not is_keyed(value):
            return False
        for name, field in schema.required.items():
            if name not in value or not self.check(value[name], field):
                return False
        for name, field in schema.optional.items():
            if name in value and not self.check(value[name], field):
                return False
        return True

    def _check_record(self, value: Any, schema: Schema) -> bool:
        if not is_keyed(value):
            return False
        for k, v in value.items():
            if not self._key_matches(k, schema.key) or not self.check(v, schema.value):
                return False
        return True

    def _key_matches(self, key: Any, key_schema: Schema) -> bool:
        return any(self.check(form, key_schema) for form in key_forms(key))
