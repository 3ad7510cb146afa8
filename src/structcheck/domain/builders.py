"""Schema builders — one constructor per schema kind.

Builders only assemble structure; they never look at data. Misuse that
can be detected while assembling raises :class:`SchemaError` right away,
since schemas are built once at import time and a bad one is a bug.

Usage::

    from structcheck.domain.builders import RECURSION, STRING, array, object_of, recursive

    tree = recursive(object_of({"name": STRING, "children": array(RECURSION)}))
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from structcheck.domain.errors import SchemaError
from structcheck.domain.schema import Schema
from structcheck.domain.types import CONTAINER_KINDS, SchemaKind
from structcheck.domain.values import is_scalar

# --- Primitives ---

STRING = Schema(SchemaKind.STRING)
NUMBER = Schema(SchemaKind.NUMBER)
BOOLEAN = Schema(SchemaKind.BOOLEAN)
BIGINT = Schema(SchemaKind.BIGINT)
SYMBOL = Schema(SchemaKind.SYMBOL)
UNDEFINED = Schema(SchemaKind.UNDEFINED)
NULL = Schema(SchemaKind.NULL)
NULLISH = Schema(SchemaKind.NULLISH)
UNKNOWN = Schema(SchemaKind.UNKNOWN)
ANY = Schema(SchemaKind.ANY)
NEVER = Schema(SchemaKind.NEVER)
VOID = Schema(SchemaKind.VOID)

# Placeholder for "the enclosing recursive schema". Only meaningful inside
# the body of ``recursive(...)``.
RECURSION = Schema(SchemaKind.RECURSION_MARKER)


def _require_schema(arg: Any, where: str) -> Schema:
    if not isinstance(arg, Schema):
        raise SchemaError(f"{where} expects a Schema, got {type(arg).__name__}")
    return arg


def _require_schemas(args: tuple[Any, ...], where: str) -> tuple[Schema, ...]:
    return tuple(_require_schema(a, where) for a in args)


def _freeze_fields(fields: Mapping[str, Any] | None, where: str) -> Mapping[str, Schema]:
    if fields is None:
        return MappingProxyType({})
    if not isinstance(fields, Mapping):
        raise SchemaError(f"{where} expects a mapping of field names, got {type(fields).__name__}")
    frozen: dict[str, Schema] = {}
    for name, schema in fields.items():
        if not isinstance(name, str):
            raise SchemaError(f"{where} field names must be str, got {name!r}")
        frozen[name] = _require_schema(schema, f"{where} field {name!r}")
    return MappingProxyType(frozen)


# --- Literals ---


def literal(value: Any) -> Schema:
    """Match values equal to *value* (same-value equality)."""
    return literal_union(value)


def literal_union(*values: Any) -> Schema:
    """Match values equal to any of *values*. No values matches nothing."""
    for v in values:
        if not is_scalar(v):
            raise SchemaError(f"literal values must be scalars, got {type(v).__name__}")
    return Schema(SchemaKind.LITERAL, literals=values)


# --- Sequences ---


def array(element: Schema) -> Schema:
    return Schema(SchemaKind.ARRAY, element=_require_schema(element, "array()"))


def non_empty_array(element: Schema) -> Schema:
    return Schema(
        SchemaKind.NON_EMPTY_ARRAY,
        element=_require_schema(element, "non_empty_array()"),
    )


def tuple_of(*items: Schema) -> Schema:
    """Match a sequence of exactly ``len(items)`` elements, position by position."""
    return Schema(SchemaKind.TUPLE, members=_require_schemas(items, "tuple_of()"))


# --- Keyed structures ---


def object_of(
    required: Mapping[str, Schema],
    optional: Mapping[str, Schema] | None = None,
) -> Schema:
    """Match a mapping with the given required and optional fields.

    Keys not named in either mapping are ignored.
    """
    req = _freeze_fields(required, "object_of()")
    opt = _freeze_fields(optional, "object_of()")
    overlap = req.keys() & opt.keys()
    if overlap:
        raise SchemaError(f"object_of() fields both required and optional: {sorted(overlap)}")
    return Schema(SchemaKind.OBJECT, required=req, optional=opt)


def record(key: Schema, value: Schema) -> Schema:
    """Match a mapping whose every key matches *key* and every value matches *value*."""
    return Schema(
        SchemaKind.RECORD,
        key=_require_schema(key, "record() key"),
        value=_require_schema(value, "record() value"),
    )


# --- Combinators ---


def union(*members: Schema) -> Schema:
    return Schema(SchemaKind.UNION, members=_require_schemas(members, "union()"))


def intersection(*members: Schema) -> Schema:
    return Schema(SchemaKind.INTERSECTION, members=_require_schemas(members, "intersection()"))


def class_of(ctor: type) -> Schema:
    """Match instances of *ctor* or of any subclass."""
    if not isinstance(ctor, type):
        raise SchemaError(f"class_of() expects a class, got {ctor!r}")
    return Schema(SchemaKind.CLASS, ctor=ctor)


# --- Recursion ---


def recursive(body: Schema | Callable[[Schema], Schema]) -> Schema:
    """Bind ``RECURSION`` inside *body* to the schema being defined.

    *body* is either a finished schema that embeds ``RECURSION`` or a
    builder called once, right here, with ``RECURSION`` as its argument.

    Raises:
        SchemaError: The builder did not return a Schema, or ``RECURSION``
            is reachable without descending into the value first.
    """
    if not isinstance(body, Schema) and callable(body):
        body = body(RECURSION)
    body = _require_schema(body, "recursive()")
    if _has_unguarded_marker(body):
        raise SchemaError(
            f"recursive() body reaches RECURSION without consuming input: {body!r}"
        )
    return Schema(SchemaKind.RECURSIVE, body=body)


def _has_unguarded_marker(schema: Schema) -> bool:
    """Whether RECURSION is reachable through combinators alone."""
    kind = schema.kind
    if kind is SchemaKind.RECURSION_MARKER:
        return True
    if kind in CONTAINER_KINDS or kind is SchemaKind.RECURSIVE:
        # Markers under a nested recursive() belong to that node.
        return False
    return any(_has_unguarded_marker(m) for m in schema.members)
