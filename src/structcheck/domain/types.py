"""Schema kinds.

The set is closed: the validator dispatches on exactly these tags and
nothing outside this module adds new ones.
"""

from __future__ import annotations

from enum import StrEnum


class SchemaKind(StrEnum):
    """Tag carried by every Schema node."""

    # --- Primitives (no payload) ---
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    NULL = "null"
    NULLISH = "nullish"
    UNKNOWN = "unknown"
    ANY = "any"
    NEVER = "never"
    VOID = "void"

    # --- Composite ---
    LITERAL = "literal"
    ARRAY = "array"
    NON_EMPTY_ARRAY = "non_empty_array"
    TUPLE = "tuple"
    OBJECT = "object"
    RECORD = "record"
    UNION = "union"
    INTERSECTION = "intersection"
    CLASS = "class"

    # --- Recursion ---
    RECURSIVE = "recursive"
    RECURSION_MARKER = "recursion_marker"


PRIMITIVE_KINDS: frozenset[SchemaKind] = frozenset(
    {
        SchemaKind.STRING,
        SchemaKind.NUMBER,
        SchemaKind.BOOLEAN,
        SchemaKind.BIGINT,
        SchemaKind.SYMBOL,
        SchemaKind.UNDEFINED,
        SchemaKind.NULL,
        SchemaKind.NULLISH,
        SchemaKind.UNKNOWN,
        SchemaKind.ANY,
        SchemaKind.NEVER,
        SchemaKind.VOID,
    }
)

# Kinds that descend into a part of the value before reaching their children.
# A recursion marker under one of these cannot loop without consuming input.
CONTAINER_KINDS: frozenset[SchemaKind] = frozenset(
    {
        SchemaKind.ARRAY,
        SchemaKind.NON_EMPTY_ARRAY,
        SchemaKind.TUPLE,
        SchemaKind.OBJECT,
        SchemaKind.RECORD,
    }
)
