"""structcheck — runtime structural validation of Python values."""

from __future__ import annotations

from structcheck.domain.builders import (
    ANY,
    BIGINT,
    BOOLEAN,
    NEVER,
    NULL,
    NULLISH,
    NUMBER,
    RECURSION,
    STRING,
    SYMBOL,
    UNDEFINED,
    UNKNOWN,
    VOID,
    array,
    class_of,
    intersection,
    literal,
    literal_union,
    non_empty_array,
    object_of,
    record,
    recursive,
    tuple_of,
    union,
)
from structcheck.domain.errors import SchemaError, UnboundRecursionError
from structcheck.domain.schema import Schema, describe, ensure_closed
from structcheck.domain.types import SchemaKind
from structcheck.domain.validator import is_valid
from structcheck.domain.values import Symbol, undefined

__version__ = "0.3.0"

__all__ = [
    "ANY",
    "BIGINT",
    "BOOLEAN",
    "NEVER",
    "NULL",
    "NULLISH",
    "NUMBER",
    "RECURSION",
    "STRING",
    "SYMBOL",
    "UNDEFINED",
    "UNKNOWN",
    "VOID",
    "Schema",
    "SchemaError",
    "SchemaKind",
    "Symbol",
    "UnboundRecursionError",
    "__version__",
    "array",
    "class_of",
    "describe",
    "ensure_closed",
    "intersection",
    "is_valid",
    "literal",
    "literal_union",
    "non_empty_array",
    "object_of",
    "record",
    "recursive",
    "tuple_of",
    "undefined",
    "union",
]
