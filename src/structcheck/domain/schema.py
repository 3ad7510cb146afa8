"""Schema model — an immutable tagged record per node.

Every node carries a :class:`SchemaKind` tag and only the payload fields
that kind uses; the rest keep their empty defaults. Nodes compare by
identity. Self-reference never creates a cycle: a ``RECURSIVE`` node owns
its body, and the body refers back through the shared ``RECURSION_MARKER``
node, which the validator resolves against the innermost active body.

Construct nodes through :mod:`structcheck.domain.builders`, not directly.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from structcheck.domain.errors import UnboundRecursionError
from structcheck.domain.types import PRIMITIVE_KINDS, SchemaKind

_NO_FIELDS: Mapping[str, Schema] = MappingProxyType({})


@dataclass(frozen=True, eq=False, repr=False)
class Schema:
    """One node of a schema tree.

    Attributes:
        kind: The tag the validator dispatches on.
        element: Element schema of ``ARRAY`` / ``NON_EMPTY_ARRAY``.
        members: Positional children of ``TUPLE``, ``UNION``, ``INTERSECTION``.
        required: Required fields of ``OBJECT``.
        optional: Optional fields of ``OBJECT``.
        key: Key schema of ``RECORD``.
        value: Value schema of ``RECORD``.
        literals: Accepted values of ``LITERAL``.
        ctor: Class of ``CLASS``.
        body: Body of ``RECURSIVE``.
    """

    kind: SchemaKind
    element: Schema | None = None
    members: tuple[Schema, ...] = ()
    required: Mapping[str, Schema] = field(default_factory=lambda: _NO_FIELDS)
    optional: Mapping[str, Schema] = field(default_factory=lambda: _NO_FIELDS)
    key: Schema | None = None
    value: Schema | None = None
    literals: tuple[Any, ...] = ()
    ctor: type | None = None
    body: Schema | None = None

    def __repr__(self) -> str:
        return describe(self)

    def children(self) -> Iterator[Schema]:
        """Yield direct child nodes in declaration order."""
        if self.element is not None:
            yield self.element
        yield from self.members
        yield from self.required.values()
        yield from self.optional.values()
        if self.key is not None:
            yield self.key
        if self.value is not None:
            yield self.value
        if self.body is not None:
            yield self.body


def describe(schema: Schema) -> str:
    """Render *schema* in builder notation.

    Examples:
        >>> from structcheck.domain.builders import NUMBER, STRING, array, object_of
        >>> describe(object_of({"tags": array(STRING)}, {"age": NUMBER}))
        'object_of({tags: array(STRING)}, {age: NUMBER})'
    """
    kind = schema.kind
    if kind in PRIMITIVE_KINDS:
        return kind.name
    if kind is SchemaKind.RECURSION_MARKER:
        return "RECURSION"
    if kind is SchemaKind.LITERAL:
        if len(schema.literals) == 1:
            return f"literal({schema.literals[0]!r})"
        return f"literal_union({', '.join(repr(v) for v in schema.literals)})"
    if kind is SchemaKind.ARRAY:
        return f"array({describe(schema.element)})"
    if kind is SchemaKind.NON_EMPTY_ARRAY:
        return f"non_empty_array({describe(schema.element)})"
    if kind is SchemaKind.TUPLE:
        return f"tuple_of({_describe_all(schema.members)})"
    if kind is SchemaKind.UNION:
        return f"union({_describe_all(schema.members)})"
    if kind is SchemaKind.INTERSECTION:
        return f"intersection({_describe_all(schema.members)})"
    if kind is SchemaKind.OBJECT:
        required = _describe_fields(schema.required)
        if not schema.optional:
            return f"object_of({required})"
        return f"object_of({required}, {_describe_fields(schema.optional)})"
    if kind is SchemaKind.RECORD:
        return f"record({describe(schema.key)}, {describe(schema.value)})"
    if kind is SchemaKind.CLASS:
        return f"class_of({schema.ctor.__qualname__})"
    return f"recursive({describe(schema.body)})"


def _describe_all(members: tuple[Schema, ...]) -> str:
    return ", ".join(describe(m) for m in members)


def _describe_fields(fields: Mapping[str, Schema]) -> str:
    inner = ", ".join(f"{name}: {describe(s)}" for name, s in fields.items())
    return "{" + inner + "}"


def ensure_closed(schema: Schema) -> Schema:
    """Return *schema* unchanged, or raise if a marker escapes every binding.

    Raises:
        UnboundRecursionError: A ``RECURSION`` occurrence is not nested in
            any ``recursive`` node.
    """
    seen: set[tuple[int, bool]] = set()
    stack: list[tuple[Schema, bool]] = [(schema, False)]
    while stack:
        node, bound = stack.pop()
        if (id(node), bound) in seen:
            continue
        seen.add((id(node), bound))
        if node.kind is SchemaKind.RECURSION_MARKER and not bound:
            raise UnboundRecursionError(
                "RECURSION used outside of any recursive() schema"
            )
        inner_bound = bound or node.kind is SchemaKind.RECURSIVE
        stack.extend((child, inner_bound) for child in node.children())
    return schema
