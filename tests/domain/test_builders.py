"""Tests for schema builders and construction-time errors."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from structcheck.domain.builders import (
    NUMBER,
    RECURSION,
    STRING,
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
from structcheck.domain.errors import SchemaError
from structcheck.domain.types import SchemaKind
from structcheck.domain.values import undefined


class TestConstruction:
    def test_kinds(self) -> None:
        assert array(STRING).kind is SchemaKind.ARRAY
        assert non_empty_array(STRING).kind is SchemaKind.NON_EMPTY_ARRAY
        assert tuple_of().kind is SchemaKind.TUPLE
        assert object_of({}).kind is SchemaKind.OBJECT
        assert record(STRING, NUMBER).kind is SchemaKind.RECORD
        assert union().kind is SchemaKind.UNION
        assert intersection().kind is SchemaKind.INTERSECTION
        assert class_of(int).kind is SchemaKind.CLASS
        assert literal("a").kind is SchemaKind.LITERAL
        assert recursive(array(RECURSION)).kind is SchemaKind.RECURSIVE
        assert RECURSION.kind is SchemaKind.RECURSION_MARKER

    def test_payloads(self) -> None:
        assert array(STRING).element is STRING
        assert tuple_of(STRING, NUMBER).members == (STRING, NUMBER)
        assert literal_union("a", 1).literals == ("a", 1)
        rec = record(STRING, NUMBER)
        assert rec.key is STRING
        assert rec.value is NUMBER

    def test_schemas_are_frozen(self) -> None:
        schema = array(STRING)
        with pytest.raises(AttributeError):
            schema.element = NUMBER  # type: ignore[misc]

    def test_object_fields_are_read_only(self) -> None:
        fields = {"name": STRING}
        schema = object_of(fields, {"age": NUMBER})
        assert isinstance(schema.required, MappingProxyType)
        with pytest.raises(TypeError):
            schema.required["other"] = STRING  # type: ignore[index]

    def test_object_copies_caller_mapping(self) -> None:
        fields = {"name": STRING}
        schema = object_of(fields)
        fields["late"] = NUMBER
        assert "late" not in schema.required

    def test_identity_equality(self) -> None:
        assert array(STRING) is not array(STRING)
        assert array(STRING) != array(STRING)


class TestConstructionErrors:
    @pytest.mark.parametrize(
        "build",
        [
            lambda: array("string"),
            lambda: non_empty_array(str),
            lambda: tuple_of(STRING, 1),
            lambda: union(STRING, None),
            lambda: intersection({}),
            lambda: record(STRING, "number"),
            lambda: object_of({"name": "string"}),
            lambda: object_of({}, {"age": int}),
        ],
    )
    def test_non_schema_arguments(self, build) -> None:
        with pytest.raises(SchemaError):
            build()

    def test_object_field_names_must_be_text(self) -> None:
        with pytest.raises(SchemaError):
            object_of({1: STRING})

    def test_object_fields_must_be_a_mapping(self) -> None:
        with pytest.raises(SchemaError):
            object_of([("name", STRING)])  # type: ignore[arg-type]

    def test_field_both_required_and_optional(self) -> None:
        with pytest.raises(SchemaError, match="age"):
            object_of({"age": NUMBER}, {"age": NUMBER})

    @pytest.mark.parametrize("payload", [[1], {"a": 1}, object(), STRING, b"x"])
    def test_literal_must_be_scalar(self, payload: object) -> None:
        with pytest.raises(SchemaError):
            literal(payload)

    @pytest.mark.parametrize("payload", ["a", 1, 1.5, True, None, undefined])
    def test_literal_scalars(self, payload: object) -> None:
        assert literal(payload).literals == (payload,)

    def test_class_of_requires_a_class(self) -> None:
        with pytest.raises(SchemaError):
            class_of("Blob")  # type: ignore[arg-type]

    def test_schema_error_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            array(None)  # type: ignore[arg-type]


class TestRecursive:
    def test_builder_called_once_with_marker(self) -> None:
        calls = []

        def body(marker):
            calls.append(marker)
            return array(marker)

        schema = recursive(body)
        assert calls == [RECURSION]
        assert schema.body.element is RECURSION

    def test_builder_must_return_schema(self) -> None:
        with pytest.raises(SchemaError):
            recursive(lambda _marker: "not a schema")

    def test_non_callable_non_schema(self) -> None:
        with pytest.raises(SchemaError):
            recursive(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "body",
        [
            RECURSION,
            union(STRING, RECURSION),
            intersection(RECURSION),
            union(intersection(NUMBER, RECURSION)),
        ],
        ids=["bare", "union", "intersection", "nested"],
    )
    def test_unguarded_marker_rejected(self, body) -> None:
        with pytest.raises(SchemaError, match="without consuming input"):
            recursive(body)

    @pytest.mark.parametrize(
        "body",
        [
            array(RECURSION),
            union(STRING, array(RECURSION)),
            tuple_of(NUMBER, RECURSION),
            object_of({}, {"next": RECURSION}),
            record(STRING, RECURSION),
            union(NUMBER, recursive(array(RECURSION))),
        ],
    )
    def test_guarded_marker_accepted(self, body) -> None:
        assert recursive(body).body is body
