"""SchemaService — resolve ``module:attribute`` references to schemas.

Schemas live in ordinary Python modules of the project being checked.
A reference such as ``myapp.schemas:user`` is imported with the project
root at the front of ``sys.path``; dotted attributes
(``myapp.schemas:Models.user``) are followed one step at a time.
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from structcheck.domain.errors import SchemaError
from structcheck.domain.schema import Schema, describe, ensure_closed
from structcheck.services.base import BaseService
from structcheck.services.result import ServiceResult


class SchemaRefError(Exception):
    """A schema reference could not be turned into a usable schema."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


@contextmanager
def _on_sys_path(root: Path) -> Iterator[None]:
    entry = str(root)
    sys.path.insert(0, entry)
    try:
        yield
    finally:
        try:
            sys.path.remove(entry)
        except ValueError:
            pass


def resolve_schema_ref(ref: str, project_root: Path) -> Schema:
    """Import the schema named by *ref*.

    Raises:
        SchemaRefError: ``SCHEMA_NOT_FOUND`` when the module or attribute
            does not exist or *ref* is malformed; ``SCHEMA_ERROR`` when the
            target is not a schema or is not a closed schema.
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemaRefError(
            "SCHEMA_NOT_FOUND",
            f"Schema reference must look like 'module:attribute', got {ref!r}",
        )

    with _on_sys_path(project_root):
        try:
            target: object = importlib.import_module(module_name)
        except ImportError as exc:
            raise SchemaRefError("SCHEMA_NOT_FOUND", f"Cannot import {module_name!r}: {exc}") from exc
        except SchemaError as exc:
            raise SchemaRefError("SCHEMA_ERROR", f"Invalid schema in {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise SchemaRefError("SCHEMA_NOT_FOUND", f"{ref!r} has no attribute {part!r}") from exc

    if not isinstance(target, Schema):
        raise SchemaRefError(
            "SCHEMA_ERROR",
            f"{ref!r} is a {type(target).__name__}, not a Schema",
        )
    try:
        return ensure_closed(target)
    except SchemaError as exc:
        raise SchemaRefError("SCHEMA_ERROR", f"{ref!r}: {exc}") from exc


class SchemaService(BaseService):
    """Look up and render schemas by reference."""

    def resolve(self, ref: str) -> Schema:
        """Resolve *ref* against the configured project root."""
        return resolve_schema_ref(ref, self._settings.project_root)

    def describe(self, ref: str) -> ServiceResult:
        try:
            schema = self.resolve(ref)
        except SchemaRefError as exc:
            return ServiceResult.failure("describe", exc.code, exc.message, detail={"schema": ref})
        return ServiceResult.success(
            "describe",
            {"schema": ref, "kind": schema.kind.value, "notation": describe(schema)},
        )
