"""CheckService — validate documents on disk against a schema.

Each document is loaded through the loader registered for its format and
handed to :func:`structcheck.domain.validator.is_valid`. The answer per
document is a plain yes or no; there is no report of *where* a document
went wrong.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

from structcheck.config.logging import get_logger
from structcheck.domain.validator import is_valid
from structcheck.infrastructure.documents import DocumentLoadError, detect_format
from structcheck.services.base import BaseService
from structcheck.services.result import ServiceResult
from structcheck.services.schemas import SchemaRefError, resolve_schema_ref

log = get_logger(__name__)


class CheckService(BaseService):
    """Check one or more documents against a single schema."""

    def check(
        self,
        paths: list[Path],
        *,
        schema_ref: str | None = None,
        fmt: str | None = None,
        fail_fast: bool | None = None,
    ) -> ServiceResult:
        """Validate every document in *paths*.

        Args:
            paths: Documents to check, in order.
            schema_ref: ``module:attribute`` reference. Falls back to
                ``[check] schema`` from the config.
            fmt: Force a format for every document; ``"auto"`` or None
                picks one from each file suffix (or ``[check] format``).
            fail_fast: Stop at the first invalid document.
        """
        op = "check"
        started = time.perf_counter()
        config = self._settings.check
        ref = schema_ref or config.schema_ref
        if not ref:
            return ServiceResult.failure(
                op,
                "NO_SCHEMA",
                "No schema given. Pass --schema or set [check] schema in structcheck.toml",
            )
        stop_early = config.fail_fast if fail_fast is None else fail_fast
        forced = fmt or config.format

        try:
            schema = resolve_schema_ref(ref, self._settings.project_root)
        except SchemaRefError as exc:
            return ServiceResult.failure(op, exc.code, exc.message, detail={"schema": ref})

        warnings: list[str] = []
        documents: list[dict[str, Any]] = []
        for path in paths:
            try:
                doc_format, document = self._load(path, forced)
            except DocumentLoadError as exc:
                return ServiceResult.failure(
                    op,
                    "LOAD_ERROR",
                    str(exc),
                    data=self._summary(ref, documents),
                    detail={"path": str(path), "reason": exc.reason},
                    warnings=warnings,
                )

            valid = is_valid(document, schema)
            log.debug("document_checked", path=str(path), format=doc_format, valid=valid)
            documents.append({"path": str(path), "format": doc_format, "valid": valid})
            self._dispatch_event(
                "post_check",
                {"schema_ref": ref, "path": str(path), "valid": valid},
                warnings,
            )
            if not valid and stop_early:
                break

        data = self._summary(ref, documents)
        meta = {"duration_ms": round((time.perf_counter() - started) * 1000, 2)}
        if data["invalid"]:
            invalid_paths = [d["path"] for d in documents if not d["valid"]]
            return ServiceResult.failure(
                op,
                "INVALID_DOCUMENT",
                f"{data['invalid']} of {data['checked']} document(s) do not match {ref}",
                data=data,
                detail={"invalid": invalid_paths},
                warnings=warnings,
                meta=meta,
            )
        return ServiceResult.success(op, data, warnings=warnings, meta=meta)

    def _load(self, path: Path, forced: str) -> tuple[str, Any]:
        """Return ``(format, document)`` for *path*."""
        if forced and forced != "auto":
            doc_format: str | None = forced
        else:
            doc_format = detect_format(path, self._plugins.suffixes())
        if doc_format is None:
            raise DocumentLoadError(path, f"unknown format for suffix {path.suffix!r}, pass --format")
        loader = self._plugins.loader_for(doc_format)
        if loader is None:
            known = ", ".join(self._plugins.formats())
            raise DocumentLoadError(path, f"no loader for format {doc_format!r} (known: {known})")
        return doc_format, loader(path)

    @staticmethod
    def _summary(ref: str, documents: list[dict[str, Any]]) -> dict[str, Any]:
        valid = sum(1 for d in documents if d["valid"])
        return {
            "schema": ref,
            "documents": documents,
            "checked": len(documents),
            "valid": valid,
            "invalid": len(documents) - valid,
        }
