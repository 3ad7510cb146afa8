"""Construction-time misuse errors.

A value that fails to match a schema is never an error; these exceptions
only signal a malformed schema.
"""

from __future__ import annotations


class SchemaError(TypeError):
    """A schema was assembled from invalid parts."""


class UnboundRecursionError(SchemaError):
    """A recursion marker was used outside any enclosing recursive schema."""
