"""Diagnostics raised while rewriting markup.

Every error is fatal for the module being transformed and carries the
location of the markup node that caused it.
"""

from __future__ import annotations

from typing import Any


class TransformError(Exception):
    """A fatal transform diagnostic with location information."""

    code = "transform-error"

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(str(self))

    @classmethod
    def at(cls, node: Any, message: str) -> TransformError:
        """Build the error at the location of an ``ast`` node."""
        return cls(
            message,
            line=getattr(node, "lineno", None),
            column=getattr(node, "col_offset", None),
        )

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"({self.line},{self.column}): {self.code} - {self.message}"
        return f"{self.code} - {self.message}"

    def __repr__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{type(self).__name__}({self.message!r}, line={self.line}, column={self.column})"
        return f"{type(self).__name__}({self.message!r})"


class NamespaceError(TransformError):
    """Tag reference is malformed or unknown to both namespaces."""

    code = "namespace-error"


class InvalidAttributeError(TransformError):
    """Stray positional or unpacked keyword argument on a tag."""

    code = "invalid-attribute"


class UnknownElementError(TransformError):
    """Resolved element is missing from the catalog."""

    code = "unknown-element"


class ConfigurationError(TransformError):
    """Directive assigned something other than a boolean."""

    code = "configuration-error"
