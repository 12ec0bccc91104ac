"""Data model shared by the resolver, the extractors and the catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import ast


class _StrEnum(str, Enum):
    """Backport of enum.StrEnum (Python 3.11+).

    We support Python 3.10+, so we use this small mixin instead.
    """


class Namespace(_StrEnum):
    """Element vocabulary a tag belongs to. The value is the module token."""

    HTML = "html"
    SVG = "svg"

    @classmethod
    def from_token(cls, token: str) -> Namespace | None:
        """Match a module name case-insensitively (``Html``, ``SVG``)."""
        try:
            return cls(token.lower())
        except ValueError:
            return None


class ValueKind(_StrEnum):
    LITERAL = "literal"
    ANTIQUOTE = "antiquote"


@dataclass(frozen=True, slots=True)
class Value:
    """Either a value known at transform time or a host expression.

    Literal payloads are plain Python values (attribute strings) or already
    constructed child expressions. Antiquote payloads are ``ast`` expressions
    embedded unchanged.
    """

    kind: ValueKind
    payload: Any

    @classmethod
    def literal(cls, payload: Any) -> Value:
        return cls(ValueKind.LITERAL, payload)

    @classmethod
    def antiquote(cls, expr: ast.expr) -> Value:
        return cls(ValueKind.ANTIQUOTE, expr)

    @property
    def is_literal(self) -> bool:
        return self.kind is ValueKind.LITERAL

    @property
    def is_antiquote(self) -> bool:
        return self.kind is ValueKind.ANTIQUOTE


@dataclass(frozen=True, slots=True)
class ElementIdentity:
    namespace: Namespace
    name: str

    def __str__(self) -> str:
        return f"{self.namespace.value}.{self.name}"


@dataclass(frozen=True, slots=True)
class AttributeName:
    namespace: Namespace
    name: str


@dataclass(frozen=True, slots=True)
class Attribute:
    name: AttributeName
    value: Value
    line: int | None = None
    column: int | None = None
