"""Attribute extraction and name normalization."""

from __future__ import annotations

import ast

from .constants import ATTRIBUTE_ALIASES, CHILDREN_LABEL, KEBAB_CASE_PREFIXES
from .errors import InvalidAttributeError
from .namespace import lowercase_lead
from .nodes import Attribute, AttributeName, Namespace, Value


def to_kebab_case(name: str) -> str:
    """``ariaLabel`` -> ``aria-label``; other names are returned unchanged."""
    if len(name) > 5:
        prefix = name[:4]
        if prefix in KEBAB_CASE_PREFIXES and name[4] != "-":
            return f"{prefix}-{lowercase_lead(name[4:])}"
    return name


def normalize_attr_name(name: str) -> str:
    alias = ATTRIBUTE_ALIASES.get(name)
    if alias is not None:
        return alias
    return to_kebab_case(name)


def make_attr_name(name: str) -> AttributeName:
    return AttributeName(Namespace.HTML, normalize_attr_name(name))


def is_unit(expr: ast.expr) -> bool:
    """The empty tuple terminating a construction call."""
    return isinstance(expr, ast.Tuple) and not expr.elts


def is_string_constant(expr: ast.expr) -> bool:
    return isinstance(expr, ast.Constant) and isinstance(expr.value, str)


def extract_attr_value(name: str, value: ast.expr) -> Attribute:
    if is_string_constant(value):
        classified = Value.literal(value.value)
    else:
        classified = Value.antiquote(value)
    return Attribute(
        make_attr_name(name),
        classified,
        line=getattr(value, "lineno", None),
        column=getattr(value, "col_offset", None),
    )


def extract_attributes(call: ast.Call) -> list[Attribute]:
    """Collect the attributes of a tag call in source order.

    The trailing ``()`` and the ``children`` keyword are skipped. Any other
    positional argument, and ``**mapping`` unpacking, is rejected.
    """
    for arg in call.args:
        if not is_unit(arg):
            raise InvalidAttributeError.at(arg, "Unexpected unlabeled jsx attribute")

    attributes = []
    for keyword in call.keywords:
        if keyword.arg is None:
            raise InvalidAttributeError.at(
                keyword.value,
                f"Unexpected optional jsx attribute {ast.unparse(keyword.value)}",
            )
        if keyword.arg == CHILDREN_LABEL:
            continue
        attributes.append(extract_attr_value(keyword.arg, keyword.value))
    return attributes
