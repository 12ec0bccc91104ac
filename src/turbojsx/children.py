"""Children extraction.

A child list is either a list display, walked item by item, or an opaque
expression producing a list at runtime, which is kept whole and spliced by
the construction API.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from .attributes import is_string_constant
from .constants import CHILDREN_LABEL
from .nodes import Value

if TYPE_CHECKING:
    from .transformer import MarkupTransformer


def element_mapper(visitor: MarkupTransformer, expr: ast.expr) -> ast.expr:
    # Convert string constant into Html.txt("constant") for convenience
    if is_string_constant(expr):
        return visitor.make_text(expr)
    return visitor.visit(expr)


def is_list_literal(expr: ast.expr) -> bool:
    return isinstance(expr, ast.List)


def extract_element_list(visitor: MarkupTransformer, elements: ast.expr) -> list[Value]:
    if not is_list_literal(elements):
        return [Value.antiquote(element_mapper(visitor, elements))]

    children = []
    for item in elements.elts:
        if isinstance(item, ast.Starred):
            children.append(Value.antiquote(element_mapper(visitor, item.value)))
        else:
            children.append(Value.literal(element_mapper(visitor, item)))
    return children


def find_children(call: ast.Call) -> ast.expr | None:
    for keyword in call.keywords:
        if keyword.arg == CHILDREN_LABEL:
            return keyword.value
    return None


def extract_children(visitor: MarkupTransformer, call: ast.Call) -> list[Value]:
    children = find_children(call)
    if children is None:
        return []
    return extract_element_list(visitor, children)
