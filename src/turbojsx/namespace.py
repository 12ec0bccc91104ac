"""Namespace resolution for tag references.

A tag is either a bare name (``div``), in which case the namespace inherited
from the enclosing markup is used as a hint, or a qualified reference
(``Svg.Circle.createElement``) that names the namespace explicitly.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from .constants import CONSTRUCTOR_SELECTOR
from .errors import NamespaceError
from .nodes import ElementIdentity, Namespace

if TYPE_CHECKING:
    from .catalog import ElementCatalog


def lowercase_lead(name: str) -> str:
    """Lower-case the first character only: ``LinearGradient`` -> ``linearGradient``."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def flatten_reference(expr: ast.expr) -> list[str] | None:
    """Return the dotted path of a ``Name``/``Attribute`` chain, or None."""
    parts: list[str] = []
    while isinstance(expr, ast.Attribute):
        parts.append(expr.attr)
        expr = expr.value
    if not isinstance(expr, ast.Name):
        return None
    parts.append(expr.id)
    parts.reverse()
    return parts


def is_tag_reference(expr: ast.expr) -> bool:
    return flatten_reference(expr) is not None


def annotate(hint: Namespace | None, tag_ref: ast.expr, node: ast.AST | None = None) -> tuple[Namespace | None, str]:
    """Split a tag reference into (annotated namespace, element name).

    Bare names carry no annotation of their own, so the inherited hint is
    returned in its place.
    """
    parts = flatten_reference(tag_ref)
    if parts is None:
        raise NamespaceError.at(node or tag_ref, "Invalid tag reference")
    if len(parts) == 1:
        return hint, parts[0]
    if len(parts) == 3 and parts[2] == CONSTRUCTOR_SELECTOR:
        namespace = Namespace.from_token(parts[0])
        if namespace is not None:
            return namespace, lowercase_lead(parts[1])
    raise NamespaceError.at(node or tag_ref, f"Invalid tag {'.'.join(parts)}")


def disambiguate(
    in_html: bool,
    in_svg: bool,
    annotation: Namespace | None,
    embedded_in_html: bool = False,
) -> tuple[Namespace, Namespace] | None:
    """Pick (parent namespace, element namespace) from catalog membership.

    Returns None when neither namespace knows the element. The two results
    only differ for an SVG element the HTML module can embed (`<svg>`) placed
    in HTML content, where the HTML module provides the embedding call.
    """
    if in_svg and embedded_in_html and annotation is not None:
        return annotation, Namespace.SVG
    if in_svg and not in_html:
        return Namespace.SVG, Namespace.SVG
    if in_html and not in_svg:
        return Namespace.HTML, Namespace.HTML
    if in_html and in_svg:
        if annotation is not None:
            return annotation, annotation
        # In case of doubt, use HTML
        return Namespace.HTML, Namespace.HTML
    return None


def resolve(
    hint: Namespace | None,
    tag_ref: ast.expr,
    catalog: ElementCatalog,
    node: ast.AST | None = None,
) -> tuple[Namespace, ElementIdentity]:
    """Resolve a tag reference to its parent namespace and element identity."""
    annotation, name = annotate(hint, tag_ref, node)
    in_html = catalog.find_assembler(ElementIdentity(Namespace.HTML, name)) is not None
    in_svg = catalog.find_assembler(ElementIdentity(Namespace.SVG, name)) is not None
    resolved = disambiguate(in_html, in_svg, annotation, catalog.is_embedded_in_html(name))
    if resolved is None:
        raise NamespaceError.at(node or tag_ref, f"Unknown namespace for the element {name}")
    parent, namespace = resolved
    return parent, ElementIdentity(namespace, name)
