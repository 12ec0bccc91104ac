"""Element catalog and construction of the output call tree.

The catalog answers two questions: whether a namespace knows an element, and
how to build the call that constructs it. Emitted calls look like::

    Html.div(a=[Html.a_class("a")], children=[Html.txt("hi"), x])

Attributes go to the ``a`` keyword and come first, so they are evaluated
before the children as in the source. Children are passed as one list;
opaque child lists are spliced into it with ``*expr``. No other argument
conventions are emitted.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .constants import (
    ATTRIBUTE_PREFIX,
    ATTRIBUTES_LABEL,
    CHILDREN_LABEL,
    HTML_ELEMENTS,
    HTML_EMBEDDED_SVG_ELEMENTS,
    MODULE_NAMES,
    SVG_ELEMENTS,
    TEXT_ELEMENT,
    VOID_ELEMENTS,
)
from .nodes import Attribute, ElementIdentity, Namespace, Value


@dataclass(frozen=True, slots=True)
class Assembler:
    """Catalog entry for one element.

    Void elements have no content model; their children argument is left out
    when empty.
    """

    identity: ElementIdentity
    void: bool = False


def _locate(new: ast.AST, node: ast.AST) -> Any:
    """Give every generated node without a location the location of `node`."""
    for child in ast.walk(new):
        if "lineno" in child._attributes and getattr(child, "lineno", None) is None:
            ast.copy_location(child, node)
    return new


def attribute_function_name(name: str) -> str:
    return ATTRIBUTE_PREFIX + name.replace("-", "_")


class ElementCatalog:
    __slots__ = ("_assemblers", "embedded_in_html", "module_names")

    def __init__(
        self,
        html_elements: Iterable[str] = (),
        svg_elements: Iterable[str] = (),
        *,
        void_elements: Iterable[str] = (),
        embedded_in_html: Iterable[str] = HTML_EMBEDDED_SVG_ELEMENTS,
        module_names: Mapping[str, str] | None = None,
    ) -> None:
        void = set(void_elements)
        self._assemblers: dict[ElementIdentity, Assembler] = {}
        for name in html_elements:
            identity = ElementIdentity(Namespace.HTML, name)
            self._assemblers[identity] = Assembler(identity, void=name in void)
        for name in svg_elements:
            identity = ElementIdentity(Namespace.SVG, name)
            self._assemblers[identity] = Assembler(identity)
        self.embedded_in_html = frozenset(embedded_in_html)
        self.module_names = dict(MODULE_NAMES)
        if module_names:
            self.module_names.update(module_names)

    @classmethod
    def default(cls, module_names: Mapping[str, str] | None = None) -> ElementCatalog:
        return cls(HTML_ELEMENTS, SVG_ELEMENTS, void_elements=VOID_ELEMENTS, module_names=module_names)

    def __contains__(self, identity: object) -> bool:
        return identity in self._assemblers

    def __len__(self) -> int:
        return len(self._assemblers)

    def find_assembler(self, identity: ElementIdentity) -> Assembler | None:
        return self._assemblers.get(identity)

    def is_embedded_in_html(self, name: str) -> bool:
        """Whether the HTML module has a call embedding the SVG element `name`."""
        return name in self.embedded_in_html

    def module(self, namespace: Namespace) -> str:
        return self.module_names[namespace.value]

    def _member(self, namespace: Namespace, name: str) -> ast.Attribute:
        return ast.Attribute(value=ast.Name(id=self.module(namespace), ctx=ast.Load()), attr=name, ctx=ast.Load())

    def make_text(self, text: str, node: ast.AST, namespace: Namespace = Namespace.HTML) -> ast.Call:
        call = ast.Call(
            func=self._member(namespace, TEXT_ELEMENT),
            args=[ast.Constant(value=text)],
            keywords=[],
        )
        return _locate(call, node)

    def list_wrap_value(self, values: Sequence[Value], node: ast.AST) -> ast.expr:
        """Build one list expression out of classified children.

        A list made of a single antiquote is returned as that expression.
        """
        if len(values) == 1 and values[0].is_antiquote:
            return values[0].payload
        elts: list[ast.expr] = []
        for value in values:
            if value.is_antiquote:
                elts.append(ast.Starred(value=value.payload, ctx=ast.Load()))
            else:
                elts.append(value.payload)
        return _locate(ast.List(elts=elts, ctx=ast.Load()), node)

    def make_attribute(self, namespace: Namespace, attribute: Attribute) -> ast.Call:
        value = attribute.value
        if value.is_literal:
            arg: ast.expr = ast.Constant(value=value.payload)
        else:
            arg = value.payload
        return ast.Call(
            func=self._member(namespace, attribute_function_name(attribute.name.name)),
            args=[arg],
            keywords=[],
        )

    def build_call(
        self,
        assembler: Assembler,
        parent: Namespace,
        attributes: Sequence[Attribute],
        children: Sequence[Value],
        node: ast.AST,
    ) -> ast.Call:
        """Build the construction call for `assembler` at the location of `node`.

        The element function is looked up in the parent namespace's module,
        attribute functions in the element's own namespace.
        """
        identity = assembler.identity
        keywords = []
        if attributes:
            attrs = [self.make_attribute(identity.namespace, attribute) for attribute in attributes]
            keywords.append(ast.keyword(arg=ATTRIBUTES_LABEL, value=ast.List(elts=attrs, ctx=ast.Load())))
        if children or not assembler.void:
            keywords.append(ast.keyword(arg=CHILDREN_LABEL, value=self.list_wrap_value(children, node)))
        call = ast.Call(func=self._member(parent, identity.name), args=[], keywords=keywords)
        return _locate(call, node)
