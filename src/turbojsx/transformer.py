"""Markup rewriting on top of ``ast.NodeTransformer``.

Marked expressions are rewritten into construction calls::

    jsx(div(className="a", children=["hi", x]))
    # becomes
    Html.div(a=[Html.a_class("a")], children=[Html.txt("hi"), x])

Everything else is left to the default traversal. The inherited namespace is
carried by a `ResolutionContext` passed by value: nested markup is processed
by a child transformer holding the inherited context, so the enclosing
transformer's context never changes while its children are processed.
"""

from __future__ import annotations

import ast
import copy
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .attributes import extract_attributes
from .catalog import ElementCatalog
from .children import extract_children, extract_element_list, is_list_literal
from .constants import DIRECTIVE_NAMES, MARKUP_MARKER
from .errors import ConfigurationError, UnknownElementError
from .namespace import is_tag_reference, resolve
from .nodes import Namespace

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .nodes import Attribute


class TransformOpts:
    __slots__ = ("debug", "directives", "enabled", "marker", "module_names")

    def __init__(
        self,
        enabled=True,
        marker=MARKUP_MARKER,
        directives: Iterable[str] = DIRECTIVE_NAMES,
        module_names: Mapping[str, str] | None = None,
        debug=False,
    ):
        self.enabled = bool(enabled)
        self.marker = marker
        self.directives = frozenset(directives)
        self.module_names = dict(module_names) if module_names else None
        self.debug = bool(debug)


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    hint: Namespace | None = None
    enabled: bool = True

    def inherit(self, namespace: Namespace) -> ResolutionContext:
        return replace(self, hint=namespace)

    def with_enabled(self, enabled: bool) -> ResolutionContext:
        return replace(self, enabled=enabled)


class MarkupTransformer(ast.NodeTransformer):
    def __init__(
        self,
        opts: TransformOpts | None = None,
        catalog: ElementCatalog | None = None,
        context: ResolutionContext | None = None,
        depth: int = 0,
    ) -> None:
        self.opts = opts or TransformOpts()
        self.catalog = catalog if catalog is not None else ElementCatalog.default(self.opts.module_names)
        self.context = context if context is not None else ResolutionContext(enabled=self.opts.enabled)
        self.depth = depth
        self.function_depth = 0

    def debug(self, message: str, indent: int = 4) -> None:
        if self.opts.debug:
            print(f"{' ' * (indent + 2 * self.depth)}{type(self).__name__}: {message}")

    def descend(self, namespace: Namespace) -> MarkupTransformer:
        """Transformer for the children of an element of `namespace`."""
        return type(self)(self.opts, self.catalog, self.context.inherit(namespace), self.depth + 1)

    def make_text(self, expr: ast.Constant) -> ast.Call:
        return self.catalog.make_text(expr.value, expr, self.context.hint or Namespace.HTML)

    def is_markup(self, node: ast.Call) -> bool:
        func = node.func
        return (
            isinstance(func, ast.Name)
            and func.id == self.opts.marker
            and len(node.args) == 1
            and not node.keywords
            and not isinstance(node.args[0], ast.Starred)
        )

    # Expressions

    def visit_Call(self, node: ast.Call) -> ast.AST:
        if not self.context.enabled or not self.is_markup(node):
            return self.generic_visit(node)

        expr = node.args[0]
        # matches <> ... </>
        if is_list_literal(expr):
            self.debug(f"fragment at line {node.lineno}")
            return self.catalog.list_wrap_value(extract_element_list(self, expr), node)
        # matches <div foo={bar}> child1 child2 </div>
        if isinstance(expr, ast.Call) and is_tag_reference(expr.func):
            return self.transform_element(node, expr)
        return self.generic_visit(node)

    def transform_element(self, marker: ast.Call, call: ast.Call) -> ast.Call:
        hint = self.context.hint
        parent, identity = resolve(hint, call.func, self.catalog, call)
        hint_token = hint.value if hint is not None else None
        self.debug(f"<{identity.name}> resolved to {identity} (hint={hint_token}, parent={parent.value})")

        inner = self.descend(identity.namespace)
        attributes = [inner.visit_attribute(attribute) for attribute in extract_attributes(call)]
        children = extract_children(inner, call)

        assembler = self.catalog.find_assembler(identity)
        if assembler is None:
            raise UnknownElementError.at(call, f"Unknown element {identity}")
        return self.catalog.build_call(assembler, parent, attributes, children, marker)

    def visit_attribute(self, attribute: Attribute) -> Attribute:
        if attribute.value.is_literal:
            return attribute
        value = replace(attribute.value, payload=self.visit(attribute.value.payload))
        return replace(attribute, value=value)

    # Declarations

    def directive_name(self, targets: list[ast.expr]) -> str | None:
        # Directives only apply in module and class bodies
        if self.function_depth or len(targets) != 1:
            return None
        target = targets[0]
        if isinstance(target, ast.Name) and target.id in self.opts.directives:
            return target.id
        return None

    def apply_directive(self, name: str, node: ast.stmt, value: ast.expr | None) -> ast.stmt:
        if not isinstance(value, ast.Constant) or not isinstance(value.value, bool):
            raise ConfigurationError.at(node, f"Unexpected payload for {name}. A boolean is expected.")
        self.debug(f"{name} = {value.value}", indent=0)
        self.context = self.context.with_enabled(value.value)
        return node

    def visit_Assign(self, node: ast.Assign) -> ast.AST:
        name = self.directive_name(node.targets)
        if name is None:
            return self.generic_visit(node)
        return self.apply_directive(name, node, node.value)

    def visit_AnnAssign(self, node: ast.AnnAssign) -> ast.AST:
        name = self.directive_name([node.target])
        if name is None:
            return self.generic_visit(node)
        return self.apply_directive(name, node, node.value)

    def visit_FunctionDef(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> ast.AST:
        self.function_depth += 1
        try:
            return self.generic_visit(node)
        finally:
            self.function_depth -= 1

    visit_AsyncFunctionDef = visit_FunctionDef


def transform_tree(
    tree: ast.AST,
    opts: TransformOpts | None = None,
    catalog: ElementCatalog | None = None,
) -> ast.AST:
    """Rewrite all markup in `tree` and return the new tree.

    The input tree is not modified. A diagnostic aborts the whole run, so a
    module with one malformed markup node yields no output at all.
    """
    tree = copy.deepcopy(tree)
    tree = MarkupTransformer(opts, catalog).visit(tree)
    return ast.fix_missing_locations(tree)


def transform_source(
    source: str,
    filename: str = "<unknown>",
    opts: TransformOpts | None = None,
    catalog: ElementCatalog | None = None,
) -> str:
    tree = ast.parse(source, filename=filename)
    return ast.unparse(transform_tree(tree, opts, catalog))
