from __future__ import annotations

import ast
import unittest

from turbojsx import InvalidAttributeError, Namespace
from turbojsx.attributes import extract_attributes, is_unit, normalize_attr_name, to_kebab_case


def call(source: str) -> ast.Call:
    return ast.parse(source, mode="eval").body


class TestNormalizeAttrName(unittest.TestCase):
    def test_aliases(self) -> None:
        assert normalize_attr_name("className") == "class"
        assert normalize_attr_name("htmlFor") == "for"
        assert normalize_attr_name("class_") == "class"
        assert normalize_attr_name("for_") == "for"
        assert normalize_attr_name("type_") == "type"
        assert normalize_attr_name("method_") == "method"
        assert normalize_attr_name("async_") == "async"

    def test_prefix_rule(self) -> None:
        assert normalize_attr_name("ariaLabel") == "aria-label"
        assert normalize_attr_name("dataFoo") == "data-foo"
        assert normalize_attr_name("ariaDescribedBy") == "aria-describedBy"

    def test_prefix_rule_needs_more_than_five_characters(self) -> None:
        assert normalize_attr_name("ariaX") == "ariaX"
        assert to_kebab_case("data") == "data"

    def test_other_names_pass_through(self) -> None:
        assert normalize_attr_name("href") == "href"
        assert normalize_attr_name("onClick") == "onClick"
        assert normalize_attr_name("viewBox") == "viewBox"

    def test_idempotent(self) -> None:
        names = ["className", "htmlFor", "ariaLabel", "dataFoo", "ariaX", "href", "data-id", "aria-hidden", "in_"]
        for name in names:
            once = normalize_attr_name(name)
            assert normalize_attr_name(once) == once, name


class TestExtractAttributes(unittest.TestCase):
    def test_literal_and_antiquote_in_source_order(self) -> None:
        attrs = extract_attributes(call('div(id="main", className=cls, title="t")'))
        assert [a.name.name for a in attrs] == ["id", "class", "title"]
        assert attrs[0].value.is_literal and attrs[0].value.payload == "main"
        assert attrs[1].value.is_antiquote
        assert ast.unparse(attrs[1].value.payload) == "cls"
        assert attrs[2].value.payload == "t"

    def test_names_are_in_html_namespace(self) -> None:
        attrs = extract_attributes(call('circle(r="5")'))
        assert attrs[0].name.namespace is Namespace.HTML

    def test_non_string_constant_is_antiquote(self) -> None:
        attrs = extract_attributes(call("input(tabindex=3)"))
        assert attrs[0].value.is_antiquote

    def test_children_and_unit_are_skipped(self) -> None:
        node = call('div((), id="x", children=["a"])')
        assert is_unit(node.args[0])
        attrs = extract_attributes(node)
        assert [a.name.name for a in attrs] == ["id"]

    def test_location_is_kept(self) -> None:
        attrs = extract_attributes(call('div(id="x")'))
        assert attrs[0].line == 1
        assert attrs[0].column == 7

    def test_unlabeled_argument_is_rejected(self) -> None:
        with self.assertRaises(InvalidAttributeError) as ctx:
            extract_attributes(call("div(x)"))
        assert ctx.exception.message == "Unexpected unlabeled jsx attribute"

    def test_starred_argument_is_rejected(self) -> None:
        with self.assertRaises(InvalidAttributeError):
            extract_attributes(call("div(*args)"))

    def test_keyword_unpacking_is_rejected(self) -> None:
        with self.assertRaises(InvalidAttributeError) as ctx:
            extract_attributes(call("div(**props)"))
        assert ctx.exception.message == "Unexpected optional jsx attribute props"
