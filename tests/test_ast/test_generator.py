"""Tests for printing trees back to CSS."""

import pytest

from css_directive.ast import (
    ClassSelector,
    NodeList,
    PseudoClassSelector,
    clone,
    generate,
    parse,
    walk,
)


def _roundtrip(css: str) -> str:
    return generate(parse(css))


class TestGenerate:
    def test_compact_rule(self):
        assert _roundtrip(".a { color: red; }") == ".a{color:red}"

    def test_multiple_declarations(self):
        assert _roundtrip(".a { color: red; margin: 0 auto; }") == ".a{color:red;margin:0 auto}"

    def test_important(self):
        assert _roundtrip(".a { color: red !important }") == ".a{color:red!important}"

    def test_selector_list_and_combinators(self):
        assert _roundtrip("ul > li a, .b:hover { x: y }") == "ul>li a,.b:hover{x:y}"

    def test_media(self):
        css = "@media (min-width: 640px) { .a { display: flex } }"
        assert generate(parse(css, parse_atrule_prelude=False)) == "@media (min-width: 640px){.a{display:flex}}"

    def test_blockless_atrule(self):
        assert _roundtrip('@import "a.css";') == '@import "a.css";'

    def test_declaration_before_nested_atrule(self):
        css = ".a { color: red; @apply b; }"
        assert generate(parse(css, parse_atrule_prelude=False)) == ".a{color:red;@apply b;}"

    def test_escaped_identifiers(self):
        assert _roundtrip(".hover\\:underline:hover { x: y }") == ".hover\\:underline:hover{x:y}"

    def test_empty_rule(self):
        assert _roundtrip(".a {}") == ".a{}"

    def test_unknown_node_type(self):
        with pytest.raises(TypeError):
            generate(object())


class TestCloneAndWalk:
    def test_clone_is_independent(self):
        rule = parse(".a, .b { color: red }").children.first
        copy = clone(rule.prelude)
        for branch in copy.children:
            branch.children.append(PseudoClassSelector("hover"))
        assert generate(copy) == ".a:hover,.b:hover"
        assert generate(rule.prelude) == ".a,.b"

    def test_walk_order(self):
        sheet = parse(".a { color: red } @media x { .b { y: z } }")
        seen = []
        walk(sheet, lambda node, item, owner: seen.append(node.type))
        assert seen == [
            "StyleSheet",
            "Rule", "SelectorList", "Selector", "ClassSelector", "Block", "Declaration",
            "Atrule", "AtrulePrelude", "Block",
            "Rule", "SelectorList", "Selector", "ClassSelector", "Block", "Declaration",
        ]

    def test_walk_passes_handles(self):
        sheet = parse(".a {} .b {}")
        handles = []

        def visit(node, item, owner):
            if isinstance(node, ClassSelector):
                return
            if node.type == "Rule":
                handles.append((item.data is node, owner is sheet.children))

        walk(sheet, visit)
        assert handles == [(True, True), (True, True)]

    def test_root_has_no_handle(self):
        sheet = parse(".a {}")
        calls = []
        walk(sheet, lambda node, item, owner: calls.append((node, item, owner)))
        assert calls[0] == (sheet, None, None)

    def test_nodelist_equality_in_nodes(self):
        assert parse(".a{x:y}") == parse(".a { x: y }")
        assert NodeList([1]) != NodeList([2])
