"""End-to-end tests for expanding @apply directives."""

import asyncio

import pytest

from css_directive import ExpandConfig, expand, expand_sync
from css_directive.errors import ParseError
from css_directive.utilities import StaticResolver


def _expand(css, resolver, **kwargs):
    return asyncio.run(expand(css, resolver, **kwargs))


# ---------------------------------------------------------------------------
# Passthrough
# ---------------------------------------------------------------------------


class TestPassthrough:
    def test_text_without_directive_returned_verbatim(self, resolver):
        css = "  .a {  color : red }  /* keep me */\n"
        assert _expand(css, resolver) == css

    def test_malformed_css_without_directive_not_parsed(self, resolver):
        assert _expand(".a {", resolver) == ".a {"

    def test_keyword_only_in_comment_reprints(self, resolver):
        assert _expand("/* @apply */ .a { color: red }", resolver) == ".a{color:red}"


# ---------------------------------------------------------------------------
# Fragment shapes
# ---------------------------------------------------------------------------


class TestShapes:
    def test_plain(self, resolver):
        assert _expand(".a { @apply text-red; }", resolver) == ".a{color:red}"

    def test_pseudo_class(self, resolver):
        assert _expand(".a { @apply hover:underline; }", resolver) == ".a:hover{text-decoration:underline}.a{}"

    def test_escaped_pseudo_class_selector(self):
        resolver = StaticResolver({"hover:underline": [[1, ".\\:hover", "text-decoration:underline", None]]})
        assert (
            _expand(".a { @apply hover:underline; }", resolver)
            == ".a:hover{text-decoration:underline}.a{}"
        )

    def test_parent_wrapper(self, resolver):
        assert (
            _expand(".a { @apply sm:flex; }", resolver)
            == "@media (min-width: 640px){.a{display:flex}}.a{}"
        )

    def test_merged_plain_bodies(self, resolver):
        assert (
            _expand(".a { @apply text-lg text-red; }", resolver)
            == ".a{color:red;font-size:1.125rem;line-height:1.75rem}"
        )

    def test_everything_at_once(self, resolver):
        css = ".a, .b { color: blue; @apply sm:(flex p-2) hover:underline text-red; }"
        assert _expand(css, resolver) == (
            ".a:hover,.b:hover{text-decoration:underline}"
            "@media (min-width: 640px){.a,.b{display:flex;padding:0.5rem}}"
            ".a,.b{color:blue;color:red}"
        )

    def test_inside_media(self, resolver):
        css = "@media print { .a { @apply text-red hover:underline; } }"
        assert _expand(css, resolver) == "@media print{.a:hover{text-decoration:underline}.a{color:red}}"


# ---------------------------------------------------------------------------
# Unresolved and skipped directives
# ---------------------------------------------------------------------------


class TestUnresolved:
    def test_unknown_class_dropped(self, resolver):
        assert _expand(".a { @apply nope text-red; }", resolver) == ".a{color:red}"

    def test_directive_left_when_nothing_resolves(self, resolver):
        assert _expand(".a { @apply nope; }", resolver) == ".a{@apply nope;}"

    def test_directive_without_classes_left(self, resolver):
        assert _expand(".a { @apply; }", resolver) == ".a{@apply;}"

    def test_top_level_directive_left(self, resolver):
        assert _expand("@apply text-red;", resolver) == "@apply text-red;"


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestConcurrentDirectives:
    def test_positions_kept_whatever_finishes_first(self, slow_resolver):
        resolver = slow_resolver({"text-lg": 0.05, "text-red": 0})
        css = ".a { @apply text-lg; margin: 0; @apply text-red; }"
        assert (
            _expand(css, resolver)
            == ".a{font-size:1.125rem;line-height:1.75rem;margin:0;color:red}"
        )

    def test_rules_expanded_independently(self, slow_resolver):
        resolver = slow_resolver({"sm:flex": 0.05})
        css = ".a { @apply sm:flex; } .b { @apply hover:underline; }"
        assert _expand(css, resolver) == (
            "@media (min-width: 640px){.a{display:flex}}.a{}"
            ".b:hover{text-decoration:underline}.b{}"
        )


# ---------------------------------------------------------------------------
# Errors and configuration
# ---------------------------------------------------------------------------


class TestErrorsAndConfig:
    def test_malformed_input(self, resolver):
        with pytest.raises(ParseError) as excinfo:
            _expand(".a { @apply text-red; } .b color", resolver, filename="bad.css")
        assert excinfo.value.source == "bad.css"

    def test_malformed_fragment(self):
        resolver = StaticResolver({"broken": [[0, None, "color red", None]]})
        with pytest.raises(ParseError):
            _expand(".a { @apply broken; }", resolver)

    def test_resolver_exception_propagates(self):
        class Failing:
            async def resolve(self, token, separator):
                raise RuntimeError("resolver down")

        with pytest.raises(RuntimeError):
            _expand(".a { @apply x; }", Failing())

    def test_custom_directive_name(self, resolver):
        config = ExpandConfig(directive="use")
        assert _expand(".a { @use text-red; @apply text-red; }", resolver, config=config) == (
            ".a{color:red;@apply text-red;}"
        )

    def test_sync_wrapper(self, resolver):
        assert expand_sync(".a { @apply text-red; }", resolver) == ".a{color:red}"
