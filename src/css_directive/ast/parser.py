"""Parse CSS text into a css_directive tree using tinycss2."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import tinycss2
from tinycss2 import ast as tc

from css_directive.ast.node_list import NodeList
from css_directive.ast.nodes import (
    Atrule,
    AtrulePrelude,
    AttributeSelector,
    Block,
    ClassSelector,
    Combinator,
    Declaration,
    IdSelector,
    Location,
    NestingSelector,
    Node,
    PseudoClassSelector,
    PseudoElementSelector,
    Raw,
    Rule,
    Selector,
    SelectorList,
    StyleSheet,
    TypeSelector,
)
from css_directive.ast.tokens import find_error, source_text
from css_directive.errors import ParseError

__all__ = ["parse"]

CONTEXTS = ("stylesheet", "selector_list", "selector", "declaration")

_COMBINATORS = {">", "+", "~"}


class _Builder:
    """Converts tinycss2 component values into tree nodes."""

    def __init__(self, parse_atrule_prelude: bool, positions: bool, filename: str | None):
        self.parse_atrule_prelude = parse_atrule_prelude
        self.positions = positions
        self.filename = filename

    # --- helpers --------------------------------------------------------------

    def loc(self, token: Any) -> Location | None:
        if not self.positions:
            return None
        return Location(token.source_line, token.source_column, self.filename)

    def fail(self, error: tc.ParseError) -> ParseError:
        return ParseError(error.message, error.source_line, error.source_column, self.filename)

    def text(self, tokens: list[Any]) -> str:
        error = find_error(tokens)
        if error is not None:
            raise self.fail(error)
        return source_text(tokens)

    # --- rules and blocks -----------------------------------------------------

    def nodes(self, items: Iterable[Any]) -> NodeList[Node]:
        children: NodeList[Node] = NodeList()
        for item in items:
            if item.type == "error":
                raise self.fail(item)
            if item.type in ("comment", "whitespace"):
                continue
            if item.type == "qualified-rule":
                children.append(self.rule(item))
            elif item.type == "at-rule":
                children.append(self.atrule(item))
            elif item.type == "declaration":
                children.append(self.declaration(item))
            else:
                raise ParseError(
                    f"Unexpected {item.type} token",
                    item.source_line,
                    item.source_column,
                    self.filename,
                )
        return children

    def block(self, content: list[Any], token: Any) -> Block:
        items = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
        return Block(self.nodes(items), loc=self.loc(token))

    def rule(self, token: tc.QualifiedRule) -> Rule:
        return Rule(
            self.selector_list(token.prelude, token),
            self.block(token.content, token),
            loc=self.loc(token),
        )

    def atrule(self, token: tc.AtRule) -> Atrule:
        prelude: Raw | AtrulePrelude | None = None
        tokens = _strip(token.prelude)
        if tokens:
            if self.parse_atrule_prelude:
                prelude = AtrulePrelude(tokens, loc=self.loc(tokens[0]))
            else:
                prelude = Raw(self.text(tokens), loc=self.loc(tokens[0]))
        block = None
        if token.content is not None:
            block = self.block(token.content, token)
        return Atrule(token.at_keyword, prelude, block, loc=self.loc(token))

    def declaration(self, token: tc.Declaration) -> Declaration:
        value = self.text(_strip(token.value))
        return Declaration(token.name, value, token.important, loc=self.loc(token))

    # --- selectors ------------------------------------------------------------

    def selector_list(self, tokens: list[Any], owner: Any) -> SelectorList:
        selectors: NodeList[Selector] = NodeList()
        for branch in _split_commas(tokens):
            selectors.append(self.selector(branch, owner))
        return SelectorList(selectors, loc=self.loc(owner))

    def selector(self, tokens: list[Any], owner: Any) -> Selector:
        tokens = _strip(tokens)
        parts: NodeList[Node] = NodeList()
        stream = _Peekable(tokens)
        pending_descendant = False
        for token in stream:
            if token.type == "whitespace":
                pending_descendant = True
                continue
            if token.type == "literal" and token.value in _COMBINATORS:
                parts.append(Combinator(token.value, loc=self.loc(token)))
                pending_descendant = False
                continue
            if pending_descendant and not isinstance(parts.last, Combinator):
                parts.append(Combinator(" ", loc=self.loc(token)))
                pending_descendant = False
            parts.append(self.selector_part(token, stream))
        return Selector(parts, loc=self.loc(tokens[0] if tokens else owner))

    def selector_part(self, token: Any, stream: _Peekable) -> Node:
        loc = self.loc(token)
        if token.type == "ident":
            if stream.peek_literal("|"):
                next(stream)
                name = next(stream, None)
                return TypeSelector(f"{token.value}|{self.text([name] if name else [])}", loc=loc)
            return TypeSelector(token.value, loc=loc)
        if token.type == "hash":
            return IdSelector(token.value, loc=loc)
        if token.type == "[] block":
            return AttributeSelector(self.text(token.content), loc=loc)
        if token.type == "literal":
            if token.value == "*":
                return TypeSelector("*", loc=loc)
            if token.value == "&":
                return NestingSelector(loc=loc)
            if token.value == "." and stream.peek_type("ident"):
                return ClassSelector(next(stream).value, loc=loc)
            if token.value == ":":
                element = stream.peek_literal(":")
                if element:
                    next(stream)
                target = next(stream, None)
                if target is not None and target.type in ("ident", "function"):
                    cls = PseudoElementSelector if element else PseudoClassSelector
                    if target.type == "function":
                        return cls(target.name, self.text(target.arguments), loc=loc)
                    return cls(target.value, loc=loc)
                raise ParseError("Expected pseudo-class name", token.source_line,
                                 token.source_column, self.filename)
        # keyframe selectors ("50%") and anything else we do not model
        return Raw(self.text([token]), loc=loc)


class _Peekable:
    def __init__(self, tokens: list[Any]):
        self._tokens = tokens
        self._index = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._index >= len(self._tokens):
            raise StopIteration
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _peek(self) -> Any:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def peek_type(self, kind: str) -> bool:
        token = self._peek()
        return token is not None and token.type == kind

    def peek_literal(self, value: str) -> bool:
        token = self._peek()
        return token is not None and token.type == "literal" and token.value == value


def _strip(tokens: list[Any]) -> list[Any]:
    """Drop leading/trailing whitespace and comments."""
    tokens = [t for t in tokens if t.type != "comment"]
    start, end = 0, len(tokens)
    while start < end and tokens[start].type == "whitespace":
        start += 1
    while end > start and tokens[end - 1].type == "whitespace":
        end -= 1
    return tokens[start:end]


def _split_commas(tokens: list[Any]) -> list[list[Any]]:
    branches: list[list[Any]] = [[]]
    for token in tokens:
        if token.type == "literal" and token.value == ",":
            branches.append([])
        else:
            branches[-1].append(token)
    return branches


def parse(
    text: str,
    *,
    context: str = "stylesheet",
    parse_atrule_prelude: bool = True,
    positions: bool = False,
    filename: str | None = None,
) -> Node:
    """Parse *text* into a tree.

    *context* selects what *text* is: a whole ``stylesheet``, a
    ``selector_list``, a single ``selector`` or a single ``declaration``.
    With ``parse_atrule_prelude=False`` at-rule preludes are kept as ``Raw``
    literals. Raises ParseError on malformed input.
    """
    if context not in CONTEXTS:
        raise ValueError(f"Unknown parse context: {context!r}")
    builder = _Builder(parse_atrule_prelude, positions, filename)

    if context == "stylesheet":
        rules = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
        root = StyleSheet(builder.nodes(rules))
        if positions:
            root.loc = Location(1, 1, filename)
        return root

    if context == "declaration":
        decl = tinycss2.parse_one_declaration(text, skip_comments=True)
        if decl.type == "error":
            raise builder.fail(decl)
        return builder.declaration(decl)

    tokens = tinycss2.parse_component_value_list(text, skip_comments=True)
    for token in tokens:
        if token.type == "error":
            raise builder.fail(token)
    anchor = tokens[0] if tokens else None
    if anchor is None:
        raise ParseError("Selector is expected", 1, 1, filename)
    if context == "selector":
        return builder.selector(tokens, anchor)
    return builder.selector_list(tokens, anchor)
