"""Print a css_directive tree back to compact CSS text."""

from __future__ import annotations

from functools import singledispatch

from tinycss2.serializer import serialize_identifier, serialize_name

from css_directive.ast.nodes import (
    Atrule,
    AtrulePrelude,
    AttributeSelector,
    Block,
    ClassSelector,
    Combinator,
    Declaration,
    IdSelector,
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
from css_directive.ast.tokens import source_text

__all__ = ["generate"]


@singledispatch
def generate(node: Node) -> str:
    """Return the compact CSS text for *node* and its subtree."""
    raise TypeError(f"Cannot generate CSS for {type(node).__name__}")


@generate.register
def _(node: StyleSheet) -> str:
    return "".join(generate(child) for child in node.children)


@generate.register
def _(node: Block) -> str:
    out: list[str] = []
    for item in node.children.items():
        out.append(generate(item.data))
        # declarations need a separator only when something follows them
        if isinstance(item.data, Declaration) and item.next is not None:
            out.append(";")
    return "".join(out)


@generate.register
def _(node: Rule) -> str:
    return f"{generate(node.prelude)}{{{generate(node.block)}}}"


@generate.register
def _(node: Atrule) -> str:
    text = "@" + serialize_identifier(node.name)
    if node.prelude is not None:
        text += " " + generate(node.prelude)
    if node.block is None:
        return text + ";"
    return f"{text}{{{generate(node.block)}}}"


@generate.register
def _(node: AtrulePrelude) -> str:
    return source_text(node.tokens)


@generate.register
def _(node: Raw) -> str:
    return node.value


@generate.register
def _(node: Declaration) -> str:
    text = f"{serialize_identifier(node.property)}:{node.value}"
    if node.important:
        text += "!important"
    return text


@generate.register
def _(node: SelectorList) -> str:
    return ",".join(generate(child) for child in node.children)


@generate.register
def _(node: Selector) -> str:
    return "".join(generate(child) for child in node.children)


@generate.register
def _(node: TypeSelector) -> str:
    return node.name


@generate.register
def _(node: ClassSelector) -> str:
    return "." + serialize_identifier(node.name)


@generate.register
def _(node: IdSelector) -> str:
    return "#" + serialize_name(node.name)


@generate.register
def _(node: AttributeSelector) -> str:
    return f"[{node.value}]"


@generate.register
def _(node: PseudoClassSelector) -> str:
    text = ":" + serialize_identifier(node.name)
    if node.argument is not None:
        text += f"({node.argument})"
    return text


@generate.register
def _(node: PseudoElementSelector) -> str:
    text = "::" + serialize_identifier(node.name)
    if node.argument is not None:
        text += f"({node.argument})"
    return text


@generate.register
def _(node: NestingSelector) -> str:
    return "&"


@generate.register
def _(node: Combinator) -> str:
    return node.name
