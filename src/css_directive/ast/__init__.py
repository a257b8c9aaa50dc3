"""CSS tree toolkit: parse, print, walk and edit stylesheets."""

from css_directive.ast.generator import generate
from css_directive.ast.node_list import ListItem, NodeList
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
    clone,
)
from css_directive.ast.parser import parse
from css_directive.ast.walker import walk

__all__ = [
    "generate",
    "parse",
    "walk",
    "clone",
    "ListItem",
    "NodeList",
    "Location",
    "Node",
    "StyleSheet",
    "Block",
    "Rule",
    "Atrule",
    "AtrulePrelude",
    "Raw",
    "Declaration",
    "SelectorList",
    "Selector",
    "TypeSelector",
    "ClassSelector",
    "IdSelector",
    "AttributeSelector",
    "PseudoClassSelector",
    "PseudoElementSelector",
    "NestingSelector",
    "Combinator",
]
