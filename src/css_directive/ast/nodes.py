"""CSS tree nodes.

Child sequences are ``NodeList`` instances so positional edits can be made
through stable ``ListItem`` handles.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, ClassVar, Union

from css_directive.ast.node_list import NodeList


@dataclass(frozen=True)
class Location:
    """Source position of a node (1-based line and column)."""

    line: int
    column: int
    source: str | None = None


@dataclass
class Node:
    type: ClassVar[str] = "Node"

    loc: Location | None = field(default=None, kw_only=True, compare=False, repr=False)


# ---------------------------------------------------------------------------
# Structural nodes
# ---------------------------------------------------------------------------


@dataclass
class StyleSheet(Node):
    type: ClassVar[str] = "StyleSheet"

    children: NodeList[Node] = field(default_factory=NodeList)


@dataclass
class Block(Node):
    """The ``{ ... }`` body of a rule or at-rule."""

    type: ClassVar[str] = "Block"

    children: NodeList[Node] = field(default_factory=NodeList)


@dataclass
class Raw(Node):
    """Literal, unparsed text."""

    type: ClassVar[str] = "Raw"

    value: str


@dataclass
class AtrulePrelude(Node):
    """A structured at-rule prelude, kept as tinycss2 component values."""

    type: ClassVar[str] = "AtrulePrelude"

    tokens: list[Any] = field(default_factory=list)


@dataclass
class Atrule(Node):
    type: ClassVar[str] = "Atrule"

    name: str
    prelude: Union[Raw, AtrulePrelude, None] = None
    block: Block | None = None


@dataclass
class Rule(Node):
    type: ClassVar[str] = "Rule"

    prelude: SelectorList
    block: Block = field(default_factory=Block)


@dataclass
class Declaration(Node):
    type: ClassVar[str] = "Declaration"

    property: str
    value: str
    important: bool = False


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass
class SelectorList(Node):
    type: ClassVar[str] = "SelectorList"

    children: NodeList[Selector] = field(default_factory=NodeList)


@dataclass
class Selector(Node):
    """One comma-separated branch of a selector list."""

    type: ClassVar[str] = "Selector"

    children: NodeList[Node] = field(default_factory=NodeList)


@dataclass
class TypeSelector(Node):
    type: ClassVar[str] = "TypeSelector"

    name: str  # element name, "*" or a namespaced form such as "svg|a"


@dataclass
class ClassSelector(Node):
    type: ClassVar[str] = "ClassSelector"

    name: str


@dataclass
class IdSelector(Node):
    type: ClassVar[str] = "IdSelector"

    name: str


@dataclass
class AttributeSelector(Node):
    type: ClassVar[str] = "AttributeSelector"

    value: str  # text between the brackets


@dataclass
class PseudoClassSelector(Node):
    type: ClassVar[str] = "PseudoClassSelector"

    name: str
    argument: str | None = None


@dataclass
class PseudoElementSelector(Node):
    type: ClassVar[str] = "PseudoElementSelector"

    name: str
    argument: str | None = None


@dataclass
class NestingSelector(Node):
    type: ClassVar[str] = "NestingSelector"


@dataclass
class Combinator(Node):
    type: ClassVar[str] = "Combinator"

    name: str  # " ", ">", "+", "~"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def clone(node: Node) -> Node:
    """Deep-copy *node*; the copy shares no NodeList or ListItem with it."""
    updates: dict[str, object] = {}
    for f in fields(node):
        if f.name == "loc":
            continue
        value = getattr(node, f.name)
        if isinstance(value, NodeList):
            updates[f.name] = value.map(clone)
        elif isinstance(value, Node):
            updates[f.name] = clone(value)
        elif isinstance(value, list):
            updates[f.name] = list(value)
    return replace(node, **updates)
