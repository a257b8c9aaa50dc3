"""Depth-first traversal of a css_directive tree."""

from __future__ import annotations

from typing import Callable, Optional

from css_directive.ast.node_list import ListItem, NodeList
from css_directive.ast.nodes import Atrule, Block, Node, Rule, Selector, SelectorList, StyleSheet

Visitor = Callable[[Node, Optional[ListItem[Node]], Optional[NodeList[Node]]], None]


def _children(node: Node) -> list[Node | NodeList[Node]]:
    if isinstance(node, (StyleSheet, Block, SelectorList, Selector)):
        return [node.children]
    if isinstance(node, Rule):
        return [node.prelude, node.block]
    if isinstance(node, Atrule):
        return [child for child in (node.prelude, node.block) if child is not None]
    return []


def walk(
    root: Node,
    visit: Visitor,
    item: ListItem[Node] | None = None,
    owner: NodeList[Node] | None = None,
) -> None:
    """Call ``visit(node, item, list)`` for *root* and every descendant.

    Nodes are visited in source order, parents before children. *item* and
    *list* are the handle and list holding the node, or None when the node
    is not a list entry (the root, a rule's prelude or block).
    """
    visit(root, item, owner)
    for child in _children(root):
        if isinstance(child, NodeList):
            for entry in child.items():
                walk(entry.data, visit, entry, child)
        else:
            walk(child, visit)
