"""Find ``@apply`` directives inside rule bodies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from css_directive.ast import Atrule, ListItem, Node, NodeList, Raw, Rule, walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectiveSite:
    """An expandable directive and the handles needed to splice around it."""

    rule: Rule
    rule_item: ListItem[Node]
    rule_list: NodeList[Node]
    directive: Atrule
    directive_item: ListItem[Node]

    @property
    def payload(self) -> str:
        return cast(Raw, self.directive.prelude).value


def is_expandable(node: Node, name: str = "apply") -> bool:
    """True for an at-rule named *name* with a literal prelude.

    Preludes that were parsed into structure (or are missing) are not ours
    to touch.
    """
    return isinstance(node, Atrule) and node.name == name and isinstance(node.prelude, Raw)


def find_directives(tree: Node, name: str = "apply") -> list[DirectiveSite]:
    """Return every expandable directive in *tree*, in document order."""
    sites: list[DirectiveSite] = []

    def visit(node: Node, item: ListItem[Node] | None, owner: NodeList[Node] | None) -> None:
        if not isinstance(node, Rule) or item is None or owner is None:
            return
        for child in node.block.children.items():
            if is_expandable(child.data, name):
                sites.append(DirectiveSite(node, item, owner, child.data, child))  # type: ignore[arg-type]

    walk(tree, visit)
    logger.debug("Found %d @%s directive(s)", len(sites), name)
    return sites
