"""Splice merged utility fragments into the tree around a directive."""

from __future__ import annotations

from typing import cast

from css_directive.ast import (
    ClassSelector,
    Node,
    NodeList,
    PseudoClassSelector,
    Selector,
    SelectorList,
    StyleSheet,
    clone,
    generate,
    parse,
)
from css_directive.directive.locator import DirectiveSite
from css_directive.utilities.model import MergedFragment, ParentWrapped, Plain, SelectorQualified


def _parse_sheet(css: str) -> StyleSheet:
    return cast(StyleSheet, parse(css))


def _pseudo_classes(selector: Selector) -> NodeList[Node]:
    """Pseudo-class parts of *selector*.

    A class whose name starts with ":" (written `.\\:hover`) stands for that
    pseudo-class.
    """
    parts: NodeList[Node] = NodeList()
    for part in selector.children:
        if isinstance(part, PseudoClassSelector):
            parts.append(clone(part))
        elif isinstance(part, ClassSelector) and len(part.name) > 1 and part.name.startswith(":"):
            parts.append(PseudoClassSelector(part.name[1:]))
    return parts


def splice_parent_wrapped(site: DirectiveSite, fragment: ParentWrapped, rule_selector: str) -> None:
    """Insert ``wrapper { selector { body } }`` before the enclosing rule."""
    sheet = _parse_sheet(f"{fragment.wrapper}{{{rule_selector}{{{fragment.body}}}}}")
    site.rule_list.insert_list(sheet.children, site.rule_item)


def splice_selector_qualified(site: DirectiveSite, fragment: SelectorQualified) -> None:
    """Insert a copy of the rule qualified with the fragment's pseudo-classes.

    Only pseudo-class parts of the fragment selector are kept; they are
    appended to every branch of the enclosing rule's selector list.
    """
    pseudo_classes = _pseudo_classes(cast(Selector, parse(fragment.selector, context="selector")))

    selectors = cast(SelectorList, clone(site.rule.prelude))
    for branch in selectors.children:
        branch.children.append_list(pseudo_classes.map(clone))

    sheet = _parse_sheet(f"{generate(selectors)}{{{fragment.body}}}")
    site.rule_list.insert_list(sheet.children, site.rule_item)


def splice_plain(site: DirectiveSite, fragment: Plain) -> None:
    """Insert the fragment's declarations where the directive sits."""
    body = fragment.body[:-1] if fragment.body.endswith(";") else fragment.body
    declarations = NodeList(parse(piece, context="declaration") for piece in body.split(";"))
    site.rule.block.children.insert_list(declarations, site.directive_item)


def splice(site: DirectiveSite, fragments: list[MergedFragment], rule_selector: str | None = None) -> None:
    """Splice every fragment in order, then drop the directive node.

    *rule_selector* is the printed selector of the enclosing rule; it is taken
    once per directive so wrapped copies all use the original selector.
    """
    if rule_selector is None:
        rule_selector = generate(site.rule.prelude)
    for fragment in fragments:
        if isinstance(fragment, ParentWrapped):
            splice_parent_wrapped(site, fragment, rule_selector)
        elif isinstance(fragment, SelectorQualified):
            splice_selector_qualified(site, fragment)
        else:
            splice_plain(site, fragment)
    site.rule.block.children.remove(site.directive_item)
