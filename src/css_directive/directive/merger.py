"""Resolve, sort and merge the utilities named by one directive."""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable

from css_directive.utilities.model import (
    MergedFragment,
    ParentWrapped,
    Plain,
    SelectorQualified,
    UtilityFragment,
)
from css_directive.utilities.resolver import UtilityResolver
from css_directive.utilities.variant_group import expand_variant_group

logger = logging.getLogger(__name__)

EMPTY_SELECTOR = ".\\-"


@dataclass
class _Group:
    """Mutable accumulator entry; never one of the resolver's own objects."""

    selector: str
    parent: str
    body: str


def class_names(payload: str, resolver: UtilityResolver | None = None) -> list[str]:
    """Split a directive payload into individual class names."""
    expand: Callable[[str], str] = getattr(resolver, "expand_variant_group", expand_variant_group)
    return expand(payload).split()


async def _resolve(resolver: UtilityResolver, token: str, separator: str) -> Any:
    result = resolver.resolve(token, separator)
    if inspect.isawaitable(result):
        result = await result
    return result


async def resolve_fragments(
    payload: str, resolver: UtilityResolver, separator: str = "-"
) -> list[UtilityFragment]:
    """Resolve every class in *payload* concurrently; unknown classes drop out."""
    tokens = class_names(payload, resolver)
    results = await asyncio.gather(*(_resolve(resolver, token, separator) for token in tokens))
    fragments: list[UtilityFragment] = []
    for token, result in zip(tokens, results):
        if not result:
            logger.debug("Unresolved class %r", token)
            continue
        fragments.extend(UtilityFragment.coerce(f) for f in result)
    return fragments


def merge_fragments(
    fragments: list[UtilityFragment], empty_selector: str = EMPTY_SELECTOR
) -> list[MergedFragment]:
    """Sort by priority and fold fragments sharing a selector and parent.

    Bodies of a group are concatenated in priority order; groups keep the
    order in which they were first seen.
    """
    groups: list[_Group] = []
    for fragment in sorted(fragments, key=lambda f: f.priority):
        target = next(
            (g for g in groups if g.selector == fragment.selector and g.parent == fragment.parent),
            None,
        )
        if target is not None:
            target.body = _join(target.body, fragment.body)
        else:
            groups.append(_Group(fragment.selector, fragment.parent, fragment.body))
    return [_shape(group, empty_selector) for group in groups]


def _join(body: str, more: str) -> str:
    if body and not body.endswith(";"):
        body += ";"
    return body + more


def _shape(group: _Group, empty_selector: str) -> MergedFragment:
    if group.parent:
        return ParentWrapped(group.parent, group.body)
    if group.selector and group.selector != empty_selector:
        return SelectorQualified(group.selector, group.body)
    return Plain(group.body)


async def merge(
    payload: str,
    resolver: UtilityResolver,
    separator: str = "-",
    empty_selector: str = EMPTY_SELECTOR,
) -> list[MergedFragment]:
    """Resolve and merge the utilities requested by a directive payload."""
    fragments = await resolve_fragments(payload, resolver, separator)
    return merge_fragments(fragments, empty_selector)
