"""Expand every ``@apply`` directive of a stylesheet."""

from __future__ import annotations

import asyncio
import logging

from css_directive.ast import generate, parse
from css_directive.config import ExpandConfig
from css_directive.directive.locator import DirectiveSite, find_directives
from css_directive.directive.merger import merge
from css_directive.directive.splicer import splice
from css_directive.utilities.resolver import UtilityResolver

logger = logging.getLogger(__name__)


async def expand_directive(site: DirectiveSite, resolver: UtilityResolver, config: ExpandConfig) -> bool:
    """Expand one directive in place. Returns False if nothing resolved.

    A directive whose classes all fail to resolve is left in the tree as is.
    """
    fragments = await merge(site.payload, resolver, config.separator, config.empty_selector)
    if not fragments:
        logger.debug("Nothing resolved for %s %s; leaving it", config.keyword, site.payload)
        return False
    splice(site, fragments, generate(site.rule.prelude))
    return True


async def expand(
    css: str,
    resolver: UtilityResolver,
    filename: str | None = None,
    *,
    config: ExpandConfig | None = None,
) -> str:
    """Return *css* with its directives replaced by plain CSS.

    Text without the directive keyword is returned untouched without being
    parsed. Raises ParseError if the input or any generated CSS is malformed.
    """
    config = config or ExpandConfig()
    if config.keyword not in css:
        return css

    tree = parse(css, parse_atrule_prelude=False, positions=True, filename=filename)
    sites = find_directives(tree, config.directive)
    results = await asyncio.gather(*(expand_directive(site, resolver, config) for site in sites))
    logger.debug(
        "%s: expanded %d of %d directive(s)", filename or "<css>", sum(results), len(results)
    )
    return generate(tree)


def expand_sync(
    css: str,
    resolver: UtilityResolver,
    filename: str | None = None,
    *,
    config: ExpandConfig | None = None,
) -> str:
    """Blocking wrapper around :func:`expand` for callers without a loop."""
    return asyncio.run(expand(css, resolver, filename, config=config))
