"""Source transform that expands ``@apply`` in CSS files."""

from __future__ import annotations

from css_directive.config import ExpandConfig
from css_directive.directive import expand
from css_directive.transforms.base import Enforce
from css_directive.utilities.resolver import UtilityResolver


class CSSDirectiveTransform:
    """Run the directive expansion on ids ending in one of ``config.suffixes``."""

    name = "css-directive"
    enforce: Enforce = "pre"

    def __init__(self, config: ExpandConfig | None = None) -> None:
        self.config = config or ExpandConfig()

    def id_filter(self, id: str) -> bool:
        return id.endswith(self.config.suffixes)

    async def transform(self, code: str, id: str, resolver: UtilityResolver) -> str:
        return await expand(code, resolver, id, config=self.config)
