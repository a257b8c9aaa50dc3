"""Base protocol for source-code transforms."""

from __future__ import annotations

from typing import Literal, Optional, Protocol

from css_directive.utilities.resolver import UtilityResolver

Enforce = Optional[Literal["pre", "post"]]


class SourceCodeTransform(Protocol):
    """A text-to-text rewriting step run on matching source files."""

    name: str
    enforce: Enforce

    def id_filter(self, id: str) -> bool: ...

    async def transform(self, code: str, id: str, resolver: UtilityResolver) -> str: ...
