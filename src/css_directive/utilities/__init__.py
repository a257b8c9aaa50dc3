from css_directive.utilities.model import (
    MergedFragment,
    ParentWrapped,
    Plain,
    SelectorQualified,
    UtilityFragment,
)
from css_directive.utilities.resolver import StaticResolver, UtilityResolver
from css_directive.utilities.variant_group import expand_variant_group

__all__ = [
    "MergedFragment",
    "ParentWrapped",
    "Plain",
    "SelectorQualified",
    "UtilityFragment",
    "StaticResolver",
    "UtilityResolver",
    "expand_variant_group",
]
