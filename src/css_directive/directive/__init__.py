from css_directive.directive.expand import expand, expand_directive, expand_sync
from css_directive.directive.locator import DirectiveSite, find_directives, is_expandable
from css_directive.directive.merger import merge, merge_fragments, resolve_fragments
from css_directive.directive.splicer import splice

__all__ = [
    "expand",
    "expand_directive",
    "expand_sync",
    "DirectiveSite",
    "find_directives",
    "is_expandable",
    "merge",
    "merge_fragments",
    "resolve_fragments",
    "splice",
]
