"""css_directive - expand ``@apply`` directives into plain CSS."""

__version__ = "0.1.0"

from css_directive.config import ExpandConfig
from css_directive.directive import expand, expand_sync
from css_directive.errors import CSSDirectiveError, ParseError, UtilityDefinitionError
from css_directive.utilities import StaticResolver, UtilityFragment, UtilityResolver

__all__ = [
    "__version__",
    "ExpandConfig",
    "expand",
    "expand_sync",
    "CSSDirectiveError",
    "ParseError",
    "UtilityDefinitionError",
    "StaticResolver",
    "UtilityFragment",
    "UtilityResolver",
]
