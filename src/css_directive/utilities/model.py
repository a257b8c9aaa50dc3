"""Utility fragments: what a resolver returns and what the merger produces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from css_directive.errors import UtilityDefinitionError


@dataclass(frozen=True)
class UtilityFragment:
    """One resolved piece of a utility class.

    ``selector`` is a selector fragment (usually carrying a pseudo-class),
    ``parent`` a wrapping at-rule prelude such as ``@media (min-width: 640px)``.
    Both are empty strings when absent.
    """

    priority: float
    selector: str
    body: str
    parent: str

    @classmethod
    def coerce(cls, value: Any) -> UtilityFragment:
        """Build a fragment from a resolver tuple, a mapping or a fragment.

        Tuples follow ``(priority, selector, body, parent, *extra)``; ``None``
        selector/parent values become empty strings.
        """
        if isinstance(value, UtilityFragment):
            return value
        if isinstance(value, Mapping):
            if "body" not in value:
                raise UtilityDefinitionError(f"Utility fragment has no body: {value!r}")
            return cls._checked(
                value, value.get("priority", 0), value.get("selector"), value["body"], value.get("parent")
            )
        if isinstance(value, (tuple, list)) and len(value) >= 3:
            parent = value[3] if len(value) > 3 else None
            return cls._checked(value, value[0], value[1], value[2], parent)
        raise UtilityDefinitionError(f"Not a utility fragment: {value!r}")

    @classmethod
    def _checked(cls, raw: Any, priority: Any, selector: Any, body: Any, parent: Any) -> UtilityFragment:
        selector = "" if selector is None else selector
        parent = "" if parent is None else parent
        if isinstance(priority, bool) or not isinstance(priority, (int, float)):
            raise UtilityDefinitionError(f"Utility fragment priority must be a number: {raw!r}")
        for field_name, text in (("selector", selector), ("body", body), ("parent", parent)):
            if not isinstance(text, str):
                raise UtilityDefinitionError(f"Utility fragment {field_name} must be a string: {raw!r}")
        return cls(priority, selector, body, parent)


# ---------------------------------------------------------------------------
# Merged fragment shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Plain:
    """Declarations spliced straight into the enclosing rule."""

    body: str


@dataclass(frozen=True)
class SelectorQualified:
    """A sibling rule whose selector gains the pseudo-classes of ``selector``."""

    selector: str
    body: str


@dataclass(frozen=True)
class ParentWrapped:
    """A sibling rule nested under the ``wrapper`` at-rule."""

    wrapper: str
    body: str


MergedFragment = Union[Plain, SelectorQualified, ParentWrapped]
