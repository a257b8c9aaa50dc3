"""Utility resolver protocol and a mapping-backed implementation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Mapping, Optional, Protocol, Sequence, Union

from css_directive.errors import UtilityDefinitionError
from css_directive.utilities.model import UtilityFragment

logger = logging.getLogger(__name__)

Resolved = Optional[Sequence[Any]]


class UtilityResolver(Protocol):
    """Turns one class-name token into utility fragments.

    ``resolve`` may return the fragments directly or an awaitable of them;
    ``None`` (or an empty sequence) means the token is not a known utility.
    Returned fragments are treated as read-only. A resolver may also define
    ``expand_variant_group(text)`` to replace the built-in group expansion.
    """

    def resolve(self, token: str, separator: str) -> Union[Resolved, Awaitable[Resolved]]: ...


class StaticResolver:
    """Resolve tokens from a fixed mapping of class name to fragments.

    Fragments are normalized once on construction and the same objects are
    handed out on every call.
    """

    def __init__(self, utilities: Mapping[str, Sequence[Any]]) -> None:
        if not isinstance(utilities, Mapping):
            raise UtilityDefinitionError("Utility definitions must be a mapping of class name to fragments")
        self._utilities: dict[str, tuple[UtilityFragment, ...]] = {}
        for name, fragments in utilities.items():
            if isinstance(fragments, (str, bytes)) or not isinstance(fragments, Sequence):
                raise UtilityDefinitionError(f"Fragments for {name!r} must be a list")
            self._utilities[name] = tuple(UtilityFragment.coerce(f) for f in fragments)

    @classmethod
    def from_json(cls, path: str | Path) -> StaticResolver:
        """Load definitions from a JSON object file.

        Example::

            {"text-red": [[0, null, "color:red", null]],
             "hover:underline": [{"priority": 1, "selector": ".\\\\:hover",
                                  "body": "text-decoration:underline"}]}
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise UtilityDefinitionError(f"{path}: invalid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise UtilityDefinitionError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
        return cls(data)

    def __contains__(self, token: str) -> bool:
        return token in self._utilities

    def __len__(self) -> int:
        return len(self._utilities)

    def resolve(self, token: str, separator: str = "-") -> tuple[UtilityFragment, ...] | None:
        fragments = self._utilities.get(token)
        if fragments is None:
            logger.debug("No utility named %r", token)
        return fragments
