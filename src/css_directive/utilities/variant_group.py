"""Expand variant-group shorthand in an ``@apply`` payload."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "variant_group.lark"

# Inside a group "~" stands for the prefix itself: "text-(~ lg)" -> "text text-lg".
BARE_PREFIX = "~"
# "!" marks an important utility and stays in front: "hover:(!a)" -> "!hover:a".
IMPORTANT = "!"


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


class VariantGroupTransformer(Transformer):  # type: ignore[type-arg]
    """Flatten a parsed payload into a list of class names."""

    def start(self, items: list[Token | list[str]]) -> list[str]:
        return _flatten(items)

    def group(self, items: list[Token | list[str]]) -> list[str]:
        prefix, entries = str(items[0]), _flatten(items[1:])
        return [_prefixed(prefix, entry) for entry in entries]


def _prefixed(prefix: str, entry: str) -> str:
    important = ""
    if entry.startswith(IMPORTANT):
        important, entry = IMPORTANT, entry[len(IMPORTANT):]
    return important + (prefix[:-1] if entry == BARE_PREFIX else prefix + entry)


def _flatten(items: list[Token | list[str]]) -> list[str]:
    names: list[str] = []
    for item in items:
        if isinstance(item, list):
            names.extend(item)
        else:
            names.append(str(item))
    return names


def _chunks(text: str) -> list[str]:
    """Split *text* on whitespace outside parentheses."""
    chunks: list[str] = []
    current: list[str] = []
    depth = 0
    for char in text:
        if char.isspace() and depth == 0:
            if current:
                chunks.append("".join(current))
                current = []
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        current.append(char)
    if current:
        chunks.append("".join(current))
    return chunks


def _expand(text: str) -> list[str]:
    return VariantGroupTransformer().transform(_parser().parse(text))


def expand_variant_group(text: str) -> str:
    """Return *text* with every variant group expanded, space-separated.

    When some group is unbalanced, each whitespace-separated chunk is
    expanded on its own and chunks that still fail are kept as written.
    """
    try:
        return " ".join(_expand(text))
    except UnexpectedInput as exc:
        logger.debug("Expanding %r chunk by chunk: %s", text, exc)

    names: list[str] = []
    for chunk in _chunks(text):
        try:
            names.extend(_expand(chunk))
        except UnexpectedInput:
            logger.debug("Leaving %r unexpanded", chunk)
            names.append(chunk)
    return " ".join(names)
