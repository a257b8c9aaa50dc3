"""Print tinycss2 component values back to their source text."""

from __future__ import annotations

from typing import Any, Iterable

from tinycss2.serializer import serialize_identifier

_BRACKETS = {"() block": ("(", ")"), "[] block": ("[", "]"), "{} block": ("{", "}")}


def source_text(tokens: Iterable[Any]) -> str:
    """Concatenate *tokens* as written.

    Unlike ``tinycss2.serialize`` this never inserts ``/**/`` between
    adjacent tokens, so ``p-0.5`` stays ``p-0.5``.
    """
    out: list[str] = []
    for token in tokens:
        if token.type in _BRACKETS:
            start, end = _BRACKETS[token.type]
            out.append(start + source_text(token.content) + end)
        elif token.type == "function":
            out.append(serialize_identifier(token.name) + "(" + source_text(token.arguments) + ")")
        else:
            out.append(token.serialize())
    return "".join(out)


def find_error(tokens: Iterable[Any]) -> Any:
    """Return the first tinycss2 ParseError nested anywhere in *tokens*."""
    for token in tokens:
        if token.type == "error":
            return token
        children = getattr(token, "content", None) or getattr(token, "arguments", None)
        if children:
            error = find_error(children)
            if error is not None:
                return error
    return None
