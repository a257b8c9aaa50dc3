"""Shared resolvers and fixtures for the directive tests."""

from __future__ import annotations

import asyncio

import pytest

from css_directive.utilities import StaticResolver

UTILITIES = {
    "text-red": [[10, None, "color:red", None]],
    "text-lg": [[20, None, "font-size:1.125rem;line-height:1.75rem", None]],
    "bg-red": [[5, ".\\-", "background-color:red;", None]],
    "hover:underline": [[30, ".hover\\:underline:hover", "text-decoration:underline", None]],
    "focus:outline": [[31, ".focus\\:outline:focus", "outline:solid", None]],
    "sm:flex": [[40, None, "display:flex", "@media (min-width: 640px)"]],
    "sm:p-2": [[41, None, "padding:0.5rem", "@media (min-width: 640px)"]],
    "shadow": [
        [50, None, "--shadow:0 1px 2px black", None],
        [1, None, "box-shadow:var(--shadow)", None],
    ],
}


def static_resolver() -> StaticResolver:
    return StaticResolver(UTILITIES)


class SlowResolver(StaticResolver):
    """Async resolver whose answer for each token arrives after a set delay."""

    def __init__(self, utilities, delays):
        super().__init__(utilities)
        self.delays = delays
        self.calls = []

    async def resolve(self, token, separator="-"):
        self.calls.append((token, separator))
        await asyncio.sleep(self.delays.get(token, 0))
        return super().resolve(token, separator)


@pytest.fixture()
def resolver() -> StaticResolver:
    return static_resolver()


@pytest.fixture()
def slow_resolver():
    """Factory: ``slow_resolver({"token": delay})`` over the shared utilities."""

    def make(delays=None, utilities=None):
        return SlowResolver(utilities or UTILITIES, delays or {})

    return make
