from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExpandConfig:
    directive: str = "apply"
    separator: str = "-"
    empty_selector: str = ".\\-"  # resolver marker for "no selector"
    suffixes: tuple[str, ...] = (".css",)

    @property
    def keyword(self) -> str:
        return f"@{self.directive}"
