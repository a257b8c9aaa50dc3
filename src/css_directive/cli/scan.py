"""CLI command: css-directive scan -- list @apply directives in CSS files."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from css_directive.ast import parse
from css_directive.config import ExpandConfig
from css_directive.directive import find_directives, resolve_fragments
from css_directive.errors import ParseError, UtilityDefinitionError
from css_directive.utilities import StaticResolver


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-u",
    "--utilities",
    "utilities_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Also report directives that resolve to nothing.",
)
def scan(files: tuple[str, ...], utilities_path: str | None) -> None:
    """List every @apply directive in FILES as file:line:column: classes.

    Exits with code 1 if a file cannot be parsed, or if --utilities is given
    and some directive resolves to no utility at all.
    """
    resolver = None
    if utilities_path:
        try:
            resolver = StaticResolver.from_json(utilities_path)
        except UtilityDefinitionError as exc:
            click.echo(f"Utility definition error: {exc}", err=True)
            sys.exit(1)

    config = ExpandConfig()
    unresolved = 0
    for name in files:
        try:
            source = Path(name).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            click.echo(f"Read error: {name}: not valid UTF-8 ({exc.reason})", err=True)
            sys.exit(1)
        if config.keyword not in source:
            continue
        try:
            tree = parse(source, parse_atrule_prelude=False, positions=True, filename=name)
        except ParseError as exc:
            click.echo(f"Parse error: {exc}", err=True)
            sys.exit(1)

        for site in find_directives(tree, config.directive):
            loc = site.directive.loc
            where = f"{name}:{loc.line}:{loc.column}" if loc else name
            line = f"{where}: {site.payload}"
            if resolver is not None:
                fragments = asyncio.run(resolve_fragments(site.payload, resolver, config.separator))
                if not fragments:
                    unresolved += 1
                    line += " (unresolved)"
            click.echo(line)

    if unresolved:
        click.echo(f"{unresolved} directive(s) resolve to nothing", err=True)
        sys.exit(1)
