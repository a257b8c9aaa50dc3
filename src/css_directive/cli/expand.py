"""CLI command: css-directive expand -- rewrite @apply in CSS files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from css_directive.config import ExpandConfig
from css_directive.directive import expand_sync
from css_directive.errors import ParseError, UtilityDefinitionError
from css_directive.utilities import StaticResolver

logger = logging.getLogger(__name__)


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-u",
    "--utilities",
    "utilities_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file mapping class names to utility fragments.",
)
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write the result here instead of stdout.")
@click.option("--in-place", is_flag=True, help="Overwrite each input file with its expansion.")
@click.option("--separator", default="-", show_default=True, help="Separator handed to the resolver.")
def expand(
    files: tuple[str, ...],
    utilities_path: str,
    output: str | None,
    in_place: bool,
    separator: str,
) -> None:
    """Expand @apply directives in FILES using the given utilities."""
    if output and in_place:
        raise click.UsageError("--output and --in-place are mutually exclusive")

    try:
        resolver = StaticResolver.from_json(utilities_path)
    except UtilityDefinitionError as exc:
        click.echo(f"Utility definition error: {exc}", err=True)
        sys.exit(1)

    config = ExpandConfig(separator=separator)
    results: list[str] = []
    for name in files:
        path = Path(name)
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            click.echo(f"Read error: {path}: not valid UTF-8 ({exc.reason})", err=True)
            sys.exit(1)
        try:
            result = expand_sync(source, resolver, str(path), config=config)
        except ParseError as exc:
            click.echo(f"Parse error: {exc}", err=True)
            sys.exit(1)
        changed = result != source
        logger.info("%s: %s", path, "expanded" if changed else "unchanged")
        if in_place:
            if changed:
                path.write_text(result, encoding="utf-8")
        else:
            results.append(result)

    if in_place:
        return
    text = "\n".join(results)
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        click.echo(text)
