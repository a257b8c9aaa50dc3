"""css-directive CLI entry point: Click group with subcommands."""

import logging

import click

from css_directive import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css-directive")
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """css-directive - expand @apply directives into plain CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from css_directive.cli.expand import expand  # noqa: E402
from css_directive.cli.scan import scan  # noqa: E402

cli.add_command(expand)
cli.add_command(scan)
