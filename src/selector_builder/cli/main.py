"""selector-builder CLI entry point: Click group with subcommands."""

import logging

import click

from selector_builder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """selector-builder - compose CSS complex selectors from typed parts."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402

cli.add_command(build)
