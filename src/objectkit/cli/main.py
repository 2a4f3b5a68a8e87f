"""objectkit CLI entry point: Click group with subcommands."""

import logging

import click

from objectkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="objectkit")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """objectkit - rectangles, JSON round-trips and CSS selector building."""
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("objectkit").setLevel(logging.DEBUG)


# Import and register subcommands
from objectkit.cli.rectangle import rectangle  # noqa: E402
from objectkit.cli.roundtrip import roundtrip  # noqa: E402
from objectkit.cli.selector import selector  # noqa: E402

cli.add_command(selector)
cli.add_command(rectangle)
cli.add_command(roundtrip)
