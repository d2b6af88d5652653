"""CLI entry point for selfupdate."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from selfupdate import __version__
from selfupdate.commands import detect

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="selfupdate")
@click.option("--verbose", "-v", is_flag=True, help="Show why each release was skipped")
def main(verbose: bool):
    """selfupdate - Find the GitHub release a binary should update to.

    Examples:

        selfupdate detect junegunn/fzf

        selfupdate detect cli/cli --version v2.40.0

        selfupdate detect owner/tool --prerelease --validator sha256
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# Register commands
main.add_command(detect.detect)


if __name__ == "__main__":
    main()
