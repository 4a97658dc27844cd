"""Path command."""

import click

from sublercli.subler import cli_executable


@click.command("path")
def main() -> None:
    """Print the path to the SublerCLI executable.

    Read from the environment variable SUBLER_CLI_PATH, defaulting to a Homebrew
    install.
    """
    click.echo(cli_executable())
