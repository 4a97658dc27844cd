"""Tags command."""

import click

from sublercli.atoms import Atoms


@click.command("tags")
def main() -> None:
    """Print all known metadata atom tag names, one per line."""
    click.echo("\n".join(Atoms.metadata_tags()))
