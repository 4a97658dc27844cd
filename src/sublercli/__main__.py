#!/usr/bin/env python


"""CLI for this package."""

import importlib
from pathlib import Path

import click

COMMANDS_DIR = Path(__file__).parent / "commands"


@click.group(
    name="sublercli", context_settings={"help_option_names": ["-h", "--help"]}
)
def cli() -> None:
    """Write metadata to media files with SublerCLI."""


def discover_commands() -> None:
    """Register each `commands/<name>/command.py` module's `main` with `cli`.

    Registers in name order, so help output is stable.
    """
    for command_file in sorted(COMMANDS_DIR.glob("*/command.py")):
        module_name = f"{__package__}.commands.{command_file.parent.name}.command"
        cli.add_command(importlib.import_module(module_name).main)


discover_commands()

if __name__ == "__main__":  # pragma: no cover
    cli()
