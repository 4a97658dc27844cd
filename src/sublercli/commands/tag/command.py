"""Tag command."""

import shlex
from pathlib import Path

import click
import rich.console

from sublercli.atoms import METADATA_TAGS, Atoms
from sublercli.errors import SublerError
from sublercli.mediakind import MediaKind
from sublercli.subler import Subler

# Test-only property. Set to a large number to avoid text wrapping in the console.
_CONSOLE_WIDTH: int | None = None


@click.command("tag")
@click.argument(
    "source",
    required=True,
    type=click.Path(dir_okay=False, exists=True, file_okay=True, path_type=Path),
)
@click.option(
    "--atom",
    "atoms",
    multiple=True,
    nargs=2,
    metavar="TAG VALUE",
    help=(
        'Metadata atom to write, e.g. --atom Artist "Foo Artist". Repeatable.'
        " Atoms are written in the given order, and repeated tags accumulate."
        ' See "sublercli tags" for the known tag names.'
    ),
)
@click.option(
    "--dest",
    type=click.Path(dir_okay=False, path_type=Path),
    help=(
        "Path of the output file. Defaults to the SOURCE file name suffixed with"
        " 0, e.g. demo.mp4 -> demo.0.mp4."
    ),
)
@click.option(
    "--dry-run",
    default=False,
    help="Print the SublerCLI command instead of running it.",
    is_flag=True,
)
@click.option(
    "--media-kind",
    default=MediaKind.MOVIE.value,
    show_default=True,
    type=click.Choice([kind.value for kind in MediaKind]),
    help="Media kind of the file.",
)
@click.option(
    "--optimize/--no-optimize",
    default=True,
    show_default=True,
    help="Whether SublerCLI optimizes the output file.",
)
@click.option("--verbose", "-v", count=True)
def main(
    source: Path,
    atoms: tuple[tuple[str, str], ...],
    dest: Path | None,
    dry_run: bool,
    media_kind: str,
    optimize: bool,
    verbose: int,
) -> None:
    """Write metadata atoms to the media file SOURCE.

    Locates SublerCLI via the environment variable SUBLER_CLI_PATH, defaulting
    to a Homebrew install.
    """
    builder = Atoms()
    for tag, value in atoms:
        if not tag:
            raise click.BadParameter(
                "tag name must not be empty", param_hint="'--atom'"
            )
        if tag not in METADATA_TAGS:
            click.echo(
                f"Warning: unknown atom tag {tag!r}, passing it through", err=True
            )
        builder.add(tag, value)

    subler = (
        Subler(source, builder.build())
        .media_kind(media_kind)
        .optimize(optimize)
    )
    if dest is not None:
        subler.dest(dest)

    if dry_run:
        click.echo(shlex.join(subler.command()))
        return

    if verbose:
        click.echo(shlex.join(subler.command()), err=True)

    console = rich.console.Console(width=_CONSOLE_WIDTH)
    console_err = rich.console.Console(stderr=True, width=_CONSOLE_WIDTH)

    try:
        result = subler.tag()
    except SublerError as ex:
        click.echo(ex, err=True)
        raise click.exceptions.Exit(2) from ex

    click.get_binary_stream("stdout").write(result.stdout)
    click.get_binary_stream("stderr").write(result.stderr)

    if not result.ok:
        console_err.print(
            f"[bold red]SublerCLI exited with status {result.returncode}[/bold red]"
        )
        raise click.exceptions.Exit(result.returncode)

    console.print(f"[green]Tagged[/green] {subler.destination()}")
