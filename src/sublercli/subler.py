"""Assemble SublerCLI invocations and run them."""

import dataclasses
import os
import subprocess
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Self

from .atoms import Atom, Atoms
from .errors import ConfigurationError, ExecutionError, LaunchError
from .mediakind import MediaKind

CLI_PATH_ENVVAR = "SUBLER_CLI_PATH"

# Homebrew install location, `brew install --cask sublercli`
DEFAULT_CLI_PATH = "/usr/local/bin/SublerCli"


def cli_executable() -> str:
    """Path to the SublerCLI executable.

    Read from the environment variable SUBLER_CLI_PATH, else assumes a Homebrew
    install. Resolved anew on every call. Whether anything is actually
    executable there is only discovered at launch.
    """
    return os.environ.get(CLI_PATH_ENVVAR) or DEFAULT_CLI_PATH


def default_dest(source: Path) -> Path:
    """Destination path for a source without an explicit one.

    Suffixes the file name before its extension, starting from 0:
    `demo.mp4` becomes `demo.0.mp4`. Always 0. The filesystem is not checked,
    so an existing file at that path is overwritten by SublerCLI.
    """
    return source.with_name(f"{source.stem}.0{source.suffix}")


@dataclasses.dataclass(frozen=True, kw_only=True)
class InvocationResult:
    """Captured outcome of a finished SublerCLI process, verbatim."""

    args: list[str]
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def ok(self) -> bool:
        """Whether SublerCLI exited with status 0."""
        return self.returncode == 0


class Subler:
    """Builder for one SublerCLI invocation, writing `atoms` to the file at `source`.

    By default the media kind is `MediaKind.MOVIE`, the optimization flag is
    set, and the destination is derived from the source (see `default_dest`).
    Setters chain and the last call wins.

    >>> result = (
    ...     Subler("demo.mp4", Atoms().title("Foo Bar Title").build())
    ...     .media_kind(MediaKind.MOVIE)
    ...     .dest("dest/path.mp4")
    ...     .optimize(False)
    ...     .tag()
    ... )
    """

    def __init__(
        self, source: str | os.PathLike[str], atoms: Atoms | Iterable[Atom] = ()
    ) -> None:
        """Initialize. Raise `ConfigurationError` for an empty source path."""
        if not os.fspath(source):
            raise ConfigurationError("source path must not be empty")
        self.source = Path(source)
        if not self.source.name:
            raise ConfigurationError(f"source path has no file name: {source!s}")

        self.atoms = atoms if isinstance(atoms, Atoms) else Atoms(atoms)
        self._dest: Path | None = None
        self._media_kind = MediaKind.MOVIE
        self._optimize = True

    def dest(self, dest: str | os.PathLike[str]) -> Self:
        """Set the path of the output file."""
        if not os.fspath(dest):
            raise ConfigurationError("destination path must not be empty")
        self._dest = Path(dest)
        return self

    def media_kind(self, kind: MediaKind | str | None) -> Self:
        """Set the media kind of the file, a member or its token like `"TV Show"`.

        `None` restores the default, `MediaKind.MOVIE`.
        """
        if kind is None:
            self._media_kind = MediaKind.MOVIE
            return self
        try:
            self._media_kind = MediaKind(kind)
        except ValueError as verr:
            raise ConfigurationError(f"unknown media kind: {kind!r}") from verr
        return self

    def optimize(self, val: bool = True) -> Self:
        """Set whether SublerCLI optimizes the output file."""
        self._optimize = val
        return self

    def destination(self) -> Path:
        """The output path: the explicit destination, else one derived from the source."""
        return self._dest if self._dest is not None else default_dest(self.source)

    def args(self) -> list[str]:
        """SublerCLI arguments for this invocation, in the order SublerCLI expects.

        The media kind is always present, exactly once. Atoms follow in
        insertion order, because SublerCLI accumulates repeated tags by
        position.
        """
        args = ["-source", str(self.source)]
        args.extend(("-metadata", self._media_kind.as_atom().arg))
        if self._optimize:
            args.append("-optimize")
        args.extend(self.atoms.args())
        args.extend(("-dest", str(self.destination())))
        return args

    def command(self) -> list[str]:
        """Full command line, starting with the resolved SublerCLI executable."""
        return [cli_executable(), *self.args()]

    def spawn_tag(self, **popen_kwargs: Any) -> "subprocess.Popen[bytes]":
        """Start SublerCLI without waiting for it. Return the process handle.

        The caller owns the process, and must wait on it. Keyword arguments,
        like `stdout=subprocess.PIPE`, are passed through to `subprocess.Popen`.

        Raise `ConfigurationError` if the source file does not exist, before
        launching anything.
        """
        if not self.source.exists():
            raise ConfigurationError(f"source file does not exist: {self.source}")

        cmd = self.command()
        try:
            return subprocess.Popen(cmd, **popen_kwargs)
        except OSError as oserr:
            raise LaunchError(cmd[0], oserr.strerror or str(oserr)) from oserr

    def tag(self) -> InvocationResult:
        """Write the metadata to the destination file. Block until SublerCLI finishes.

        A non-zero exit status is returned in the result, not raised. There is
        no timeout. If waiting is interrupted, SublerCLI is killed and reaped.
        """
        with self.spawn_tag(stdout=subprocess.PIPE, stderr=subprocess.PIPE) as proc:
            try:
                stdout, stderr = proc.communicate()
            except OSError as oserr:
                proc.kill()
                proc.wait()
                raise ExecutionError(
                    f"Error while reading output of {proc.args[0]}: {oserr}"
                ) from oserr
            except BaseException:
                # SublerCLI must not outlive an interrupted wait.
                proc.kill()
                proc.wait()
                raise

        result = InvocationResult(
            args=list(proc.args),
            returncode=proc.returncode,
            stdout=stdout,
            stderr=stderr,
        )
        if result.returncode < 0:
            raise ExecutionError(
                f"{result.args[0]} terminated by signal {-result.returncode}", result
            )
        return result
