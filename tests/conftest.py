"""pytest conventional configuration file."""

import textwrap
from pathlib import Path
from typing import Any

import pytest
from syrupy.assertion import SnapshotAssertion
from syrupy.extensions.amber import AmberSnapshotExtension
from syrupy.types import SerializableData


@pytest.fixture(autouse=True)
def no_subler_cli_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any SUBLER_CLI_PATH of the developer's environment."""
    monkeypatch.delenv("SUBLER_CLI_PATH", raising=False)


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure plain, unwrapped console output, e.g. of long temporary paths."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setattr("sublercli.commands.tag.command._CONSOLE_WIDTH", 999)


@pytest.fixture
def source(tmp_path: Path) -> Path:
    """An existing, empty media file."""
    fil = tmp_path / "demo.mp4"
    fil.touch()
    return fil


@pytest.fixture
def fake_subler_cli(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Stand in for SublerCLI with a shell script, located via SUBLER_CLI_PATH.

    The script prints each of its arguments on its own line to stdout, a fixed
    line to stderr, and exits with the status in FAKE_SUBLER_EXIT, default 0.
    """
    script = tmp_path / "bin" / "SublerCli"
    script.parent.mkdir()
    script.write_text(
        textwrap.dedent(
            """\
            #!/bin/sh
            for arg in "$@"; do
                printf '%s\\n' "$arg"
            done
            echo "fake SublerCli stderr" >&2
            exit "${FAKE_SUBLER_EXIT:-0}"
            """
        )
    )
    script.chmod(0o755)
    monkeypatch.setenv("SUBLER_CLI_PATH", str(script))
    return script


@pytest.fixture
def snapshot(snapshot: SnapshotAssertion, tmp_path: Path) -> SnapshotAssertion:
    """Override. Make syrupy's snapshot fixture strip temporary paths from any strings or paths within a snapshot.

    Temporary paths can change between test runs.
    """
    tmp_path_str = str(tmp_path)

    def matcher(data: Any, path: Any) -> Any:
        if isinstance(data, Path):
            return str(data).replace(tmp_path_str, "TMP_PATH_HERE")
        elif isinstance(data, str):
            return data.replace(tmp_path_str, "TMP_PATH_HERE")
        return data

    class WithoutTmpPathExtension(AmberSnapshotExtension):
        def serialize(self, data: SerializableData, **kwargs: Any) -> str:
            """Override."""
            new_kwargs = kwargs | {"matcher": matcher}
            return super().serialize(data, **new_kwargs)

    return snapshot.use_extension(WithoutTmpPathExtension)
