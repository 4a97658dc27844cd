"""Tags command tests."""

from click.testing import CliRunner

from sublercli.atoms import METADATA_TAGS
from sublercli.commands.tags.command import main as tags


def test_main() -> None:
    """Test main lists every known tag, one per line."""
    result = CliRunner().invoke(tags, catch_exceptions=False)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == list(METADATA_TAGS)
