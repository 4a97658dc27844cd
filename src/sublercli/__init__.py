"""Command line interface for SublerCLI, the macOS tool that writes metadata to media files.

Requires a separate SublerCLI install. By default SublerCLI is assumed at
`/usr/local/bin/SublerCli`, where Homebrew installs it. Set the environment
variable SUBLER_CLI_PATH to point elsewhere.
"""

from .atoms import METADATA_TAGS, Atom, Atoms
from .errors import ConfigurationError, ExecutionError, LaunchError, SublerError
from .mediakind import MediaKind
from .subler import InvocationResult, Subler, cli_executable

__all__ = [
    "METADATA_TAGS",
    "Atom",
    "Atoms",
    "ConfigurationError",
    "ExecutionError",
    "InvocationResult",
    "LaunchError",
    "MediaKind",
    "Subler",
    "SublerError",
    "cli_executable",
]
