"""Errors raised while configuring or running SublerCLI."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .subler import InvocationResult


class SublerError(Exception):
    """Base class for this package's errors."""


class ConfigurationError(SublerError, ValueError):
    """An invocation was configured with an empty or invalid value.

    Raised eagerly, before any external process is touched.
    """


class LaunchError(SublerError):
    """The SublerCLI executable could not be started."""

    def __init__(self, executable: str, reason: str):
        """Initialize."""
        super().__init__(f"Could not launch {executable}: {reason}")
        self.executable = executable


class ExecutionError(SublerError):
    """SublerCLI started, but did not run to completion."""

    def __init__(self, message: str, result: "InvocationResult | None" = None):
        """Initialize."""
        super().__init__(message)
        self.result = result
