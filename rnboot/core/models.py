"""Shared models for the launcher."""

from enum import Enum

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Verbosity of the package installation step."""

    DEFAULT = ""
    DEBUG = "debug"
    VERBOSE = "verbose"

    @property
    def inherits_output(self) -> bool:
        """Whether the package manager's output should be shown to the user."""
        return self in (LogLevel.DEBUG, LogLevel.VERBOSE)


def resolve_log_level(argv: list[str]) -> LogLevel:
    """Derive the log level from the raw argument list.

    Flags are looked up anywhere in argv, not only where the command parser put them.
    `--verbose` takes precedence over `--debug`.
    """
    if "--verbose" in argv:
        return LogLevel.VERBOSE
    if "--debug" in argv:
        return LogLevel.DEBUG
    return LogLevel.DEFAULT


class ProjectManifest(BaseModel):
    """The package.json written into a freshly created project."""

    name: str
    version: str = "0.0.1"
    private: bool = True
    scripts: dict[str, str] = Field(default_factory=dict)
