"""Process-wide effects threaded through every launcher step.

The working directory, the host platform and the user prompt are read and
changed through a LaunchContext instead of being reached for directly, so
each step can run against a temporary directory and scripted answers.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.prompt import Prompt

from rnboot.core.config import LauncherSettings, load_environment

logger = logging.getLogger(__name__)

AskFn = Callable[[str, str], str]


def ask_on_terminal(message: str, default: str) -> str:
    """Ask a question on the terminal; end of input counts as the default."""
    try:
        return Prompt.ask(message, default=default)
    except EOFError:
        return default


@dataclass
class LaunchContext:
    """State and effects of a single launcher invocation."""

    argv: list[str]
    cwd: Path
    settings: LauncherSettings = field(default_factory=LauncherSettings)
    platform: str = sys.platform
    console: Console = field(default_factory=Console)
    err_console: Console = field(default_factory=lambda: Console(stderr=True))
    ask: AskFn = ask_on_terminal

    @classmethod
    def from_environment(cls, argv: list[str]) -> "LaunchContext":
        """Build a context from the real process environment.

        Raises:
            pydantic.ValidationError: If RNBOOT_* settings are invalid
        """
        load_environment()
        return cls(argv=list(argv), cwd=Path.cwd(), settings=LauncherSettings())

    @property
    def is_windows(self) -> bool:
        return self.platform.startswith("win")

    @property
    def framework_dir(self) -> Path:
        return self.settings.framework_dir(self.cwd)

    def chdir(self, path: Path) -> None:
        """Change the process working directory and remember it."""
        logger.debug(f"Changing working directory to {path}")
        os.chdir(path)
        self.cwd = path
