"""Framework provider: the project-local CLI that takes over once installed.

The launcher itself only knows two entry points of the real CLI:

- run(): handle the current command line
- init(root, name): finish scaffolding a freshly installed project

Usage:
    from rnboot.core.provider import probe_local_provider

    provider = probe_local_provider(context)
    if provider is not None:
        sys.exit(provider.run())
"""

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from rnboot.core.context import LaunchContext

logger = logging.getLogger(__name__)

# Evaluated by node with argv = [node, cli_path, root, name]
INIT_SNIPPET = "require(process.argv[1]).init(process.argv[2], process.argv[3]);"


class FrameworkLoadError(RuntimeError):
    """The local framework CLI exists but cannot be used."""


class FrameworkProvider(ABC):
    """Capability interface of the project-local framework CLI."""

    @abstractmethod
    def run(self) -> int:
        """Handle the current command line. Returns an exit status."""

    @abstractmethod
    def init(self, root: Path, project_name: str) -> int:
        """Finish initializing the project at root. Returns an exit status."""


class NodeFrameworkProvider(FrameworkProvider):
    """Framework CLI implemented as a node module, driven through `node`."""

    def __init__(self, cli_path: Path, node: str, argv: list[str]):
        self.cli_path = cli_path
        self.node = node
        self.argv = list(argv)

    def run(self) -> int:
        cmd = [self.node, str(self.cli_path), *self.argv]
        logger.debug(f"Delegating to local CLI: {cmd}")
        try:
            return subprocess.run(cmd).returncode
        except KeyboardInterrupt:
            return 130

    def init(self, root: Path, project_name: str) -> int:
        cmd = [self.node, "-e", INIT_SNIPPET, str(self.cli_path), str(root), project_name]
        logger.debug(f"Running local CLI init: {cmd}")
        try:
            return subprocess.run(cmd, cwd=root).returncode
        except KeyboardInterrupt:
            return 130


def locate_local_cli(context: LaunchContext) -> Path:
    """Expected path of the project-local framework CLI module."""
    return context.framework_dir / context.settings.cli_module


def load_local_provider(context: LaunchContext) -> Optional[FrameworkProvider]:
    """Load the local framework CLI if one is installed.

    Returns:
        A provider, or None if no CLI module exists under the working directory

    Raises:
        FrameworkLoadError: If the module exists but cannot be run
    """
    cli_path = locate_local_cli(context)
    if not cli_path.exists():
        return None

    if not cli_path.is_file():
        raise FrameworkLoadError(f"{cli_path} is not a file")

    node = shutil.which(context.settings.node_binary)
    if node is None:
        raise FrameworkLoadError(
            f"Found {cli_path} but '{context.settings.node_binary}' is not on PATH"
        )

    return NodeFrameworkProvider(cli_path, node, context.argv)


def probe_local_provider(context: LaunchContext) -> Optional[FrameworkProvider]:
    """Delegation probe: like load_local_provider, but never raises.

    A local CLI that fails to load is treated as absent so the launcher's
    own commands stay usable.
    """
    try:
        return load_local_provider(context)
    except FrameworkLoadError as e:
        logger.warning(f"Ignoring local framework CLI: {e}")
        return None
