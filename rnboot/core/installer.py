"""Framework installation through the system package manager.

This module provides:
- The platform-specific install command (`cmd /c npm ...` on Windows)
- Running the install with output inherited or captured per log level
- Handing off to the freshly installed local CLI

Usage:
    from rnboot.core.installer import PackageInstaller

    installer = PackageInstaller(context)
    exit_code = installer.run(root, "AwesomeProject", LogLevel.DEFAULT)
"""

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from rnboot.core.context import LaunchContext
from rnboot.core.environment import check_node_version
from rnboot.core.models import LogLevel
from rnboot.core.provider import FrameworkLoadError, load_local_provider

logger = logging.getLogger(__name__)


# =============================================================================
# Enums and Data Classes
# =============================================================================


class InstallStatus(str, Enum):
    """Status of an installation attempt."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class InstallResult:
    """Result of an installation attempt."""

    package: str
    status: InstallStatus
    message: str
    command_used: list[str]
    return_code: Optional[int] = None
    error_output: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status == InstallStatus.SUCCESS


# =============================================================================
# Installer
# =============================================================================


class PackageInstaller:
    """Installs the framework package into the current project."""

    def __init__(self, context: LaunchContext):
        self.context = context
        self.settings = context.settings

    def build_command(self, log_level: LogLevel) -> list[str]:
        """Get the install command as a list of arguments.

        Args:
            log_level: Adds the package manager's --verbose flag when VERBOSE

        Returns:
            List of command arguments for subprocess
        """
        args = ["install", "--save"]
        if log_level == LogLevel.VERBOSE:
            args.append("--verbose")
        args.append(self.settings.framework_package)

        if self.context.is_windows:
            return ["cmd", "/c", self.settings.package_manager, *args]
        return [self.settings.package_manager, *args]

    def install(self, log_level: LogLevel) -> InstallResult:
        """Run the package manager in the current working directory.

        Output is inherited for DEBUG and VERBOSE, captured otherwise.
        """
        package = self.settings.framework_package
        cmd = self.build_command(log_level)
        capture = not log_level.inherits_output
        logger.debug(f"Running {cmd} in {self.context.cwd}")

        try:
            result = subprocess.run(
                cmd,
                cwd=self.context.cwd,
                capture_output=capture,
                text=True,
                timeout=self.settings.install_timeout,
            )
        except subprocess.TimeoutExpired:
            return InstallResult(
                package=package,
                status=InstallStatus.FAILED,
                message=f"Installation of {package} timed out",
                command_used=cmd,
            )
        except OSError as e:
            return InstallResult(
                package=package,
                status=InstallStatus.FAILED,
                message=f"Could not run {cmd[0]}: {e}",
                command_used=cmd,
                error_output=str(e),
            )

        if result.returncode == 0:
            return InstallResult(
                package=package,
                status=InstallStatus.SUCCESS,
                message=f"Successfully installed {package}",
                command_used=cmd,
                return_code=0,
            )
        return InstallResult(
            package=package,
            status=InstallStatus.FAILED,
            message=f"{cmd[0]} exited with status {result.returncode}",
            command_used=cmd,
            return_code=result.returncode,
            error_output=result.stderr if capture else None,
        )

    def run(self, root: Path, project_name: str, log_level: LogLevel) -> int:
        """Install the framework, then hand the project to its local CLI.

        Nothing is rolled back on failure: the directory and manifest stay.

        Returns:
            Exit status for the launcher
        """
        result = self.install(log_level)
        err = self.context.err_console

        if not result.success:
            logger.info(result.message)
            err.print(f"`{self.settings.install_command_display()}` failed", markup=False, highlight=False)
            if result.error_output:
                err.print(result.error_output.rstrip(), markup=False, highlight=False)
            return 1

        check_node_version(self.context)

        try:
            provider = load_local_provider(self.context)
        except FrameworkLoadError as e:
            err.print(f"Error: {e}", markup=False, highlight=False)
            return 1

        if provider is None:
            err.print(
                f"Error: {self.settings.framework_package} was installed but its CLI was not found "
                f"in {self.context.framework_dir}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            return 1

        return provider.init(root, project_name)
