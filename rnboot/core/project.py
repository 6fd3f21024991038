"""Project scaffolding for `rnboot init`."""

import json
import logging
import re
from pathlib import Path

from rnboot.core.context import LaunchContext
from rnboot.core.installer import PackageInstaller
from rnboot.core.models import LogLevel, ProjectManifest

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"

PROJECT_NAME_PATTERN = re.compile(r"^[$A-Za-z_][0-9A-Za-z_$]*$")
YES_NO_PATTERN = re.compile(r"^(y(es)?|no?)$", re.IGNORECASE)


class InvalidProjectNameError(ValueError):
    """Project name is not a valid identifier or is reserved."""


def validate_project_name(name: str, reserved: tuple[str, ...] = ("React",)) -> None:
    """Check a project name before anything touches the filesystem.

    Raises:
        InvalidProjectNameError: With a message describing the first violation
    """
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        raise InvalidProjectNameError(
            f'"{name}" is not a valid name for a project. Please use a valid '
            f"identifier name (alphanumeric)."
        )

    if name in reserved:
        raise InvalidProjectNameError(
            f'"{name}" is not a valid name for a project. Please do not use the '
            f'reserved word "{name}".'
        )


def write_manifest(root: Path, manifest: ProjectManifest) -> Path:
    """Write package.json into root."""
    manifest_path = root / MANIFEST_FILENAME
    with open(manifest_path, "w") as f:
        json.dump(manifest.model_dump(), f, indent=2)
        f.write("\n")
    logger.debug(f"Wrote {manifest_path}")
    return manifest_path


class ProjectInitializer:
    """Creates a project directory and hands it to the package installer."""

    def __init__(self, context: LaunchContext):
        self.context = context
        self.settings = context.settings

    def init(self, name: str, log_level: LogLevel) -> int:
        """Initialize project `name` under the working directory.

        Returns:
            Exit status: 0 when cancelled by the user, 1 on invalid names or
            filesystem errors, otherwise the status of the install handoff
        """
        try:
            validate_project_name(name, self.settings.reserved_names)
        except InvalidProjectNameError as e:
            self.context.err_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
            return 1

        if (self.context.cwd / name).exists() and not self.confirm_existing(name):
            self.context.console.print("Project initialization canceled")
            return 0

        return self.create(name, log_level)

    def confirm_existing(self, name: str) -> bool:
        """Ask whether to continue in a directory that already exists.

        The question repeats until the answer looks like yes or no.
        """
        while True:
            answer = self.context.ask(f"Directory {name} already exists. Continue?", "no").strip()
            if YES_NO_PATTERN.match(answer):
                break
            self.context.console.print("[yellow]Must respond yes or no[/yellow]")
        return answer[0].lower() == "y"

    def create(self, name: str, log_level: LogLevel) -> int:
        """Create the project directory and manifest, then install."""
        root = (self.context.cwd / name).resolve()
        project_name = root.name
        console = self.context.console

        console.print(
            f"This will walk you through creating a new {self.settings.framework_display_name} "
            f"project in {root}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

        try:
            root.mkdir(exist_ok=True)
            write_manifest(root, self.build_manifest(project_name))
        except OSError as e:
            self.context.err_console.print(f"Error: could not create {root}: {e}", markup=False)
            return 1

        self.context.chdir(root)

        console.print(
            f"Installing {self.settings.framework_package} package from "
            f"{self.settings.package_manager}...",
            markup=False,
            highlight=False,
        )
        return PackageInstaller(self.context).run(root, project_name, log_level)

    def build_manifest(self, project_name: str) -> ProjectManifest:
        return ProjectManifest(
            name=project_name,
            scripts={"start": self.settings.start_script},
        )
