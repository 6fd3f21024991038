"""Version reporting for `rnboot -v` / `rnboot --version`."""

import json
import logging
from typing import Any, Optional

from rnboot import __version__
from rnboot.core.context import LaunchContext

logger = logging.getLogger(__name__)

VERSION_FLAGS = ("-v", "--version")


def wants_version(argv: list[str]) -> bool:
    """True if a version flag appears anywhere in argv."""
    return any(arg in VERSION_FLAGS for arg in argv)


def read_framework_package(context: LaunchContext) -> dict[str, Any]:
    """Read the installed framework's package.json.

    Raises:
        OSError: If the file cannot be read
        ValueError: If it is not a JSON object
    """
    package_json = context.framework_dir / "package.json"
    with open(package_json) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{package_json} does not contain a JSON object")
    return data


def read_framework_version(context: LaunchContext) -> Optional[str]:
    """Version of the locally installed framework, or None outside a project."""
    try:
        version = read_framework_package(context).get("version")
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read framework version: {e}")
        return None
    return str(version) if version else None


def report_versions(context: LaunchContext) -> None:
    """Print the launcher version and, if installed, the framework version."""
    settings = context.settings
    context.console.print(f"rnboot: {__version__}", highlight=False)

    framework_version = read_framework_version(context)
    if framework_version:
        context.console.print(f"{settings.framework_package}: {framework_version}", highlight=False)
    else:
        context.console.print(
            f"{settings.framework_package}: n/a - not inside a "
            f"{settings.framework_display_name} project directory",
            highlight=False,
        )
