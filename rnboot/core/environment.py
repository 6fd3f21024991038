"""Runtime checks for the Node.js version the framework declares.

After installation the framework's package.json may declare an
`engines.node` range. If the Node.js on PATH does not satisfy it a warning
is printed; the check never stops initialization.

Usage:
    from rnboot.core.environment import check_node_version

    warning = check_node_version(context)
"""

import logging
import re
import shutil
import subprocess
from typing import Optional

from nodesemver import satisfies

from rnboot.core.context import LaunchContext
from rnboot.core.version import read_framework_package

logger = logging.getLogger(__name__)


# =============================================================================
# Version Utilities
# =============================================================================


def parse_version(version_str: str) -> Optional[tuple[int, ...]]:
    """Parse a version string into a tuple of integers.

    Supported formats:
    - Simple semver: "1.2.3", "1.2"
    - With 'v' prefix: "v18.12.0"
    - With tool name prefix: "node v18.12.0"
    - With pre-release suffix: "1.2.3-rc1" (suffix ignored)

    Args:
        version_str: Version string to parse

    Returns:
        Tuple of (major, minor, patch) or None if parsing fails
    """
    if not version_str:
        return None

    match = re.search(r"(\d+)\.(\d+)(?:\.(\d+))?", version_str.strip())
    if not match:
        return None

    major = int(match.group(1))
    minor = int(match.group(2))
    patch = int(match.group(3)) if match.group(3) else 0

    return (major, minor, patch)


def get_node_version(node_binary: str = "node") -> Optional[str]:
    """Get the version of the Node.js runtime on PATH.

    Returns:
        Version as "major.minor.patch", or None if node is missing or its
        output cannot be parsed
    """
    path = shutil.which(node_binary)
    if path is None:
        return None

    try:
        result = subprocess.run(
            [path, "--version"],
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (subprocess.SubprocessError, OSError) as e:
        logger.debug(f"Failed to run {path} --version: {e}")
        return None

    parsed = parse_version(result.stdout or result.stderr)
    if parsed:
        return f"{parsed[0]}.{parsed[1]}.{parsed[2]}"
    return None


def required_node_range(context: LaunchContext) -> Optional[str]:
    """The `engines.node` range declared by the installed framework, if any."""
    try:
        package = read_framework_package(context)
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot read framework package.json: {e}")
        return None

    engines = package.get("engines")
    if not isinstance(engines, dict):
        return None
    node_range = engines.get("node")
    return str(node_range) if node_range else None


def check_node_version(context: LaunchContext) -> Optional[str]:
    """Warn if the Node.js on PATH does not satisfy the framework's range.

    Returns:
        The warning that was printed, or None
    """
    settings = context.settings
    node_range = required_node_range(context)
    if not node_range:
        return None

    current = get_node_version(settings.node_binary)
    if current is None:
        logger.warning(
            f"Could not determine the Node.js version; "
            f"{settings.framework_display_name} requires {node_range}"
        )
        return None

    if satisfies(current, node_range):
        logger.debug(f"Node {current} satisfies {node_range}")
        return None

    warning = (
        f"You are currently running Node v{current} but {settings.framework_display_name} "
        f"requires {node_range}. Please use a supported version of Node.\n"
        f"See {settings.docs_url}"
    )
    context.err_console.print(warning, style="red", markup=False, highlight=False, soft_wrap=True)
    return warning
