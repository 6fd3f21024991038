"""Command-line interface for rnboot.

The console script points at the launcher pipeline, not at the Typer app
directly, because version flags and delegation to a project-local CLI are
decided before any argument parsing:
    rnboot = "rnboot.cli.app:main"
"""

from rnboot.cli.app import app, launch, main

__all__ = ["app", "launch", "main"]
