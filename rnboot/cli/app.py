"""rnboot CLI entry point.

Command structure: rnboot <command> [args] [--options]

Inside a React Native project every command is handed to the project-local
CLI. Outside one, only `init` is available:

    rnboot init AwesomeProject
    rnboot init AwesomeProject --verbose
    rnboot --version
"""

import sys
from typing import Optional

import click
import typer
from pydantic import ValidationError
from typer.core import TyperGroup

from rnboot.cli.helpers import PROG_NAME, configure_logging, err_console
from rnboot.core.context import LaunchContext
from rnboot.core.models import resolve_log_level
from rnboot.core.project import ProjectInitializer
from rnboot.core.provider import probe_local_provider
from rnboot.core.version import report_versions, wants_version


class LauncherGroup(TyperGroup):
    """Command group that reports unknown commands as launcher errors."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = args[0] if args else None
        if cmd_name is not None and self.get_command(ctx, cmd_name) is None:
            err_console.print(
                f"Command `{cmd_name}` unrecognized. "
                f"Did you mean to run this inside a react-native project?",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            raise typer.Exit(1)
        return super().resolve_command(ctx, args)


# Create main app
app = typer.Typer(
    name=PROG_NAME,
    cls=LauncherGroup,
    help="Bootstrap launcher for the React Native CLI",
    add_completion=False,
    context_settings={"ignore_unknown_options": True},
)


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    """Create React Native projects; inside a project, commands go to its local CLI."""
    if ctx.obj is None:
        ctx.obj = LaunchContext.from_environment(sys.argv[1:])

    if ctx.invoked_subcommand is None:
        err_console.print(
            f"You did not pass any commands, did you mean to run `{PROG_NAME} init`?",
            markup=False,
            highlight=False,
        )
        raise typer.Exit(1)


@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def init(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Name of the project to create"),
    verbose: bool = typer.Option(False, "--verbose", help="Show npm output, with npm's --verbose"),
    debug: bool = typer.Option(False, "--debug", help="Show npm output"),
) -> None:
    """Create a new React Native project in ./<name>.

    Examples:

      rnboot init AwesomeProject

      rnboot init AwesomeProject --verbose
    """
    launch_ctx: LaunchContext = ctx.obj

    if not name:
        err_console.print(
            f"Usage: {PROG_NAME} init <ProjectName> [--debug|--verbose]",
            markup=False,
            highlight=False,
        )
        raise typer.Exit(1)

    # verbose/debug are declared for --help; the level comes from the raw argv
    log_level = resolve_log_level(launch_ctx.argv)
    raise typer.Exit(ProjectInitializer(launch_ctx).init(name, log_level))


def launch(context: LaunchContext) -> None:
    """Run the launcher pipeline for one invocation.

    Order matters: version flags win over everything, then an installed
    local CLI, and only then the launcher's own commands.

    Raises:
        SystemExit: Always, with the invocation's exit status
    """
    if wants_version(context.argv):
        report_versions(context)
        raise SystemExit(0)

    provider = probe_local_provider(context)
    if provider is not None:
        raise SystemExit(provider.run())

    app(args=context.argv, prog_name=PROG_NAME, obj=context)


def main(argv: Optional[list[str]] = None) -> None:
    """Console script entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        context = LaunchContext.from_environment(args)
    except ValidationError as e:
        err_console.print(f"Error: invalid configuration: {e}", markup=False)
        raise SystemExit(1)

    configure_logging(context.settings.log_level, resolve_log_level(args))
    launch(context)


if __name__ == "__main__":
    main()
