"""edgeapp CLI entry point."""

import logging
import os
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as metadata_version
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import click
import typer
from rich.console import Console
from rich.panel import Panel
from typer.core import TyperGroup

from edgeapp.cli.cloud.commands import reveal_secrets
from edgeapp.cli.config import settings
from edgeapp.cli.core.constants import DEFAULT_STATE_DIR
from edgeapp.cli.exceptions import CLIError
from edgeapp.cli.utils.ux import print_error

# Setup file logging
LOG_DIR = Path(os.path.expanduser(DEFAULT_STATE_DIR)) / "logs"
os.makedirs(LOG_DIR, exist_ok=True)
LOG_FILE = LOG_DIR / "edgeapp.log"

# Configure separate file logging without console output
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding="utf-8",
)
file_handler.setFormatter(
    logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
)

# Configure logging - only sending to file, not to console
logging.basicConfig(
    level=logging.DEBUG if settings.VERBOSE else logging.INFO, handlers=[file_handler]
)


class HelpfulTyperGroup(TyperGroup):
    """Typer group that shows help before usage errors for better UX."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            click.echo(ctx.get_help(), err=True)

            console = Console(stderr=True)
            error_panel = Panel(
                str(e),
                title="Error",
                title_align="left",
                border_style="red",
                expand=True,
            )
            console.print(error_panel)
            ctx.exit(2)

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except CLIError as e:
            # Handle CLIError cleanly - show error message and exit
            logging.error(f"CLI error: {str(e)}")
            print_error(str(e))
            ctx.exit(e.exit_code)


# Root typer for `edgeapp` CLI commands
app = typer.Typer(
    help="edgeapp CLI for managing deployed apps",
    no_args_is_help=True,
    cls=HelpfulTyperGroup,
)

# Sub-typer for `edgeapp app secrets` commands
app_cmd_app_secrets = typer.Typer(
    help="Management commands for the secrets of an app",
    no_args_is_help=True,
    cls=HelpfulTyperGroup,
)
app_cmd_app_secrets.command(
    name="reveal",
    help="""
Reveal the value of an existing secret related to an app.\n\n

The app is taken from APP_ID, else from the app.yaml in --app-dir (or the current directory),
else it is prompted for. With --all, every secret is printed as NAME="VALUE" lines.
""".strip(),
)(reveal_secrets)

# Sub-typer for `edgeapp app` commands
app_cmd_app = typer.Typer(
    help="Management commands for an app",
    no_args_is_help=True,
    cls=HelpfulTyperGroup,
)
app_cmd_app.add_typer(app_cmd_app_secrets, name="secrets", help="Manage app secrets")
app.add_typer(app_cmd_app, name="app", help="Manage an app")


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", help="Show version and exit", is_flag=True
    ),
) -> None:
    """edgeapp CLI."""
    if version:
        try:
            v = metadata_version("edgeapp")
        except PackageNotFoundError:
            v = "unknown"
        typer.echo(f"edgeapp CLI version: {v}")
        raise typer.Exit()


def run() -> None:
    """Run the CLI application."""
    try:
        app()
    except Exception as e:
        # Unexpected errors - log full exception and show clean error to user
        logging.exception("Unhandled exception in CLI")
        print_error(f"An unexpected error occurred: {str(e)}")
        raise typer.Exit(1) from e


if __name__ == "__main__":
    run()
