"""Reveal command for edgeapp app secrets.

This module provides the reveal_secrets function which prints the plaintext value
of one secret, or of every secret, of an app.
"""

import re
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from edgeapp.cli.config import settings
from edgeapp.cli.core.constants import (
    DEFAULT_API_BASE_URL,
    ENV_API_BASE_URL,
    ENV_API_KEY,
)
from edgeapp.cli.core.utils import stdin_is_terminal
from edgeapp.cli.edge_app import AppClient
from edgeapp.cli.exceptions import ConflictingOptionsError
from edgeapp.cli.secrets import AppSecretsClient, Secret
from edgeapp.cli.utils.render import (
    ListFormat,
    item_format_for,
    render_item,
    render_list,
    sanitize_value,
)
from edgeapp.cli.utils.ux import print_info, print_warning

from ...utils import get_effective_api_key, handle_api_errors, resolve_app_id
from ..utils import (
    AllSecrets,
    RevealMode,
    RevealResult,
    SingleSecret,
    fetch_secrets,
    resolve_secret_name,
)

SHELL_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@handle_api_errors
def reveal_secrets(
    secret_name: Optional[str] = typer.Argument(
        None,
        metavar="NAME",
        help="The name of the secret to get the value of.",
        show_default=False,
    ),
    app_id: Optional[str] = typer.Argument(
        None,
        metavar="APP_ID",
        help="The ID, server URL or name of the app the secret is related to.",
        show_default=False,
    ),
    app_dir: Optional[Path] = typer.Option(
        None,
        "--app-dir",
        help="Path to the directory containing the app.yaml of the app.",
        file_okay=False,
    ),
    all_secrets: bool = typer.Option(
        False,
        "--all",
        help="Reveal all the secrets related to the app.",
    ),
    format: Optional[ListFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format. Without it, only the value (or NAME=\"VALUE\" lines with --all) is printed.",
        case_sensitive=False,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Don't print any message.",
    ),
    non_interactive: bool = typer.Option(
        not stdin_is_terminal(),
        "--non-interactive",
        help="Do not prompt for user input. Default when stdin is not a terminal.",
    ),
    api_url: Optional[str] = typer.Option(
        settings.API_BASE_URL,
        "--api-url",
        help="API base URL. Defaults to EDGEAPP_API_BASE_URL environment variable.",
        envvar=ENV_API_BASE_URL,
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="API key for authentication. Defaults to EDGEAPP_API_KEY environment variable.",
        envvar=ENV_API_KEY,
        show_default=False,
    ),
) -> None:
    """Reveal the value of an existing secret related to an app."""
    validate_reveal_options(secret_name, app_id, app_dir, all_secrets, format)

    effective_api_key = get_effective_api_key(api_key, "reveal secrets")
    effective_api_url = api_url or DEFAULT_API_BASE_URL
    app_client = AppClient(api_url=effective_api_url, api_key=effective_api_key)
    secrets_client = AppSecretsClient(
        api_url=effective_api_url, api_key=effective_api_key
    )

    interactive = not non_interactive
    resolved_app_id = resolve_app_id(
        app_client, app_id, app_dir, interactive=interactive, quiet=quiet
    )

    mode: RevealMode
    if all_secrets:
        mode = AllSecrets()
    else:
        mode = SingleSecret(resolve_secret_name(secret_name, interactive))

    print_info(
        f"Revealing {_describe_mode(mode)} of app {resolved_app_id}",
        console_output=not quiet,
    )
    result = fetch_secrets(secrets_client, resolved_app_id, mode)

    if isinstance(result, list) and format is None:
        unsafe_names = unsafe_secret_names(result)
        if unsafe_names:
            print_warning(
                "Secret names that are not valid shell variable names: "
                + escape(", ".join(repr(name) for name in unsafe_names)),
                console_output=not quiet,
            )

    output = render_reveal_output(result, format)
    if isinstance(result, list) and not result and format is None:
        return
    # A plain single value is printed as-is, everything else line-terminated
    typer.echo(output, nl=not (isinstance(result, Secret) and format is None))


def validate_reveal_options(
    secret_name: Optional[str],
    app_id: Optional[str],
    app_dir: Optional[Path],
    all_secrets: bool,
    format: Optional[ListFormat],
) -> None:
    """Reject argument combinations that can never succeed, before any API call.

    Raises:
        ConflictingOptionsError: If NAME and --all, or APP_ID and --app-dir, are combined
        UnsupportedFormatError: If a list-only format is requested for a single secret
    """
    if secret_name is not None and all_secrets:
        raise ConflictingOptionsError(
            "The secret NAME argument cannot be used together with --all."
        )
    if app_id and app_dir:
        raise ConflictingOptionsError(
            "The APP_ID argument cannot be used together with --app-dir."
        )
    if not all_secrets and format is not None:
        item_format_for(format)


def render_reveal_output(
    result: RevealResult, format: Optional[ListFormat] = None
) -> str:
    """Render revealed secret(s) for stdout.

    | result       | format                     | output                          |
    |--------------|----------------------------|---------------------------------|
    | one secret   | none                       | the raw value                   |
    | one secret   | json, yaml, table          | the secret as one item          |
    | one secret   | item-table                 | UnsupportedFormatError          |
    | secret list  | none                       | NAME="sanitized value" lines    |
    | secret list  | json, yaml, table, item-t. | the secrets as a collection     |
    """
    if isinstance(result, Secret):
        if format is None:
            return result.value
        return render_item(result, item_format_for(format))

    if format is None:
        return _render_assignments(result)
    return render_list(result, format, model=Secret)


def unsafe_secret_names(secrets: List[Secret]) -> List[str]:
    """Names that would not form a valid NAME=\"VALUE\" shell assignment."""
    return [
        secret.name for secret in secrets if not SHELL_NAME_PATTERN.fullmatch(secret.name)
    ]


def _render_assignments(secrets: List[Secret]) -> str:
    return "\n".join(
        f'{secret.name}="{sanitize_value(secret.value)}"' for secret in secrets
    )


def _describe_mode(mode: RevealMode) -> str:
    if isinstance(mode, SingleSecret):
        return f"secret '{mode.name}'"
    return "all secrets"
