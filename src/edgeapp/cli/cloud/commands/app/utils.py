"""Shared utilities for app commands."""

import logging
from functools import wraps
from pathlib import Path
from typing import Optional

import httpx

from edgeapp.cli.auth import load_api_key_credentials
from edgeapp.cli.config import settings
from edgeapp.cli.core.api_client import UnauthenticatedError, is_not_found
from edgeapp.cli.core.utils import run_async
from edgeapp.cli.edge_app import AppClient, ProjectConfigError, load_app_id_from_config
from edgeapp.cli.exceptions import (
    APIError,
    CLIError,
    InputError,
    LocalIOError,
    MissingInputError,
    ResolutionError,
)
from edgeapp.cli.utils.ux import print_warning, prompt_text

logger = logging.getLogger(__name__)

INVALID_API_KEY_MESSAGE = (
    "Invalid API key. Run 'edgeapp login' or set EDGEAPP_API_KEY environment "
    "variable with new API key."
)


def get_effective_api_key(api_key: Optional[str], action: str) -> str:
    """Pick the API key from the option, the settings or the stored credentials.

    Raises:
        CLIError: If no API key is available
    """
    effective_api_key = api_key or settings.API_KEY or load_api_key_credentials()

    if not effective_api_key:
        raise CLIError(
            f"Must be logged in to {action}. Run 'edgeapp login', set EDGEAPP_API_KEY "
            "environment variable or specify --api-key option."
        )
    return effective_api_key


def resolve_app_identifier(client: AppClient, identifier: str) -> str:
    """Resolve an app ID, server URL or name to the app ID using the API.

    Raises:
        ResolutionError: If no app matches the identifier
        APIError: If the API cannot be reached or rejects the request
    """
    try:
        app_id = run_async(client.resolve_app_identifier(identifier))
    except UnauthenticatedError as e:
        raise APIError(INVALID_API_KEY_MESSAGE) from e
    except httpx.HTTPStatusError as e:
        if is_not_found(e):
            raise ResolutionError(f"App '{identifier}' not found.") from e
        raise APIError(f"Failed to look up app '{identifier}': {str(e)}") from e
    except httpx.HTTPError as e:
        raise APIError(f"Failed to connect to API: {str(e)}") from e
    except ValueError as e:
        raise ResolutionError(f"Could not resolve app '{identifier}': {str(e)}") from e

    if not app_id:
        raise ResolutionError(f"App '{identifier}' not found.")
    return app_id


def prompt_app_identifier() -> str:
    """Interactively ask for an app name or ID.

    Raises:
        InputError: If the prompt cannot read input
    """
    try:
        return prompt_text("Enter the name of the app")
    except EOFError as e:
        raise InputError("Could not read the app name from the input.") from e


def resolve_app_id(
    client: AppClient,
    app_identifier: Optional[str],
    app_dir: Optional[Path],
    interactive: bool,
    quiet: bool = False,
) -> str:
    """Determine the app ID the user means.

    The first available source wins:
    1. The explicit app identifier, resolved through the API
    2. The app ID cached in app.yaml in app_dir (or the current directory)
    3. An interactive prompt for the app name, resolved through the API

    Raises:
        ResolutionError: If an identifier does not match any app
        LocalIOError: If the current directory cannot be determined
        MissingInputError: If no app is given and prompting is disabled
        InputError: If the prompt cannot read input
    """
    if app_identifier:
        return resolve_app_identifier(client, app_identifier)

    if app_dir is None:
        try:
            app_dir = Path.cwd()
        except OSError as e:
            raise LocalIOError(
                f"Could not determine the current directory: {str(e)}"
            ) from e

    try:
        app_id = load_app_id_from_config(app_dir)
    except ProjectConfigError as e:
        print_warning(
            f"Ignoring project config: {str(e)}", console_output=not quiet
        )
        app_id = None

    if app_id:
        logger.info(f"Using app id {app_id} from the project config in {app_dir}")
        return app_id

    if not interactive:
        raise MissingInputError(
            "No app id given. Pass the app id as an argument or use --app-dir to "
            "point to a directory with an app.yaml."
        )

    return resolve_app_identifier(client, prompt_app_identifier())


def handle_api_errors(func):
    """Decorator to handle common API errors for app commands.

    Args:
        func: Function to wrap with error handling

    Returns:
        Wrapped function with error handling
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CLIError:
            # Re-raise CLIErrors as-is
            raise
        except UnauthenticatedError as e:
            raise APIError(INVALID_API_KEY_MESSAGE) from e
        except httpx.HTTPError as e:
            raise APIError(f"API request failed: {str(e)}") from e
        except Exception as e:
            # Get the original function name for better error messages
            func_name = func.__name__.replace("_", " ")
            raise CLIError(f"Error in {func_name}: {str(e)}") from e

    return wrapper
