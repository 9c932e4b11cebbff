"""Shared utilities for app secrets commands."""

from dataclasses import dataclass
from typing import List, Optional, Union

import httpx

from edgeapp.cli.core.api_client import UnauthenticatedError
from edgeapp.cli.core.utils import run_async
from edgeapp.cli.exceptions import (
    APIError,
    InputError,
    MissingInputError,
    SecretNotFoundError,
)
from edgeapp.cli.secrets import AppSecretsClient, Secret
from edgeapp.cli.utils.ux import prompt_text

from ..utils import INVALID_API_KEY_MESSAGE


@dataclass(frozen=True)
class SingleSecret:
    """Reveal the secret with this name."""

    name: str


@dataclass(frozen=True)
class AllSecrets:
    """Reveal every secret of the app."""


RevealMode = Union[SingleSecret, AllSecrets]
RevealResult = Union[Secret, List[Secret]]


def resolve_secret_name(secret_name: Optional[str], interactive: bool) -> str:
    """Determine the name of the secret to reveal.

    Raises:
        MissingInputError: If no name is given and prompting is disabled
        InputError: If the prompt cannot read input
    """
    if secret_name is not None:
        return secret_name

    if not interactive:
        raise MissingInputError(
            "No secret name given. Pass the secret name as an argument or use --all."
        )

    try:
        return prompt_text("Enter the name of the secret")
    except EOFError as e:
        raise InputError("Could not read the secret name from the input.") from e


def fetch_secrets(
    client: AppSecretsClient, app_id: str, mode: RevealMode
) -> RevealResult:
    """Fetch one secret, or every secret of the app, with its value.

    Raises:
        SecretNotFoundError: If the named secret does not exist for the app
        APIError: If the API cannot be reached or rejects the request
    """
    try:
        if isinstance(mode, SingleSecret):
            value = run_async(client.get_secret_value_by_name(app_id, mode.name))
            if value is None:
                raise SecretNotFoundError(
                    f"Secret '{mode.name}' not found for app '{app_id}'."
                )
            return Secret(name=mode.name, value=value)

        return run_async(client.reveal_secrets(app_id))

    except UnauthenticatedError as e:
        raise APIError(INVALID_API_KEY_MESSAGE) from e
    except httpx.HTTPError as e:
        raise APIError(
            f"Failed to fetch secrets for app '{app_id}': {str(e)}"
        ) from e
    except ValueError as e:
        raise APIError(f"Unexpected response from the API: {str(e)}") from e
