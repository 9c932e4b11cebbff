"""App secrets API client implementation for the edgeapp platform API."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from edgeapp.cli.core.api_client import APIClient, is_not_found
from edgeapp.cli.core.constants import DEFAULT_PAGE_SIZE, SECRET_ID_PATTERN


class AppSecret(BaseModel):
    """Secret metadata as listed by the API (no value)."""

    secretId: str
    name: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class ListAppSecretsResponse(BaseModel):
    secrets: Optional[List[AppSecret]] = []
    nextPageToken: Optional[str] = None


class Secret(BaseModel):
    """A revealed secret: its name and plaintext value."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class AppSecretsClient(APIClient):
    """Client for reading the secrets of an app over HTTP."""

    async def get_secret_by_name(self, app_id: str, name: str) -> Optional[AppSecret]:
        """Look up a secret of an app by its name.

        Args:
            app_id: The ID of the app owning the secret
            name: The secret name

        Returns:
            Optional[AppSecret]: The secret metadata, or None if the app has no such secret

        Raises:
            ValueError: If app_id or name is empty
            httpx.HTTPStatusError: If the API returns an error other than 404
            httpx.HTTPError: If the request fails
        """
        if not app_id:
            raise ValueError("app_id must be provided")
        if not name:
            raise ValueError("Secret name must be a non-empty string")

        try:
            response = await self.post(
                "/app_secrets/get_secret_by_name", {"appId": app_id, "name": name}
            )
        except httpx.HTTPStatusError as e:
            if is_not_found(e):
                return None
            raise

        secret = response.json().get("secret")
        if not secret:
            return None

        return AppSecret(**secret)

    async def get_secret_value(self, secret_id: str) -> str:
        """Get a secret value from the API.

        Args:
            secret_id: The secret ID returned by the API

        Returns:
            str: The secret value

        Raises:
            ValueError: If the secret ID is invalid or has no value
            httpx.HTTPStatusError: If the API returns an error (e.g., 404, 403)
            httpx.HTTPError: If the request fails
        """
        if not self._is_valid_secret_id(secret_id):
            raise ValueError(f"Invalid secret ID format: {secret_id}")

        response = await self.post(
            "/app_secrets/get_secret_value", {"secretId": secret_id}
        )

        value = response.json().get("value")
        if value is None:
            raise ValueError(f"Secret {secret_id} doesn't have a value")

        return value

    async def get_secret_value_by_name(self, app_id: str, name: str) -> Optional[str]:
        """Get the value of an app's secret by the secret name.

        Returns:
            Optional[str]: The secret value, or None if the app has no such secret
        """
        secret = await self.get_secret_by_name(app_id, name)
        if secret is None:
            return None
        return await self.get_secret_value(secret.secretId)

    async def list_app_secrets(
        self,
        app_id: str,
        max_results: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
    ) -> ListAppSecretsResponse:
        """List one page of the secrets of an app.

        Args:
            app_id: The ID of the app
            max_results: Maximum number of results to return
            page_token: Optional token for pagination

        Returns:
            ListAppSecretsResponse: Secret metadata with pagination info

        Raises:
            httpx.HTTPStatusError: If the API returns an error
            httpx.HTTPError: If the request fails
        """
        if not app_id:
            raise ValueError("app_id must be provided")

        payload: Dict[str, Any] = {
            "appId": app_id,
            "maxResults": max_results,
        }
        if page_token:
            payload["pageToken"] = page_token

        response = await self.post("/app_secrets/list", payload)
        return ListAppSecretsResponse(**response.json())

    async def list_all_app_secrets(self, app_id: str) -> List[AppSecret]:
        """List every secret of an app, following pagination."""
        secrets: List[AppSecret] = []
        page_token: Optional[str] = None
        while True:
            page = await self.list_app_secrets(app_id, page_token=page_token)
            secrets.extend(page.secrets or [])
            if not page.nextPageToken or page.nextPageToken == page_token:
                return secrets
            page_token = page.nextPageToken

    async def reveal_secrets(self, app_id: str) -> List[Secret]:
        """Get the name and value of every secret of an app.

        Values are fetched one at a time, in listing order.
        """
        revealed: List[Secret] = []
        for secret in await self.list_all_app_secrets(app_id):
            value = await self.get_secret_value(secret.secretId)
            revealed.append(Secret(name=secret.name, value=value))
        return revealed

    def _is_valid_secret_id(self, secret_id: str) -> bool:
        if not isinstance(secret_id, str) or not secret_id:
            return False

        return bool(SECRET_ID_PATTERN.match(secret_id))
