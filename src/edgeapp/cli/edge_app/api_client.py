"""App API client implementation for the edgeapp platform API."""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel

from edgeapp.cli.core.api_client import APIClient
from edgeapp.cli.core.constants import APP_ID_PREFIX


class AppServerInfo(BaseModel):
    serverUrl: str
    status: Literal[
        "APP_SERVER_STATUS_UNSPECIFIED",
        "APP_SERVER_STATUS_ONLINE",
        "APP_SERVER_STATUS_OFFLINE",
    ]


# A deployed app, owning a namespace of secrets.
class App(BaseModel):
    appId: str
    name: str
    creatorId: str
    description: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime
    appServerInfo: Optional[AppServerInfo] = None


class ListAppsResponse(BaseModel):
    apps: Optional[
        List[App]
    ] = []  # Proto treats empty list and 0 and undefined so must be optional!
    nextPageToken: Optional[str] = None
    totalCount: Optional[int] = 0


def is_valid_app_id_format(app_id: str) -> bool:
    """Check if the given app ID has a valid format.

    Args:
        app_id: The app ID to validate

    Returns:
        bool: True if the app ID is a valid format, False otherwise
    """
    return app_id.startswith(APP_ID_PREFIX)


def is_valid_server_url_format(server_url: str) -> bool:
    """Check if the given server URL has a valid format.

    Args:
        server_url: The server URL to validate

    Returns:
        bool: True if the server URL is a valid format, False otherwise
    """
    parsed = urlparse(server_url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


class AppClient(APIClient):
    """Client for interacting with the App API service over HTTP."""

    async def get_app(
        self, app_id: Optional[str] = None, server_url: Optional[str] = None
    ) -> App:
        """Get an app by its ID or server URL via the API.

        Args:
            app_id: The ID of the app to retrieve
            server_url: The server URL of the app to retrieve

        Returns:
            App: The retrieved app

        Raises:
            ValueError: If the app_id or server_url is invalid
            httpx.HTTPStatusError: If the API returns an error (e.g., 404, 403)
            httpx.HTTPError: If the request fails
        """
        if (app_id and server_url) or (not app_id and not server_url):
            raise ValueError("One of app_id or server_url must be provided")

        request_data = {}

        if app_id:
            if not is_valid_app_id_format(app_id):
                raise ValueError(f"Invalid app ID format: {app_id}")
            request_data["appId"] = app_id
        elif server_url:
            if not is_valid_server_url_format(server_url):
                raise ValueError(f"Invalid server URL format: {server_url}")
            request_data["appServerUrl"] = server_url

        response = await self.post("/edge_app/get_app", request_data)

        res = response.json()
        if not res or "app" not in res:
            raise ValueError("API response did not contain the app data")

        return App(**res["app"])

    async def list_apps(
        self,
        name_filter: Optional[str] = None,
        max_results: int = 100,
        page_token: Optional[str] = None,
    ) -> ListAppsResponse:
        """List apps via the API.
        Args:
            name_filter: Optional filter for app names
            max_results: Maximum number of results to return (default 100)
            page_token: Optional token for pagination
        Returns:
            ListAppsResponse: List of apps with pagination info
        Raises:
            httpx.HTTPStatusError: If the API returns an error
            httpx.HTTPError: If the request fails
        """
        payload: Dict[str, Any] = {
            "maxResults": max_results,
            "isCreator": True,  # Only list apps created by the user
        }

        if page_token:
            payload["pageToken"] = page_token

        if name_filter:
            payload["nameFilter"] = name_filter

        response = await self.post("/edge_app/list_apps", payload)
        return ListAppsResponse(**response.json())

    async def get_app_id_by_name(self, name: str) -> Optional[str]:
        """Get the app ID for a given app name via the API.

        Args:
            name: The name of the app

        Returns:
            Optional[str]: The ID of the app, or None if not found

        Raises:
            ValueError: If the name is empty or invalid
            httpx.HTTPStatusError: If the API returns an error
            httpx.HTTPError: If the request fails
        """
        if not name or not isinstance(name, str):
            raise ValueError(f"Invalid app name format: {name}")

        apps = await self.list_apps(name_filter=name, max_results=10)
        if not apps.apps:
            return None

        # Return the app with exact name match
        return next((app.appId for app in apps.apps if app.name == name), None)

    async def resolve_app_identifier(self, identifier: str) -> Optional[str]:
        """Resolve an app ID, server URL or app name to the canonical app ID.

        Args:
            identifier: App ID (app_...), app server URL, or app name

        Returns:
            Optional[str]: The app ID, or None if no app matches the name

        Raises:
            ValueError: If the identifier is empty
            httpx.HTTPStatusError: If the API returns an error (e.g., 404, 403)
            httpx.HTTPError: If the request fails
        """
        identifier = (identifier or "").strip()
        if not identifier:
            raise ValueError("App identifier must be a non-empty string")

        if is_valid_app_id_format(identifier):
            app = await self.get_app(app_id=identifier)
            return app.appId
        if is_valid_server_url_format(identifier):
            app = await self.get_app(server_url=identifier)
            return app.appId

        return await self.get_app_id_by_name(identifier)
