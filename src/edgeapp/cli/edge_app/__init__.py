"""edgeapp App service functionality.

This package provides the App API client and the project config loader.
"""

from .api_client import AppClient
from .project_config import ProjectConfigError, load_app_id_from_config

__all__ = ["AppClient", "ProjectConfigError", "load_app_id_from_config"]
