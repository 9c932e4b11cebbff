"""edgeapp app secrets functionality.

This package provides the client used to read the secrets of an app.
"""

from .api_client import AppSecret, AppSecretsClient, Secret

__all__ = ["AppSecret", "AppSecretsClient", "Secret"]
