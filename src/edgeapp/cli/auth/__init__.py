"""edgeapp CLI auth utilities.

This package provides utilities for authentication (for now, api keys).
"""

from .main import load_api_key_credentials, load_credentials
from .models import UserCredentials

__all__ = [
    "load_api_key_credentials",
    "load_credentials",
    "UserCredentials",
]
