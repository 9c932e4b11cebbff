import json
import logging
import os
from typing import Optional

from .constants import DEFAULT_CREDENTIALS_PATH
from .models import UserCredentials

logger = logging.getLogger(__name__)


def load_credentials() -> Optional[UserCredentials]:
    """Load user credentials from the credentials file.

    Returns:
        UserCredentials object if it exists, None otherwise
    """
    credentials_path = os.path.expanduser(DEFAULT_CREDENTIALS_PATH)
    if os.path.exists(credentials_path):
        try:
            with open(credentials_path, "r", encoding="utf-8") as f:
                return UserCredentials.from_json(f.read())
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            # Handle corrupted or old format credentials
            logger.warning(f"Ignoring unreadable credentials file {credentials_path}")
            return None
    return None


def load_api_key_credentials() -> Optional[str]:
    """Load the API key from the credentials file.

    Returns:
        String. API key if it exists and has not expired, None otherwise
    """
    credentials = load_credentials()
    if not credentials:
        return None
    if credentials.is_token_expired:
        logger.info("Stored credentials have expired")
        return None
    return credentials.api_key
