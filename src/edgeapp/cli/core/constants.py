"""Core constants for the edgeapp CLI.

This module contains constants that are used throughout the edgeapp CLI codebase.
Centralizing these constants helps prevent circular imports and provides a single
source of truth for values that are referenced by multiple modules.
"""

import re

# File names and patterns
APP_CONFIG_FILENAME = "app.yaml"
APP_CONFIG_APP_ID_KEY = "app_id"

# Local state
DEFAULT_STATE_DIR = "~/.edgeapp"

# Environment variable names
ENV_PREFIX = "EDGEAPP_"
ENV_API_BASE_URL = f"{ENV_PREFIX}API_BASE_URL"
ENV_API_KEY = f"{ENV_PREFIX}API_KEY"
ENV_VERBOSE = f"{ENV_PREFIX}VERBOSE"

# API defaults
DEFAULT_API_BASE_URL = "https://api.edgeapp.dev/api"
DEFAULT_PAGE_SIZE = 100

# Entity id prefixes
APP_ID_PREFIX = "app_"
SECRET_ID_PREFIX = "appsec_"
# Strict pattern for secret id validation - only standard UUID format with prefix
SECRET_ID_PATTERN = re.compile(
    f"^{SECRET_ID_PREFIX}[0-9a-f]{{8}}-[0-9a-f]{{4}}-[0-9a-f]{{4}}-[0-9a-f]{{4}}-[0-9a-f]{{12}}$"
)
