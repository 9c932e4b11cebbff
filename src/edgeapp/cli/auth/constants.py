"""Constants for edgeapp CLI authentication."""

# Default location of the stored user credentials
DEFAULT_CREDENTIALS_PATH = "~/.edgeapp/credentials.json"
