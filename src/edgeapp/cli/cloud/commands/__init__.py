"""edgeapp command functions.

This package contains the core functionality of the edgeapp commands.
Each command is exported as a single function with a signature that matches the CLI interface.
"""

from .app import reveal_secrets

__all__ = ["reveal_secrets"]
