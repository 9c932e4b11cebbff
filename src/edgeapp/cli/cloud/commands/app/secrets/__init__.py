"""edgeapp app secrets command."""

from .reveal import reveal_secrets

__all__ = ["reveal_secrets"]
