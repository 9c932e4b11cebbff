"""edgeapp app command."""

from .secrets import reveal_secrets

__all__ = ["reveal_secrets"]
