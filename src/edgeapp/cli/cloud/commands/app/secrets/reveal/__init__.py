from .main import reveal_secrets

__all__ = ["reveal_secrets"]
