"""Authentication models for the edgeapp CLI."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class UserCredentials:
    """User authentication credentials and identity information."""

    # Authentication
    api_key: str = field(repr=False)
    token_expires_at: Optional[datetime] = None

    # Identity
    username: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_token_expired(self) -> bool:
        """Check if the token is expired."""
        if not self.token_expires_at:
            return False
        now = (
            datetime.now(self.token_expires_at.tzinfo)
            if self.token_expires_at.tzinfo
            else datetime.now()
        )
        return now > self.token_expires_at

    @classmethod
    def from_dict(cls, data: dict) -> "UserCredentials":
        """Create from dictionary loaded from JSON."""

        token_expires_at = None
        if data.get("token_expires_at"):
            token_expires_at = datetime.fromisoformat(data["token_expires_at"])

        return cls(
            api_key=data["api_key"],
            token_expires_at=token_expires_at,
            username=data.get("username"),
            email=data.get("email"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "UserCredentials":
        """Create from JSON string."""
        data = json.loads(json_str)
        return cls.from_dict(data)
