"""
Authentication data models.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Credential:
    """
    Mutable bearer token holder.

    A single instance is shared by every resource client that consumes it, so
    replacing the token is visible to all of them on their next call.
    """

    token: Optional[str] = field(default=None, repr=False)

    def update(self, token: Optional[str]) -> None:
        """Replace the held token."""
        self.token = token

    @property
    def authorization(self) -> str:
        """Authorization header value."""
        return f"Bearer {self.token}"
