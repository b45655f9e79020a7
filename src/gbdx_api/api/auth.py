"""
Authentication operations for the GBDX API.

Exchanges user credentials for an access token.
"""

from typing import Any

from ..core import constants
from .client import ResourceAPI


class AuthAPI(ResourceAPI):
    """OAuth token endpoint."""

    path = constants.AUTH_PATH

    def validate_password(self, username: str, password: str) -> Any:
        """
        Exchange username and password for a token (password grant).

        The body is form-encoded and no Authorization header is sent.

        Args:
            username: Account username
            password: Account password

        Returns:
            Token response payload

        Raises:
            APIError: On rejected credentials
        """
        self.logger.debug(f"Requesting token for {username}")
        data = {
            "grant_type": "password",
            "username": username,
            "password": password,
        }
        return self.client.fetch_parse("POST", f"{self.base_url}/token", data=data)
