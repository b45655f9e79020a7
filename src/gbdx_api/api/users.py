"""
User operations for the GBDX API.
"""

from typing import Any, Dict, Optional

from ..core import constants
from .client import ResourceAPI, build_search_string


class UsersAPI(ResourceAPI):
    """User management operations."""

    path = constants.USERS_PATH

    def create(self, params: Dict[str, Any]) -> Any:
        """Create a user."""
        return self._fetch_parse("POST", None, params)

    def me(self) -> Any:
        """Fetch the user owning the current token."""
        return self._fetch_parse("GET", "/me")

    def search(
        self,
        params: Optional[Dict[str, Any]] = None,
        page: Optional[int] = constants.DEFAULT_PAGE,
        limit: Optional[int] = constants.DEFAULT_PAGE_SIZE
    ) -> Any:
        """
        Search users.

        Args:
            params: Filter fields, appended to the query string unescaped
            page: Page number
            limit: Page size (sent as per_page)

        Returns:
            Search results payload
        """
        query = build_search_string(params, limit, page, constants.USERS_LIMIT_PARAM)
        return self._fetch_parse("GET", query)

    def update(self, user_id: Any, params: Dict[str, Any]) -> Any:
        """Update a user by ID."""
        return self._fetch_parse("PATCH", f"/{user_id}", params)

    def delete(self, user_id: Any) -> Any:
        """Delete a user by ID."""
        return self._fetch_parse("DELETE", f"/{user_id}")

    def resend_invite(self, user_id: Any) -> Any:
        """Resend the welcome email to a user."""
        return self._fetch_parse("GET", f"/{user_id}/emails/welcome")
