"""
Account operations for the GBDX API.
"""

from typing import Any, Dict, Optional

from ..core import constants
from .client import ResourceAPI, build_search_string


class AccountsAPI(ResourceAPI):
    """Account management operations."""

    path = constants.ACCOUNTS_PATH

    def create(self, params: Dict[str, Any]) -> Any:
        return self._fetch_parse("POST", None, params)

    def get(self, account_id: Any) -> Any:
        return self._fetch_parse("GET", f"/{account_id}")

    def search(
        self,
        params: Optional[Dict[str, Any]] = None,
        page: Optional[int] = constants.DEFAULT_PAGE,
        limit: Optional[int] = constants.DEFAULT_PAGE_SIZE
    ) -> Any:
        """Search accounts; page size is sent as 'limit'."""
        query = build_search_string(params, limit, page, constants.ACCOUNTS_LIMIT_PARAM)
        return self._fetch_parse("GET", query)

    def update(self, account_id: Any, params: Dict[str, Any]) -> Any:
        return self._fetch_parse("PATCH", f"/{account_id}", params)

    def delete(self, account_id: Any) -> Any:
        return self._fetch_parse("DELETE", f"/{account_id}")
