"""
API layer for the GBDX platform.

Provides the authentication, users, accounts and billing resource clients
and the facade that ties them to one token.
"""

import logging
from typing import Optional, TYPE_CHECKING

import requests  # type: ignore

from ..core import constants
from ..models import Credential
from .client import APIClient, ResourceAPI, build_search_string
from .response import APIError, handle_response
from .auth import AuthAPI
from .users import UsersAPI
from .accounts import AccountsAPI
from .billing import BillingAPI

if TYPE_CHECKING:
    from ..core import Config


class GBDXClient:
    """
    Unified client for the GBDX platform.

    Users, accounts and billing share one credential; the auth client keeps its
    own since it issues tokens rather than consuming them.
    """

    def __init__(
        self,
        token: Optional[str],
        api_root: Optional[str] = None,
        timeout: Optional[float] = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        verify_ssl: bool = True,
        log_traffic: bool = False,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize unified client.

        Args:
            token: Bearer token
            api_root: Platform root URL, defaults to https://geobigdata.io
            timeout: Request timeout in seconds, None leaves the transport default
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            log_traffic: Log requests and responses
            logger: Logger instance
            session: Preconfigured session
        """
        api_root = api_root or constants.DEFAULT_API_ROOT
        self.client = APIClient(
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            log_traffic=log_traffic,
            logger=logger,
            session=session
        )
        self.credential = Credential(token)

        self.auth = AuthAPI(self.client, Credential(token), api_root)
        self.users = UsersAPI(self.client, self.credential, api_root)
        self.accounts = AccountsAPI(self.client, self.credential, api_root)
        self.billing = BillingAPI(self.client, self.credential, api_root)

    @classmethod
    def from_config(
        cls,
        config: "Config",
        token: Optional[str] = None,
        logger: Optional[logging.Logger] = None
    ) -> "GBDXClient":
        """Build a client from configuration; an explicit token wins over the configured one."""
        return cls(
            token=token or config.token,
            api_root=config.api_root,
            timeout=config.timeout,
            max_retries=config.max_retries,
            verify_ssl=config.verify_ssl,
            log_traffic=config.log_traffic,
            logger=logger
        )

    def update_token(self, token: Optional[str]) -> None:
        """Replace the token used by users, accounts and billing for subsequent calls."""
        for resource in (self.users, self.accounts, self.billing):
            resource.update_token(token)

    def close(self) -> None:
        """Close the underlying session."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def create_client(token: Optional[str], api_root: Optional[str] = None, **kwargs) -> GBDXClient:
    """
    Create the resource clients for a token.

    The API root comes from api_root only; GBDX_API is not read here. Use
    GBDXClient.from_config(Config()) to honor the environment.

    Args:
        token: Bearer token
        api_root: Platform root URL, defaults to https://geobigdata.io
        **kwargs: Transport options passed to GBDXClient

    Returns:
        GBDXClient exposing auth, users, accounts, billing and update_token
    """
    return GBDXClient(token, api_root=api_root, **kwargs)


__all__ = [
    "APIClient",
    "APIError",
    "AccountsAPI",
    "AuthAPI",
    "BillingAPI",
    "GBDXClient",
    "ResourceAPI",
    "UsersAPI",
    "build_search_string",
    "create_client",
    "handle_response",
]
