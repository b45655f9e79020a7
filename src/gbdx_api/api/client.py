"""
Base API client for the GBDX platform.

Handles the HTTP session, request construction and response normalization
shared by every resource client.
"""

import json
import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants
from ..models import Credential, RequestDescriptor
from .response import handle_response

SECRET_FIELDS = frozenset({"password", "current_password", "new_password"})


class APIClient:
    """HTTP transport shared by all resource clients."""

    def __init__(
        self,
        timeout: Optional[float] = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        verify_ssl: bool = True,
        log_traffic: bool = False,
        logger: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize API client.

        Args:
            timeout: Request timeout in seconds, None leaves the transport default
            max_retries: Maximum number of retry attempts, 0 disables retries
            verify_ssl: Whether to verify SSL certificates
            log_traffic: Log requests and responses (development only)
            logger: Logger instance
            session: Preconfigured session, mainly for tests
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.log_traffic = log_traffic
        self.logger = logger or logging.getLogger(__name__)

        # Disable SSL warnings when verify_ssl is False
        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        if session is None:
            session = requests.Session()
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def fetch_parse(self, method: str, url: str, **kwargs) -> Any:
        """
        Send a request and normalize its response.

        Args:
            method: HTTP method
            url: Absolute URL
            **kwargs: Additional arguments for requests (headers, data, ...)

        Returns:
            Parsed payload

        Raises:
            APIError: On non-2xx status
            requests.exceptions.RequestException: On transport failure
        """
        kwargs.setdefault("verify", self.verify_ssl)
        if self.timeout is not None:
            kwargs.setdefault("timeout", self.timeout)

        if self.log_traffic:
            self.logger.info(f"Fetch request: {method} {url} {_redact(kwargs)!r}")

        try:
            response = self.session.request(method=method, url=url, **kwargs)
        except requests.exceptions.RequestException as e:
            if self.log_traffic:
                self.logger.error(f"Fetch error: {method} {url} - {e}")
            raise

        return handle_response(response, log_traffic=self.log_traffic, logger=self.logger)

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


class ResourceAPI:
    """Base for resource clients: a base URL, a credential and the shared transport."""

    path = ""

    def __init__(
        self,
        client: APIClient,
        credential: Credential,
        api_root: str = constants.DEFAULT_API_ROOT
    ):
        """
        Initialize resource client.

        Args:
            client: Shared HTTP transport
            credential: Token holder, possibly shared with other resources
            api_root: Platform root URL
        """
        self.client = client
        self.credential = credential
        self.base_url = f"{api_root.rstrip('/')}{self.path}"

    @property
    def logger(self) -> logging.Logger:
        return self.client.logger

    @property
    def token(self) -> Optional[str]:
        return self.credential.token

    def update_token(self, token: Optional[str]) -> None:
        """Replace the held token."""
        self.credential.update(token)

    def _fetch_parse(self, method: str, path: Optional[str] = "", body: Any = None) -> Any:
        """
        Make an authenticated JSON request against this resource.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: Path relative to the resource base URL
            body: Request body, serialized as JSON when present

        Returns:
            Parsed payload
        """
        request = RequestDescriptor.build(method, self.credential.authorization, path, body)
        return self.client.fetch_parse(
            request.method,
            request.url(self.base_url),
            **request.to_request_kwargs()
        )


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


def build_search_string(
    params: Optional[Dict[str, Any]],
    limit: Optional[int] = constants.DEFAULT_PAGE_SIZE,
    page: Optional[int] = constants.DEFAULT_PAGE,
    limit_param: str = constants.USERS_LIMIT_PARAM
) -> str:
    """
    Build a search query string: pagination first, then filters in insertion order.

    Values are not URL-encoded; callers must pass URL-safe values.

    Args:
        params: Filter fields
        limit: Page size, None falls back to the default
        page: Page number, None falls back to the default
        limit_param: Page size parameter name ('per_page' or 'limit')

    Returns:
        Query string starting with '?'
    """
    if limit is None:
        limit = constants.DEFAULT_PAGE_SIZE
    if page is None:
        page = constants.DEFAULT_PAGE

    query = f"?{limit_param}={_format_value(limit)}&page={_format_value(page)}"
    for field, value in (params or {}).items():
        query += f"&{field}={_format_value(value)}"
    return query


def _redact(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of request kwargs safe to log."""
    redacted = dict(kwargs)
    headers = dict(redacted.get("headers") or {})
    if "Authorization" in headers:
        headers["Authorization"] = "Bearer ***"
    redacted["headers"] = headers
    data = redacted.get("data")
    if isinstance(data, str):
        # JSON bodies arrive already serialized
        try:
            parsed = json.loads(data)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict) and SECRET_FIELDS & parsed.keys():
            redacted["data"] = json.dumps(_mask_secrets(parsed))
    elif isinstance(data, dict) and SECRET_FIELDS & data.keys():
        redacted["data"] = _mask_secrets(data)
    return redacted


def _mask_secrets(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: "***" if key in SECRET_FIELDS else value for key, value in data.items()}
