"""
Response normalization for GBDX API calls.

Turns a raw requests.Response into either a parsed success payload or a
raised APIError carrying the normalized {response, code} shape.
"""

import logging
from typing import Any, Dict, Optional

import requests  # type: ignore


class APIError(Exception):
    """Non-2xx response from the platform."""

    def __init__(self, response: Any, code: int, url: Optional[str] = None):
        """
        Initialize API error.

        Args:
            response: Parsed JSON error body, or the status text when the body is not JSON
            code: HTTP status code
            url: Request URL, when known
        """
        super().__init__(f"HTTP {code}: {response}")
        self.response = response
        self.code = code
        self.url = url

    def to_dict(self) -> Dict[str, Any]:
        """Normalized error shape."""
        return {"response": self.response, "code": self.code}


def is_success(status_code: int) -> bool:
    """2xx only; requests' Response.ok also accepts 3xx."""
    return 200 <= status_code < 300


def handle_response(
    response: requests.Response,
    log_traffic: bool = False,
    logger: Optional[logging.Logger] = None
) -> Any:
    """
    Normalize a response.

    Success:
        - 204 returns the text body (JSON is never parsed for it)
        - application/json content returns the parsed JSON
        - anything else returns the text body
        - a body that fails to parse returns None

    Failure:
        - raises APIError with the parsed JSON body, or the status text as fallback

    Args:
        response: Raw response
        log_traffic: Log response details
        logger: Logger instance

    Returns:
        Parsed payload

    Raises:
        APIError: On any non-2xx status
    """
    logger = logger or logging.getLogger(__name__)

    if is_success(response.status_code):
        content_type = response.headers.get("content-type") or ""
        try:
            if response.status_code == 204:
                result = response.text
            elif "application/json" in content_type:
                result = response.json()
            else:
                result = response.text
        except ValueError as e:
            if log_traffic:
                logger.error(f"Fetch error: {response.url} - {e}")
            return None

        if log_traffic:
            logger.info(f"Fetch response: {response.url} {result!r}")
        return result

    try:
        body = response.json()
    except ValueError:
        body = response.reason

    error = APIError(body, response.status_code, url=response.url)
    if log_traffic:
        logger.error(f"Fetch error: {response.url} {error.to_dict()!r}")
    raise error
