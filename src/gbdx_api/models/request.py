"""
Request data models.

Contains the descriptor built for every JSON call against a resource.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

HTTP_METHODS = ("GET", "POST", "PATCH", "DELETE")


def has_body(body: Any) -> bool:
    """
    Whether a body is sent.

    None, False, empty strings and zero are skipped; empty dicts and lists are sent.
    """
    if body is None or body is False:
        return False
    if isinstance(body, str):
        return body != ""
    if isinstance(body, (int, float)):
        return body != 0
    return True


@dataclass
class RequestDescriptor:
    """A single API call: method, path relative to the resource, optional JSON body."""

    method: str
    path: str = ""
    body: Optional[Any] = None
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.method = self.method.upper()
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        if self.path is None:
            self.path = ""

    @classmethod
    def build(
        cls,
        method: str,
        authorization: str,
        path: Optional[str] = "",
        body: Optional[Any] = None
    ) -> "RequestDescriptor":
        """
        Build a descriptor with derived headers.

        Args:
            method: HTTP method
            authorization: Authorization header value, read once at build time
            path: Path relative to the resource base URL
            body: Structured value serialized as JSON, see has_body

        Returns:
            RequestDescriptor with Authorization and, for bodies, Content-Type set
        """
        headers = {"Authorization": authorization}
        if has_body(body):
            headers["Content-Type"] = "application/json"
        else:
            body = None
        return cls(method=method, path=path or "", body=body, headers=headers)

    def url(self, base_url: str) -> str:
        """Target URL: plain concatenation of base URL and path."""
        return f"{base_url}{self.path}"

    def to_request_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for requests.Session.request (besides method and url)."""
        kwargs: Dict[str, Any] = {"headers": dict(self.headers)}
        if self.body is not None:
            kwargs["data"] = json.dumps(self.body)
        return kwargs
