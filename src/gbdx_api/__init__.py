"""
GBDX API Client

This package provides a thin client for the GBDX platform REST API:
authentication, users, accounts and billing.
"""

__version__ = "0.1.0"
__description__ = "Client for the GBDX platform REST API"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name in ("create_client", "GBDXClient", "APIError"):
        from . import api
        return getattr(api, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "APIError",
    "GBDXClient",
    "create_client",
]
