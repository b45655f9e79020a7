"""
Data models for the GBDX API client.

Contains the credential holder and the per-call request descriptor.
"""

from .auth import Credential
from .request import RequestDescriptor

__all__ = [
    "Credential",
    "RequestDescriptor",
]
