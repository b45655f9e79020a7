"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import requests  # type: ignore

# Add src/ to sys.path so the package imports without installation
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

GBDX_ENV_VARS = (
    "GBDX_API",
    "GBDX_MODE",
    "GBDX_TOKEN",
    "GBDX_USERNAME",
    "GBDX_PASSWORD",
    "GBDX_TIMEOUT",
    "GBDX_MAX_RETRIES",
    "GBDX_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's GBDX_* environment out of the tests."""
    for name in GBDX_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response():
    """Factory for real requests.Response objects."""
    def _make(status_code=200, body=b"", content_type=None, reason=None,
              url="https://geobigdata.io/users/v1/users/me"):
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode("utf-8") if isinstance(body, str) else body
        response.encoding = "utf-8"
        response.reason = reason
        response.url = url
        if content_type:
            response.headers["Content-Type"] = content_type
        return response
    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
