"""
Configuration tests.

Tests file loading, environment overrides and validation.
"""

import json

import pytest

from gbdx_api.core import Config, constants


pytestmark = pytest.mark.unit


@pytest.fixture
def config_file(tmp_path):
    """Write a configuration file and return its path."""
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = Config()

    assert config.api_root == constants.DEFAULT_API_ROOT
    assert config.mode == "production"
    assert config.log_traffic is False
    assert config.timeout is None
    assert config.max_retries == 0
    assert config.verify_ssl is True
    assert config.token is None


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "missing.json"))


def test_missing_file_from_env_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("GBDX_CONFIG_FILE", str(tmp_path / "missing.json"))

    with pytest.raises(FileNotFoundError):
        Config()


def test_values_from_file(config_file):
    config = Config(config_file({
        "mode": "development",
        "api": {"root": "https://staging.example.test/", "timeout": 10, "verify_ssl": False},
        "authentication": {"token": "file-token", "username": "jane"},
    }))

    assert config.api_root == "https://staging.example.test"
    assert config.mode == "development"
    assert config.log_traffic is True
    assert config.timeout == 10
    assert config.verify_ssl is False
    assert config.token == "file-token"
    assert config.auth_username == "jane"
    assert config.get("authentication.password") is None
    assert config.get("api.missing.deeper", "fallback") == "fallback"


def test_environment_overrides_file(config_file, monkeypatch):
    path = config_file({"api": {"root": "https://file.example.test"}, "authentication": {"token": "file-token"}})
    monkeypatch.setenv("GBDX_API", "https://env.example.test")
    monkeypatch.setenv("GBDX_TOKEN", "env-token")
    monkeypatch.setenv("GBDX_MODE", "test")
    monkeypatch.setenv("GBDX_TIMEOUT", "2.5")
    monkeypatch.setenv("GBDX_MAX_RETRIES", "3")
    monkeypatch.setenv("GBDX_USERNAME", "env-user")
    monkeypatch.setenv("GBDX_PASSWORD", "env-pass")

    config = Config(path)

    assert config.api_root == "https://env.example.test"
    assert config.token == "env-token"
    assert config.mode == "test"
    assert config.timeout == 2.5
    assert config.max_retries == 3
    assert config.auth_username == "env-user"
    assert config.auth_password == "env-pass"


def test_explicit_log_traffic_wins_over_mode(config_file):
    config = Config(config_file({"mode": "development", "api": {"log_traffic": False}}))

    assert config.log_traffic is False


def test_invalid_mode(config_file):
    with pytest.raises(ValueError, match="Invalid mode"):
        Config(config_file({"mode": "staging"}))


def test_invalid_api_root(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GBDX_API", "geobigdata.io")

    with pytest.raises(ValueError, match="Invalid API root"):
        Config()
