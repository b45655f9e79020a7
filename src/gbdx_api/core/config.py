"""
Configuration module for the GBDX API client.

Loads configuration from an optional JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from urllib.parse import urlparse

from . import constants


class Config:
    """Configuration manager for the client."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses GBDX_CONFIG_FILE
                        env var or defaults to 'config.json'. Only an explicitly
                        requested file is required to exist.
        """
        self._required = config_file is not None or bool(os.getenv("GBDX_CONFIG_FILE"))
        self.config_file = config_file or os.getenv("GBDX_CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._required:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # API configuration
        if os.getenv("GBDX_API"):
            self._set("api", "root", os.getenv("GBDX_API"))

        if os.getenv("GBDX_TIMEOUT"):
            self._set("api", "timeout", float(os.environ["GBDX_TIMEOUT"]))

        if os.getenv("GBDX_MAX_RETRIES"):
            self._set("api", "max_retries", int(os.environ["GBDX_MAX_RETRIES"]))

        # Authentication
        if os.getenv("GBDX_TOKEN"):
            self._set("authentication", "token", os.getenv("GBDX_TOKEN"))

        if os.getenv("GBDX_USERNAME"):
            self._set("authentication", "username", os.getenv("GBDX_USERNAME"))

        if os.getenv("GBDX_PASSWORD"):
            self._set("authentication", "password", os.getenv("GBDX_PASSWORD"))

        # Mode
        if os.getenv("GBDX_MODE"):
            self.config["mode"] = os.getenv("GBDX_MODE")

    def _validate_config(self) -> None:
        """Validate mode and API root."""
        if self.mode not in constants.VALID_MODES:
            raise ValueError(
                f"Invalid mode '{self.mode}'. Expected one of: {', '.join(constants.VALID_MODES)}"
            )

        parsed = urlparse(self.api_root)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid API root URL: {self.api_root}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.root')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_root(self) -> str:
        """Get API root URL without trailing slash."""
        return self.get("api.root", constants.DEFAULT_API_ROOT).rstrip("/")

    @property
    def mode(self) -> str:
        """Get execution mode."""
        return self.get("mode", constants.DEFAULT_MODE)

    @property
    def log_traffic(self) -> bool:
        """Whether request/response traffic is logged. Defaults to development mode only."""
        explicit = self.get("api.log_traffic")
        if explicit is not None:
            return bool(explicit)
        return self.mode == constants.MODE_DEVELOPMENT

    @property
    def timeout(self) -> Optional[float]:
        """Get request timeout in seconds, None leaves the transport default."""
        return self.get("api.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def max_retries(self) -> int:
        """Get maximum retry attempts."""
        return self.get("api.max_retries", constants.DEFAULT_MAX_RETRIES)

    @property
    def verify_ssl(self) -> bool:
        """Get SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def token(self) -> Optional[str]:
        """Get bearer token."""
        return self.get("authentication.token")

    @property
    def auth_username(self) -> Optional[str]:
        """Get authentication username."""
        return self.get("authentication.username")

    @property
    def auth_password(self) -> Optional[str]:
        """Get authentication password."""
        return self.get("authentication.password")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, root={self.api_root}, mode={self.mode})"
