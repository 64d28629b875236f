"""
Configuration management for the GitHub MCP Server.

Handles environment variables, validation, and configuration defaults
with proper error handling and security practices.
"""

import os
from typing import Optional, Dict, Any
from pathlib import Path
from dotenv import load_dotenv
from loguru import logger

from .constants import API, PAGINATION
from .exceptions import ConfigurationError


class Config:
    """Configuration manager for the GitHub MCP Server."""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration with environment variables.

        Args:
            env_file: Optional path to .env file
        """
        # Load environment variables
        if env_file and Path(env_file).exists():
            load_dotenv(env_file)
        else:
            load_dotenv()  # Load from default locations

        # Required environment variables
        self._required_vars = {
            API.TOKEN_ENV_VAR: "GitHub personal access token used as bearer credential",
        }

        # Optional environment variables with defaults
        self._optional_vars = {
            "GITHUB_API_URL": API.BASE_URL,
            "GITHUB_TIMEOUT": str(API.DEFAULT_TIMEOUT),
            "DEFAULT_PER_PAGE": str(PAGINATION.DEFAULT_PER_PAGE),
            "LOG_LEVEL": "INFO",
            "MCP_SERVER_NAME": "github",
        }

        # Initialize configuration
        self._validate_and_load()

    def _get_token(self) -> Optional[str]:
        """Read the bearer token, preferring the dedicated variable."""
        return os.getenv(API.TOKEN_ENV_VAR) or os.getenv(API.TOKEN_ENV_VAR_FALLBACK)

    def _validate_and_load(self) -> None:
        """Validate required variables and load all configuration."""
        missing_vars = []

        if not self._get_token():
            for var_name, description in self._required_vars.items():
                missing_vars.append(f"{var_name} ({description})")

        if missing_vars:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join([var.split(' (')[0] for var in missing_vars])}",
                missing_vars=missing_vars,
                details={
                    "missing_variables": missing_vars,
                    "suggestion": f"Set {API.TOKEN_ENV_VAR} (or {API.TOKEN_ENV_VAR_FALLBACK}) in your .env file or system environment"
                }
            )

        # Load all configuration values
        self._load_values()
        logger.info("Configuration loaded and validated successfully")

    def _get_optional(self, name: str) -> str:
        return os.getenv(name, self._optional_vars[name])

    def _get_int(self, name: str) -> int:
        raw = self._get_optional(name)
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid integer for {name}: {raw!r}",
                details={"variable": name, "value": raw},
                cause=e
            )

    def _load_values(self) -> None:
        """Load all configuration values from environment."""
        # Required values
        self.github_token = self._get_token()

        # API configuration
        self.github_api_url = self._get_optional("GITHUB_API_URL").rstrip("/")
        self.request_timeout = self._get_int("GITHUB_TIMEOUT")
        self.default_per_page = self._get_int("DEFAULT_PER_PAGE")
        if not 1 <= self.default_per_page <= PAGINATION.MAX_PER_PAGE:
            raise ConfigurationError(
                f"DEFAULT_PER_PAGE must be between 1 and {PAGINATION.MAX_PER_PAGE}",
                details={"value": self.default_per_page}
            )

        # Server configuration
        self.server_name = self._get_optional("MCP_SERVER_NAME")

        # Logging configuration
        self.log_level = self._get_optional("LOG_LEVEL").upper()

    def get_status(self) -> Dict[str, Any]:
        """
        Get configuration status without sensitive values.

        Returns:
            Dictionary with configuration status and details
        """
        return {
            "api": {
                "base_url": self.github_api_url,
                "timeout": self.request_timeout,
                "token_configured": bool(self.github_token),
            },
            "pagination": {
                "default_per_page": self.default_per_page,
            },
            "server_name": self.server_name,
            "log_level": self.log_level,
        }

    def __repr__(self) -> str:
        """String representation of configuration (without sensitive data)."""
        return (
            f"Config("
            f"api_url={self.github_api_url}, "
            f"timeout={self.request_timeout}, "
            f"per_page={self.default_per_page}, "
            f"server_name={self.server_name}"
            f")"
        )
