"""Configuration utility for the Figma wrapper.

This module provides centralized configuration management with:
- Environment variables as the only source
- Type-safe access to configuration values
"""

import os
from typing import Any

FIGMA_API_BASE = "https://api.figma.com"


def parse_config_value(value: str) -> str | bool | int | float:
    if value.lower() == "true":
        return True
    elif value.lower() == "false":
        return False
    else:
        # Try to parse as a number
        try:
            return int(value)
        except ValueError:
            try:
                return float(value)
            except ValueError:
                # Return as string
                return value


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a configuration value from environment variables.

    Args:
        key: Configuration key name (e.g., "FIGMA_TIMEOUT_MS")
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value is not None:
        return parse_config_value(env_value)

    return default


def get_config_value_str(key: str) -> str | None:
    """
    Get a configuration value from environment variables. But sometimes you just want a string.
    """
    return os.environ.get(key)


def get_environment() -> str:
    """Get the deployment environment from env var."""
    return get_config_value_str("FIGMA_WRAPPER_ENVIRONMENT") or "local"


# Figma configuration functions
def get_figma_access_token() -> str | None:
    """Get the Figma access token from env.

    Read as a raw string so numeric-looking tokens are not coerced.
    """
    return get_config_value_str("FIGMA_ACCESS_TOKEN")


def get_figma_api_base_url() -> str:
    """Get the Figma API origin, defaulting to the public API."""
    return get_config_value_str("FIGMA_API_BASE_URL") or FIGMA_API_BASE


def get_figma_timeout_ms() -> int | None:
    """Get the per-request timeout in milliseconds.

    Returns:
        Timeout in milliseconds, or None when FIGMA_TIMEOUT_MS is 0 (wait forever).
    """
    timeout_ms = get_config_value("FIGMA_TIMEOUT_MS", 30_000)
    return int(timeout_ms) if timeout_ms else None


def get_figma_auth_scheme() -> str:
    """Get the auth scheme: "token" for personal access tokens, "oauth" for OAuth tokens."""
    return get_config_value_str("FIGMA_AUTH_SCHEME") or "token"


def get_figma_retry_attempts() -> int:
    """Get total attempts per request from config or env (1 disables retries)."""
    return get_config_value("FIGMA_RETRY_ATTEMPTS", 1)


def get_figma_retry_base_delay_ms() -> int:
    """Get the exponential backoff base delay in milliseconds."""
    return get_config_value("FIGMA_RETRY_BASE_DELAY_MS", 1000)
