"""Tests for environment configuration helpers."""

import os
from unittest.mock import patch

from src.utils.config import (
    FIGMA_API_BASE,
    get_config_value,
    get_environment,
    get_figma_access_token,
    get_figma_api_base_url,
    get_figma_retry_attempts,
    get_figma_timeout_ms,
    parse_config_value,
)


class TestParseConfigValue:
    def test_booleans(self):
        assert parse_config_value("true") is True
        assert parse_config_value("FALSE") is False

    def test_numbers(self):
        assert parse_config_value("42") == 42
        assert parse_config_value("1.5") == 1.5

    def test_strings_pass_through(self):
        assert parse_config_value("figd_abc") == "figd_abc"


class TestConfigGetters:
    def test_get_config_value_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_config_value("MISSING_KEY", "fallback") == "fallback"

    def test_environment_defaults_to_local(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_environment() == "local"

    def test_figma_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_figma_access_token() is None
            assert get_figma_api_base_url() == FIGMA_API_BASE
            assert get_figma_timeout_ms() == 30_000
            assert get_figma_retry_attempts() == 1

    def test_figma_token_is_not_coerced(self):
        """Numeric-looking tokens stay strings."""
        with patch.dict(os.environ, {"FIGMA_ACCESS_TOKEN": "12345"}, clear=True):
            assert get_figma_access_token() == "12345"

    def test_zero_timeout_disables_timeout(self):
        with patch.dict(os.environ, {"FIGMA_TIMEOUT_MS": "0"}, clear=True):
            assert get_figma_timeout_ms() is None
