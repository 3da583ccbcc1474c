"""
Unit tests for shopify_rest.config module.

Tests environment-backed settings, the missing-credentials report used by
ShopifyClient and the logging setup.
"""

import logging
import os
from unittest.mock import patch

import pytest

from shopify_rest.config import Settings


@pytest.fixture
def settings():
    return Settings()


class TestSettings:

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self, settings):
        assert settings.shop_name == ""
        assert settings.api_version == "2024-01"
        assert settings.max_retries == 0
        assert settings.request_timeout == 30.0
        assert settings.throttle is False
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    @patch.dict(os.environ, {
        "SHOPIFY_MAX_RETRIES": "3",
        "SHOPIFY_REQUEST_TIMEOUT": "12.5",
        "SHOPIFY_THROTTLE": "TRUE",
    }, clear=True)
    def test_values_from_environment(self, settings):
        assert settings.max_retries == 3
        assert settings.request_timeout == 12.5
        assert settings.throttle is True


class TestMissingCredentials:

    @patch.dict(os.environ, {}, clear=True)
    def test_nothing_configured(self, settings):
        missing = settings.missing_credentials()

        assert len(missing) == 2
        assert missing[0] == "shop_name (or SHOPIFY_SHOP_NAME)"
        assert "SHOPIFY_ACCESS_TOKEN" in missing[1]

    @patch.dict(os.environ, {"SHOPIFY_SHOP_NAME": "fooshop", "SHOPIFY_ACCESS_TOKEN": "abc"}, clear=True)
    def test_environment_is_enough(self, settings):
        assert settings.missing_credentials() == []

    @patch.dict(os.environ, {"SHOPIFY_API_PASSWORD": "secret"}, clear=True)
    def test_arguments_combine_with_environment(self, settings):
        assert settings.missing_credentials(shop_name="fooshop", api_key="key") == []
        assert len(settings.missing_credentials(shop_name="fooshop")) == 1

    @patch.dict(os.environ, {}, clear=True)
    def test_api_key_without_password(self, settings):
        missing = settings.missing_credentials(shop_name="fooshop", api_key="key")

        assert len(missing) == 1
        assert missing[0].startswith("access_token")


class TestSetupLogging:

    @patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True)
    def test_stream_handler_only(self, settings):
        with patch("shopify_rest.config.logging.basicConfig") as mock_basic_config:
            settings.setup_logging()

        kwargs = mock_basic_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        assert kwargs["format"] == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        assert len(kwargs["handlers"]) == 1
        assert isinstance(kwargs["handlers"][0], logging.StreamHandler)

    def test_file_handler_creates_directory(self, settings, tmp_path):
        log_file = tmp_path / "logs" / "shopify.log"

        with patch.dict(os.environ, {"LOG_FILE": str(log_file)}, clear=True):
            with patch("shopify_rest.config.logging.basicConfig") as mock_basic_config:
                settings.setup_logging()

        handlers = mock_basic_config.call_args.kwargs["handlers"]
        try:
            assert (tmp_path / "logs").is_dir()
            assert isinstance(handlers[-1], logging.FileHandler)
            assert handlers[-1].baseFilename == str(log_file)
            assert mock_basic_config.call_args.kwargs["level"] == logging.INFO
        finally:
            for handler in handlers:
                handler.close()
