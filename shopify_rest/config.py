"""
Configuration settings for the Shopify REST client.
Handles environment variable loading and logging setup.
"""

import os
import logging
from typing import Optional, List

from dotenv import load_dotenv

from .constants import (
    EnvVars,
    LogConfig,
    DEFAULT_API_VERSION,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
)

# Load environment variables from .env file
load_dotenv()


class Settings:
    """
    Environment-backed settings for the Shopify REST client.

    Every value is read when accessed, so changes to os.environ after import
    are picked up by clients created later.
    """

    # Shop Configuration
    @property
    def shop_name(self) -> str:
        """Get shop name or domain from environment."""
        return os.getenv(EnvVars.SHOP_NAME, "")

    @property
    def access_token(self) -> str:
        """Get Admin API access token from environment."""
        return os.getenv(EnvVars.ACCESS_TOKEN, "")

    # App Credentials
    @property
    def api_key(self) -> str:
        """Get app API key from environment."""
        return os.getenv(EnvVars.API_KEY, "")

    @property
    def api_secret(self) -> str:
        """Get app API secret from environment."""
        return os.getenv(EnvVars.API_SECRET, "")

    @property
    def api_password(self) -> str:
        """Get private app password from environment."""
        return os.getenv(EnvVars.API_PASSWORD, "")

    # Request Configuration
    @property
    def api_version(self) -> str:
        """Get Admin API version from environment."""
        return os.getenv(EnvVars.API_VERSION, DEFAULT_API_VERSION)

    @property
    def max_retries(self) -> int:
        """Get retry count for 429/503 responses from environment."""
        return int(os.getenv(EnvVars.MAX_RETRIES, str(DEFAULT_RETRIES)))

    @property
    def request_timeout(self) -> float:
        """Get per-request timeout in seconds from environment."""
        return float(os.getenv(EnvVars.REQUEST_TIMEOUT, str(DEFAULT_TIMEOUT)))

    @property
    def throttle(self) -> bool:
        """Get whether requests wait for the call bucket to drain."""
        return os.getenv(EnvVars.THROTTLE, "false").lower() == "true"

    # Logging Configuration
    @property
    def log_level(self) -> str:
        """Get log level from environment."""
        return os.getenv(EnvVars.LOG_LEVEL, LogConfig.DEFAULT_LOG_LEVEL)

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path from environment (optional)."""
        return os.getenv(EnvVars.LOG_FILE) or None

    def missing_credentials(
        self,
        shop_name: Optional[str] = None,
        access_token: Optional[str] = None,
        api_key: Optional[str] = None,
        password: Optional[str] = None
    ) -> List[str]:
        """
        Credentials a client would still need.

        Arguments override the environment, as in ShopifyClient.__init__.

        Returns:
            List[str]: One entry per missing value, naming the parameter
                and its environment variable
        """
        missing = []
        if not (shop_name or self.shop_name):
            missing.append(f"shop_name (or {EnvVars.SHOP_NAME})")
        has_token = access_token or self.access_token
        has_basic_auth = (api_key or self.api_key) and (password or self.api_password)
        if not (has_token or has_basic_auth):
            missing.append(
                f"access_token (or {EnvVars.ACCESS_TOKEN}, or api_key and password "
                f"via {EnvVars.API_KEY} and {EnvVars.API_PASSWORD})"
            )
        return missing

    def setup_logging(self) -> None:
        """Setup logging configuration based on environment variables."""
        handlers: List[logging.Handler] = [logging.StreamHandler()]

        if self.log_file:
            # Create logs directory if it doesn't exist
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)
            handlers.append(logging.FileHandler(self.log_file))

        logging.basicConfig(
            level=getattr(logging, self.log_level.upper()),
            format=LogConfig.DEFAULT_LOG_FORMAT,
            handlers=handlers
        )


# Global settings instance
settings = Settings()
