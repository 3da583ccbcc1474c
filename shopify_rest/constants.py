"""
Constants and configuration for the Shopify REST client.

This module contains API version defaults, header names, status codes,
error message texts and the patterns used to parse Shopify responses.
"""

import re

# API Configuration
DEFAULT_API_VERSION = "2024-01"
UNSTABLE_API_VERSION = "unstable"
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_RETRIES = 0  # surface rate-limit errors unless retries are requested
RETRY_BASE_DELAY = 1  # seconds
DEFAULT_LEAK_RATE = 2.0  # credits replenished per second on standard plans
DEFAULT_HEADROOM = 1  # credits kept free when throttling
MAX_THROTTLE_WAIT = 60.0  # seconds

MYSHOPIFY_DOMAIN = "myshopify.com"
LEGACY_PATH_PREFIX = "admin"

USER_AGENT = "shopify-rest-python/1.0.0"


class Headers:
    """HTTP headers read and written by the client."""

    ACCESS_TOKEN = "X-Shopify-Access-Token"
    CALL_LIMIT = "X-Shopify-Shop-Api-Call-Limit"
    API_VERSION = "X-Shopify-API-Version"
    HMAC = "X-Shopify-Hmac-Sha256"
    RETRY_AFTER = "Retry-After"
    LINK = "Link"

    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"
    USER_AGENT = "User-Agent"

    JSON_CONTENT_TYPE = "application/json"

    DEFAULT_HEADERS = {
        CONTENT_TYPE: JSON_CONTENT_TYPE,
        ACCEPT: JSON_CONTENT_TYPE,
        USER_AGENT: USER_AGENT,
    }


class StatusCodes:
    """HTTP status codes with special handling."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    MULTIPLE_CHOICES = 300

    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    NOT_ACCEPTABLE = 406
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429

    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    # Only these are retried, and only when retries are enabled
    RETRYABLE_STATUS_CODES = {TOO_MANY_REQUESTS, SERVICE_UNAVAILABLE}


class ErrorMessages:
    """Error message texts raised by the client."""

    PAGE_INFO_MISSING = "page_info is missing"
    INVALID_LINK_HEADER = "could not extract pagination link header"
    INVALID_PAGINATION_URL = "pagination does not contain a valid URL"
    INVALID_URL_ESCAPE = 'invalid URL escape "{escape}"'
    EMPTY_RESPONSE = "empty response body"
    INVALID_JSON = "invalid JSON in response body: {error}"
    NOT_ACCEPTABLE = "Not Acceptable"
    CANCELLED = "request cancelled"
    DEADLINE_EXCEEDED = "deadline exceeded"


class EnvVars:
    """Environment variable names."""

    SHOP_NAME = "SHOPIFY_SHOP_NAME"
    ACCESS_TOKEN = "SHOPIFY_ACCESS_TOKEN"
    API_KEY = "SHOPIFY_API_KEY"
    API_SECRET = "SHOPIFY_API_SECRET"
    API_PASSWORD = "SHOPIFY_API_PASSWORD"
    API_VERSION = "SHOPIFY_API_VERSION"
    MAX_RETRIES = "SHOPIFY_MAX_RETRIES"
    REQUEST_TIMEOUT = "SHOPIFY_REQUEST_TIMEOUT"
    THROTTLE = "SHOPIFY_THROTTLE"

    LOG_LEVEL = "LOG_LEVEL"
    LOG_FILE = "LOG_FILE"


class LogConfig:
    """Logging configuration constants."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# <url>; rel="next" with optional surrounding whitespace
LINK_PATTERN = re.compile(r'^ *<([^>]+)>; rel="([^"]*)" *$')

PAGINATION_RELATIONS = ("next", "previous")

# A percent sign not followed by two hex digits
INVALID_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2}).{0,2}")

API_VERSION_PATTERN = re.compile(r"^\d{4}-\d{2}$")
