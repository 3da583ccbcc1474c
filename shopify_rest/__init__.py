"""
Shopify REST SDK

A Python client for the Shopify Admin REST API: one shared request
executor with versioned URLs, authentication, Link-header pagination,
rate-limit bookkeeping and typed errors, plus resource services for
products, customers, orders and the rest of the catalogue.

Usage:
    from shopify_rest import ShopifyClient, ListOptions, settings

    # Log to stderr (and LOG_FILE) at LOG_LEVEL
    settings.setup_logging()

    client = ShopifyClient(
        shop_name="fooshop",
        access_token="shpat_...",
        api_version="2024-01"
    )

    # List products one page at a time
    products, pagination = client.products.list_with_pagination(ListOptions(limit=50))
    while pagination.has_next:
        products, pagination = client.products.list_with_pagination(pagination.next_page_options)

    # Count, create, delete
    client.orders.count()
    client.customers.create(Customer(email="bob@example.com"))
    client.webhooks.delete(123)
"""

__version__ = "1.0.0"
__author__ = "ECLA Development Team"
__email__ = "info@ecladerm.com"
__description__ = "Client library for the Shopify Admin REST API"

from .models import (
    ShopifyObject,
    ListOptions,
    CountOptions,
    Pagination,
    RateLimitInfo,
    ShopifyResponse
)
from .exceptions import (
    ShopifyError,
    NetworkError,
    RequestCancelledError,
    ResponseDecodingError,
    ResponseError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    ServerError
)
from .config import settings
from .context import RequestContext, background
from .pagination import extract_pagination
from .resources import *  # noqa: F401,F403
from .resources import __all__ as _resources_all

# Import client
from .client import ShopifyClient
from .app import App

# Main exports
__all__ = [
    "ShopifyClient",
    "App",
    "settings",
    "RequestContext",
    "background",
    "extract_pagination",
    "ShopifyObject",
    "ListOptions",
    "CountOptions",
    "Pagination",
    "RateLimitInfo",
    "ShopifyResponse",
    "ShopifyError",
    "NetworkError",
    "RequestCancelledError",
    "ResponseDecodingError",
    "ResponseError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "ServerError"
] + list(_resources_all)
