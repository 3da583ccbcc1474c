"""
Utility functions for the Shopify REST client.

Provides helpers for shop-name normalisation, query-string encoding,
datetime conversion and nested resource paths.
"""

import re
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Union

from .constants import MYSHOPIFY_DOMAIN


def shop_full_name(name: str) -> str:
    """
    Normalise a shop name to its myshopify.com domain.

    Examples:
        >>> shop_full_name('fooshop')
        'fooshop.myshopify.com'
        >>> shop_full_name(' https://fooshop.myshopify.com/ ')
        'fooshop.myshopify.com'
    """
    name = name.strip()
    name = re.sub(r"^https?://", "", name)
    name = name.strip("/").strip(".")
    if MYSHOPIFY_DOMAIN in name:
        return name
    return f"{name}.{MYSHOPIFY_DOMAIN}"


def parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp as returned by Shopify.

    Accepts a trailing "Z" for UTC. Returns None for None or "".
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_datetime(value: Union[datetime, date]) -> str:
    """Render a datetime the way Shopify accepts it (ISO 8601)."""
    return value.isoformat()


def encode_query_value(value: Any) -> str:
    """Render one query parameter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return format_datetime(value)
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (list, tuple, set)):
        return ",".join(encode_query_value(item) for item in value)
    return str(value)


def encode_query(options: Any) -> Dict[str, str]:
    """
    Turn list/filter options into query parameters.

    Args:
        options: None, a dict, or an options object exposing to_params()

    Returns:
        Dict[str, str]: Parameters with None values dropped, lists
        comma-joined, booleans as true/false and datetimes in ISO 8601
    """
    if options is None:
        return {}

    if hasattr(options, "to_params"):
        raw = options.to_params()
    elif isinstance(options, dict):
        raw = options
    else:
        raise TypeError(
            f"options must be a dict or an options object, got {type(options).__name__}"
        )

    return {
        key: encode_query_value(value)
        for key, value in raw.items()
        if value is not None
    }


def metafield_path_prefix(resource: Optional[str], resource_id: Optional[int]) -> str:
    """
    Path prefix for metafields owned by a resource.

    Examples:
        >>> metafield_path_prefix('products', 1)
        'products/1/metafields'
        >>> metafield_path_prefix(None, None)
        'metafields'
    """
    if not resource:
        return "metafields"
    return f"{resource}/{resource_id}/metafields"


def fulfillment_path_prefix(resource: Optional[str], resource_id: Optional[int]) -> str:
    """
    Path prefix for fulfillments owned by a resource.

    Examples:
        >>> fulfillment_path_prefix('orders', 1)
        'orders/1/fulfillments'
    """
    if not resource:
        return "fulfillments"
    return f"{resource}/{resource_id}/fulfillments"
