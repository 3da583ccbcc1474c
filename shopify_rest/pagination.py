"""
Cursor pagination extracted from Shopify's Link response header.

A paginated list response carries up to two entries:

    Link: <https://shop.myshopify.com/admin/api/2024-01/products.json?page_info=abc&limit=50>; rel="next",
          <https://shop.myshopify.com/admin/api/2024-01/products.json?page_info=xyz&limit=50>; rel="previous"

Each entry becomes a ListOptions holding page_info and limit, ready to be
passed back to the same list call.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit, parse_qs

from .constants import (
    ErrorMessages,
    LINK_PATTERN,
    INVALID_ESCAPE_PATTERN,
    PAGINATION_RELATIONS,
)
from .exceptions import ResponseDecodingError
from .models import ListOptions, Pagination

logger = logging.getLogger(__name__)


def _parse_cursor(url: str) -> ListOptions:
    """Build the ListOptions for one Link entry URL."""
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise ResponseDecodingError(ErrorMessages.INVALID_PAGINATION_URL) from e

    if not parts.scheme or not parts.netloc:
        raise ResponseDecodingError(ErrorMessages.INVALID_PAGINATION_URL)

    bad_escape = INVALID_ESCAPE_PATTERN.search(parts.query)
    if bad_escape:
        raise ResponseDecodingError(
            ErrorMessages.INVALID_URL_ESCAPE.format(escape=bad_escape.group(0))
        )

    params = parse_qs(parts.query)

    page_info = params.get("page_info", [""])[0]
    if not page_info:
        raise ResponseDecodingError(ErrorMessages.PAGE_INFO_MISSING)

    options = ListOptions(page_info=page_info)

    limit = params.get("limit", [""])[0]
    if limit:
        try:
            options.limit = int(limit)
        except ValueError as e:
            raise ResponseDecodingError(str(e)) from e

    return options


def extract_pagination(link_header: Optional[str]) -> Pagination:
    """
    Parse a Link header into next/previous cursors.

    Args:
        link_header: Raw Link header value, or None when absent

    Returns:
        Pagination: Empty when the header is absent or blank

    Raises:
        ResponseDecodingError: If an entry is not of the form
            <url>; rel="..." or its URL carries no usable cursor
    """
    pagination = Pagination()

    if not link_header or not link_header.strip():
        return pagination

    for entry in link_header.split(","):
        match = LINK_PATTERN.match(entry)
        if not match:
            raise ResponseDecodingError(ErrorMessages.INVALID_LINK_HEADER)

        url, relation = match.group(1), match.group(2)
        if relation not in PAGINATION_RELATIONS:
            logger.debug(f"Ignoring Link relation {relation!r}")
            continue

        options = _parse_cursor(url)
        if relation == "next":
            pagination.next_page_options = options
        else:
            pagination.previous_page_options = options

    return pagination
