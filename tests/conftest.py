"""
Shared fixtures for the shopify_rest test suite.

HTTP is faked by patching the client's session.request with a Mock that
returns real requests.Response objects built by make_response.
"""

import json
import os
import sys
from unittest.mock import patch

import pytest
import requests
from requests.structures import CaseInsensitiveDict

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from shopify_rest.client import ShopifyClient

BASE_URL = "https://fooshop.myshopify.com/admin/api/2024-01"


def make_response(status_code=200, body=None, headers=None, reason=None):
    """
    Build a requests.Response.

    body may be a dict/list (JSON encoded), str or bytes (sent as is) or
    None for an empty body.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason or ""
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.headers = CaseInsensitiveDict(headers or {})
    return response


@pytest.fixture
def client():
    """Create test client."""
    return ShopifyClient(
        shop_name="fooshop",
        access_token="shpat_test_token",
        api_version="2024-01",
        retries=0,
        timeout=30,
        throttle=False
    )


@pytest.fixture
def mock_request(client):
    """Patch the client's session.request; set return_value or side_effect."""
    with patch.object(client.session, "request") as mocked:
        mocked.return_value = make_response(200, {})
        yield mocked
