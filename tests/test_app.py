"""
Unit tests for shopify_rest.app module.

Tests the OAuth install URL, the code-for-token exchange and the HMAC
checks on OAuth callbacks and webhook deliveries.
"""

import base64
import hashlib
import hmac
import os
from unittest.mock import patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from shopify_rest.app import App
from shopify_rest.client import ShopifyClient
from shopify_rest.exceptions import (
    AuthenticationError,
    NetworkError,
    ResponseDecodingError,
    ResponseError,
)

from conftest import make_response

SECRET = "hush"


def hex_hmac(message):
    return hmac.new(SECRET.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


@pytest.fixture
def app():
    """Create test app."""
    return App(
        api_key="apikey",
        api_secret=SECRET,
        redirect_url="https://example.com/callback",
        scope="read_products,read_orders",
        password="privateapppassword"
    )


class TestAppInitialization:

    def test_missing_credentials(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(AuthenticationError):
                App()

    def test_credentials_from_environment(self):
        env = {"SHOPIFY_API_KEY": "envkey", "SHOPIFY_API_SECRET": "envsecret"}
        with patch.dict(os.environ, env, clear=True):
            app = App()

        assert app.api_key == "envkey"
        assert app.api_secret == "envsecret"


class TestAuthorizeUrl:

    def test_authorize_url(self, app):
        url = app.authorize_url("fooshop", "thisisarandomstate")

        parts = urlsplit(url)
        assert parts.scheme == "https"
        assert parts.netloc == "fooshop.myshopify.com"
        assert parts.path == "/admin/oauth/authorize"
        assert parse_qs(parts.query) == {
            "client_id": ["apikey"],
            "redirect_uri": ["https://example.com/callback"],
            "scope": ["read_products,read_orders"],
            "state": ["thisisarandomstate"],
        }

    def test_full_domain_is_kept(self, app):
        url = app.authorize_url("fooshop.myshopify.com", "state")
        assert url.startswith("https://fooshop.myshopify.com/admin/oauth/authorize?")


class TestGetAccessToken:

    def test_success(self, app):
        with patch.object(app.session, "post") as mock_post:
            mock_post.return_value = make_response(200, {"access_token": "footoken", "scope": "read_products"})

            token = app.get_access_token("fooshop", "foocode")

        assert token == "footoken"
        args, kwargs = mock_post.call_args
        assert args[0] == "https://fooshop.myshopify.com/admin/oauth/access_token"
        assert kwargs["json"] == {"client_id": "apikey", "client_secret": SECRET, "code": "foocode"}

    def test_rejected_code(self, app):
        with patch.object(app.session, "post") as mock_post:
            mock_post.return_value = make_response(400, {
                "error": "invalid_request",
                "error_description": "The authorization code was not found or was already used"
            }, reason="Bad Request")

            with pytest.raises(ResponseError) as exc_info:
                app.get_access_token("fooshop", "usedcode")

        assert "invalid_request" in exc_info.value.message

    def test_missing_token(self, app):
        with patch.object(app.session, "post") as mock_post:
            mock_post.return_value = make_response(200, {"scope": "read_products"})

            with pytest.raises(ResponseDecodingError):
                app.get_access_token("fooshop", "foocode")

    def test_connection_error(self, app):
        with patch.object(app.session, "post") as mock_post:
            mock_post.side_effect = requests.exceptions.ConnectionError("refused")

            with pytest.raises(NetworkError):
                app.get_access_token("fooshop", "foocode")


class TestSignatures:

    def test_verify_message(self, app):
        message = "code=0907a61c0c8d55e99db179b68161bc00&shop=fooshop.myshopify.com&timestamp=1337178173"

        assert app.verify_message(message, hex_hmac(message))
        assert app.verify_message(message.encode("utf-8"), hex_hmac(message).upper())
        assert not app.verify_message(message, hex_hmac(message + "x"))
        assert not app.verify_message(message, "")

    def test_verify_authorization_url(self, app):
        message = "code=0907a61c0c8d55e99db179b68161bc00&shop=fooshop.myshopify.com&timestamp=1337178173"
        url = (
            "https://example.com/callback?shop=fooshop.myshopify.com"
            "&timestamp=1337178173&code=0907a61c0c8d55e99db179b68161bc00"
            f"&signature=ignored&hmac={hex_hmac(message)}"
        )

        assert app.verify_authorization_url(url)

    def test_verify_authorization_url_tampered(self, app):
        message = "code=abc&shop=fooshop.myshopify.com&timestamp=1337178173"
        url = f"https://example.com/callback?code=abc&shop=evilshop.myshopify.com&timestamp=1337178173&hmac={hex_hmac(message)}"

        assert not app.verify_authorization_url(url)

    def test_verify_authorization_url_without_hmac(self, app):
        assert not app.verify_authorization_url("https://example.com/callback?code=abc&shop=fooshop")

    def test_verify_webhook_request(self, app):
        body = b'{"id":820982911946154508,"email":"jon@doe.ca"}'
        signature = base64.b64encode(hmac.new(SECRET.encode("utf-8"), body, hashlib.sha256).digest()).decode("utf-8")

        assert app.verify_webhook_request(body, signature)
        assert not app.verify_webhook_request(body + b" ", signature)
        assert not app.verify_webhook_request(body, None)
        assert not app.verify_webhook_request(body, "")


class TestAppClient:

    def test_client_with_token(self, app):
        with patch.dict(os.environ, {}, clear=True):
            client = app.client("fooshop", "footoken", api_version="2024-01")

        assert isinstance(client, ShopifyClient)
        assert client.session.headers["X-Shopify-Access-Token"] == "footoken"

    def test_client_with_private_app_password(self, app):
        with patch.dict(os.environ, {}, clear=True):
            client = app.client("fooshop")

        assert client.session.auth == ("apikey", "privateapppassword")
        assert "X-Shopify-Access-Token" not in client.session.headers
