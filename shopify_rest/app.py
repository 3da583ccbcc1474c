"""
OAuth and signature helpers for public Shopify apps.

An App knows its API key and secret. It builds the install URL merchants
are sent to, exchanges the returned code for an access token, and checks
the HMAC signatures Shopify puts on redirects and webhook deliveries.
"""

import base64
import hashlib
import hmac
import logging
from typing import Any, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlsplit

import requests

from .client import ShopifyClient
from .config import settings
from .constants import DEFAULT_TIMEOUT, Headers
from .exceptions import (
    AuthenticationError,
    NetworkError,
    ResponseDecodingError,
    create_exception_from_response,
)
from .utils import shop_full_name

logger = logging.getLogger(__name__)


class App:
    """
    A Shopify app registered in the Partner dashboard.

    Example:
        app = App(api_key="...", api_secret="...",
                  redirect_url="https://example.com/auth/callback",
                  scope="read_products,write_orders")

        url = app.authorize_url("fooshop", state="nonce")
        # ... merchant approves, Shopify redirects with ?code=...&hmac=...
        if app.verify_authorization_url(callback_url):
            token = app.get_access_token("fooshop", code)
            client = app.client("fooshop", token)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        redirect_url: str = "",
        scope: str = "",
        password: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key or settings.api_key
        self.api_secret = api_secret or settings.api_secret
        self.redirect_url = redirect_url
        self.scope = scope
        self.password = password
        self.timeout = timeout
        self.session = session or requests.Session()

        if not self.api_key or not self.api_secret:
            raise AuthenticationError(
                "Missing required parameters: api_key and api_secret "
                "(or SHOPIFY_API_KEY and SHOPIFY_API_SECRET)"
            )

    def authorize_url(self, shop_name: str, state: str) -> str:
        """URL of the install/permission screen for a shop."""
        query = urlencode({
            "client_id": self.api_key,
            "redirect_uri": self.redirect_url,
            "scope": self.scope,
            "state": state,
        })
        return f"https://{shop_full_name(shop_name)}/admin/oauth/authorize?{query}"

    def get_access_token(self, shop_name: str, code: str) -> str:
        """
        Exchange an authorization code for a permanent access token.

        Args:
            shop_name: Shop the code was issued for
            code: code query parameter of the OAuth callback

        Returns:
            str: Offline access token

        Raises:
            NetworkError: On transport failure
            ResponseError: If Shopify rejects the code
            ResponseDecodingError: If the response carries no token
        """
        url = f"https://{shop_full_name(shop_name)}/admin/oauth/access_token"
        payload = {
            "client_id": self.api_key,
            "client_secret": self.api_secret,
            "code": code,
        }

        logger.info(f"Requesting access token for {shop_full_name(shop_name)}")
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request error: {str(e)}") from e

        try:
            data = response.json() if response.content else None
        except ValueError:
            data = None

        if not response.ok:
            raise create_exception_from_response(
                response.status_code,
                data,
                reason=response.reason,
                headers=response.headers
            )

        if not isinstance(data, dict) or not data.get("access_token"):
            raise ResponseDecodingError(
                "access_token is missing from response",
                status_code=response.status_code
            )
        return data["access_token"]

    def _digest(self, message: Union[str, bytes]) -> bytes:
        if isinstance(message, str):
            message = message.encode("utf-8")
        return hmac.new(self.api_secret.encode("utf-8"), message, hashlib.sha256).digest()

    def verify_message(self, message: Union[str, bytes], message_mac: str) -> bool:
        """Check a hex HMAC-SHA256 of message under the app secret."""
        expected = self._digest(message).hex().encode("utf-8")
        return hmac.compare_digest(expected, (message_mac or "").lower().encode("utf-8"))

    def verify_authorization_url(self, url: str) -> bool:
        """
        Check the hmac parameter of an OAuth callback URL.

        The signed message is every other query parameter (signature
        excluded), sorted by key and joined as "k=v&k=v".
        """
        params = parse_qsl(urlsplit(url).query, keep_blank_values=True)
        message_mac = ""
        remaining = []
        for key, value in params:
            if key == "hmac":
                message_mac = value
            elif key != "signature":
                remaining.append((key, value))

        if not message_mac:
            return False

        message = "&".join(f"{key}={value}" for key, value in sorted(remaining))
        return self.verify_message(message, message_mac)

    def verify_webhook_request(self, body: bytes, hmac_header: Optional[str]) -> bool:
        """
        Check the base64 signature Shopify sends with a webhook delivery.

        Args:
            body: Raw request body, before any JSON decoding
            hmac_header: Value of the X-Shopify-Hmac-Sha256 header
        """
        if not hmac_header:
            logger.warning(f"Webhook without {Headers.HMAC} header")
            return False
        expected = base64.b64encode(self._digest(body))
        return hmac.compare_digest(expected, hmac_header.encode("utf-8"))

    def client(self, shop_name: str, access_token: Optional[str] = None, **kwargs: Any) -> ShopifyClient:
        """
        Build a ShopifyClient for a shop that installed the app.

        Without an access token the client authenticates with the api_key
        and password pair of a private app.
        """
        return ShopifyClient(
            shop_name,
            access_token=access_token,
            api_key=self.api_key,
            password=self.password,
            **kwargs
        )
