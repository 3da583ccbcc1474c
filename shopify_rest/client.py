"""
Main Shopify client for the Admin REST API.

This module contains the ShopifyClient class: the shared request executor
used by every resource service. It builds versioned URLs, attaches
authentication, records rate-limit headers, retries 429/503 when asked to,
decodes JSON bodies and turns error responses into exceptions.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

import requests

from .config import settings
from .constants import (
    Headers,
    StatusCodes,
    ErrorMessages,
    API_VERSION_PATTERN,
    UNSTABLE_API_VERSION,
    LEGACY_PATH_PREFIX,
    RETRY_BASE_DELAY,
    DEFAULT_LEAK_RATE,
)
from .context import RequestContext
from .exceptions import (
    AuthenticationError,
    NetworkError,
    RateLimitError,
    RequestCancelledError,
    ResponseDecodingError,
    ResponseError,
    create_exception_from_response,
)
from .models import Pagination, RateLimitInfo, ShopifyObject, ShopifyResponse
from .pagination import extract_pagination
from .rate_limit import RateLimiter
from .utils import shop_full_name, encode_query
from .resources import (
    AbandonedCheckoutService,
    ApiPermissionsService,
    ApplicationChargeService,
    AssetService,
    BlogService,
    CarrierServiceService,
    CollectService,
    CustomCollectionService,
    CustomerAddressService,
    CustomerService,
    DiscountCodeService,
    DraftOrderService,
    FulfillmentEventService,
    FulfillmentService,
    GiftCardService,
    ImageService,
    InventoryItemService,
    InventoryLevelService,
    MetafieldService,
    OrderRiskService,
    OrderService,
    PriceRuleService,
    ProductListingService,
    ProductService,
    RedirectService,
    ShippingZoneService,
    SmartCollectionService,
    StorefrontAccessTokenService,
    ThemeService,
    TransactionService,
    VariantService,
    WebhookService,
)

# Set up logging
logger = logging.getLogger(__name__)


class ShopifyClient:
    """
    Client for the Shopify Admin REST API.

    One client holds one HTTP session and is shared by all resource
    services, which are exposed as attributes.

    Example:
        client = ShopifyClient("fooshop", access_token="shpat_...")

        products, pagination = client.products.list_with_pagination(
            ListOptions(limit=50)
        )
        while pagination.has_next:
            more, pagination = client.products.list_with_pagination(
                pagination.next_page_options
            )
    """

    def __init__(
        self,
        shop_name: Optional[str] = None,
        access_token: Optional[str] = None,
        api_key: Optional[str] = None,
        password: Optional[str] = None,
        api_version: Optional[str] = None,
        retries: Optional[int] = None,
        timeout: Optional[float] = None,
        throttle: Optional[bool] = None,
        leak_rate: float = DEFAULT_LEAK_RATE,
        session: Optional[requests.Session] = None,
        enable_logging: bool = True
    ):
        """
        Initialize the Shopify client.

        Args:
            shop_name: Shop name or domain (or set SHOPIFY_SHOP_NAME)
            access_token: Admin API access token (or set SHOPIFY_ACCESS_TOKEN)
            api_key: Private app API key, used with password when no token
            password: Private app password (or set SHOPIFY_API_PASSWORD)
            api_version: Admin API version such as "2024-01", "unstable",
                or "" for the unversioned /admin prefix
            retries: Extra attempts for 429 and 503 responses (default 0)
            timeout: Transport timeout in seconds per attempt
            throttle: Wait for the call bucket to drain before requests
            leak_rate: Credits the bucket drains per second when throttling
            session: requests.Session to use instead of a new one
            enable_logging: Enable request/response logging

        Raises:
            AuthenticationError: If the shop name or credentials are missing
            ValueError: If api_version is not a valid version
        """
        missing = settings.missing_credentials(shop_name, access_token, api_key, password)
        if missing:
            raise AuthenticationError(
                f"Missing required parameters: {', '.join(missing)}"
            )

        # Load configuration from parameters or environment
        shop_name = shop_name or settings.shop_name
        access_token = access_token or settings.access_token
        api_key = api_key or settings.api_key
        password = password or settings.api_password

        if api_version is None:
            api_version = settings.api_version
        if api_version and api_version != UNSTABLE_API_VERSION \
                and not API_VERSION_PATTERN.match(api_version):
            raise ValueError(f"Invalid API version: {api_version}")

        self.shop_name = shop_full_name(shop_name)
        self.api_version = api_version
        self.base_url = f"https://{self.shop_name}"
        self.path_prefix = f"{LEGACY_PATH_PREFIX}/api/{api_version}" if api_version else LEGACY_PATH_PREFIX

        # Configuration
        self.retries = settings.max_retries if retries is None else retries
        self.timeout = settings.request_timeout if timeout is None else timeout
        self.throttle = settings.throttle if throttle is None else throttle
        self.enable_logging = enable_logging

        # Initialize session for connection pooling
        self.session = session or requests.Session()
        self.session.headers.update(Headers.DEFAULT_HEADERS)
        if access_token:
            self.session.headers[Headers.ACCESS_TOKEN] = access_token
        else:
            self.session.auth = (api_key, password)

        self.rate_limiter = RateLimiter(leak_rate=leak_rate)

        # Resource services
        self.products = ProductService(self)
        self.variants = VariantService(self)
        self.images = ImageService(self)
        self.product_listings = ProductListingService(self)
        self.collects = CollectService(self)
        self.custom_collections = CustomCollectionService(self)
        self.smart_collections = SmartCollectionService(self)
        self.customers = CustomerService(self)
        self.customer_addresses = CustomerAddressService(self)
        self.orders = OrderService(self)
        self.draft_orders = DraftOrderService(self)
        self.transactions = TransactionService(self)
        self.fulfillments = FulfillmentService(self)
        self.fulfillment_events = FulfillmentEventService(self)
        self.order_risks = OrderRiskService(self)
        self.abandoned_checkouts = AbandonedCheckoutService(self)
        self.gift_cards = GiftCardService(self)
        self.price_rules = PriceRuleService(self)
        self.discount_codes = DiscountCodeService(self)
        self.inventory_items = InventoryItemService(self)
        self.inventory_levels = InventoryLevelService(self)
        self.shipping_zones = ShippingZoneService(self)
        self.carrier_services = CarrierServiceService(self)
        self.themes = ThemeService(self)
        self.assets = AssetService(self)
        self.blogs = BlogService(self)
        self.redirects = RedirectService(self)
        self.webhooks = WebhookService(self)
        self.metafields = MetafieldService(self)
        self.application_charges = ApplicationChargeService(self)
        self.storefront_access_tokens = StorefrontAccessTokenService(self)
        self.api_permissions = ApiPermissionsService(self)

        if self.enable_logging:
            logger.info(f"ShopifyClient initialized for {self.shop_name} (API {self.path_prefix})")

    def __enter__(self) -> "ShopifyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    @property
    def rate_limits(self) -> RateLimitInfo:
        """Bucket state reported by the most recent response."""
        return self.rate_limiter.info

    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{self.path_prefix}/{path.lstrip('/')}"

    def _encode_body(self, data: Any) -> Any:
        if isinstance(data, ShopifyObject):
            return data.to_dict()
        return data

    def _send(
        self,
        method: str,
        url: str,
        params: Dict[str, str],
        payload: Any,
        ctx: RequestContext
    ) -> requests.Response:
        """Perform one HTTP round trip, mapping transport failures."""
        timeout = ctx.timeout_for(self.timeout)
        try:
            return self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=payload,
                timeout=timeout
            )
        except requests.exceptions.Timeout as e:
            if ctx.remaining() == 0:
                raise RequestCancelledError(ErrorMessages.DEADLINE_EXCEEDED) from e
            raise NetworkError(f"Request timeout after {timeout}s") from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Connection error: {str(e)}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request error: {str(e)}") from e

    def _build_error(self, response: requests.Response) -> ResponseError:
        """Decode an error envelope into the matching exception."""
        response_data = None
        content = response.content
        if content and content.strip():
            try:
                response_data = json.loads(content)
            except ValueError:
                logger.debug(f"Error body for status {response.status_code} is not JSON")

        return create_exception_from_response(
            response.status_code,
            response_data,
            reason=response.reason,
            headers=response.headers
        )

    def _decode_body(self, method: str, response: requests.Response) -> Any:
        content = response.content
        if not content or not content.strip():
            if method == "DELETE" or response.status_code == StatusCodes.NO_CONTENT:
                return None
            raise ResponseDecodingError(
                ErrorMessages.EMPTY_RESPONSE,
                status_code=response.status_code
            )

        try:
            return json.loads(content)
        except ValueError as e:
            raise ResponseDecodingError(
                ErrorMessages.INVALID_JSON.format(error=e),
                body=content,
                status_code=response.status_code
            ) from e

    def _retry_delay(self, error: ResponseError, attempt: int) -> float:
        if isinstance(error, RateLimitError) and error.retry_after:
            return float(error.retry_after)
        return RETRY_BASE_DELAY * (2 ** attempt)

    def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> ShopifyResponse:
        """
        Make a request to the Admin API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path relative to the versioned prefix, e.g. "products.json"
            data: JSON body, a dict or ShopifyObject
            options: Query options, a dict or options dataclass
            ctx: Deadline and cancellation for the call

        Returns:
            ShopifyResponse: Status, decoded body and headers

        Raises:
            NetworkError: On transport failure
            RequestCancelledError: If ctx was cancelled or expired
            ResponseError: On a non-2xx response
            ResponseDecodingError: If the body is not valid JSON
        """
        method = method.upper()
        ctx = ctx or RequestContext()
        url = self._build_url(path)
        params = encode_query(options)
        payload = self._encode_body(data)

        if self.enable_logging:
            logger.info(f"Making {method} request to {path}")
            if payload is not None:
                logger.debug(f"Request payload: {payload}")

        attempt = 0
        while True:
            ctx.check()

            if self.throttle:
                wait = self.rate_limiter.delay()
                if wait > 0:
                    logger.debug(f"Throttling for {wait:.2f}s before {method} {path}")
                    ctx.wait(wait)

            response = self._send(method, url, params, payload, ctx)
            self.rate_limiter.update(response.headers)
            # Cancelled or expired while in flight: drop the response
            ctx.check()

            if self.enable_logging:
                logger.info(f"Response status: {response.status_code}")
                logger.debug(f"Response headers: {dict(response.headers)}")

            if StatusCodes.OK <= response.status_code < StatusCodes.MULTIPLE_CHOICES:
                break

            error = self._build_error(response)
            if attempt < self.retries and response.status_code in StatusCodes.RETRYABLE_STATUS_CODES:
                delay = self._retry_delay(error, attempt)
                logger.warning(
                    f"{method} {path} returned {response.status_code}, "
                    f"retrying after {delay}s (attempt {attempt + 1})"
                )
                ctx.wait(delay)
                attempt += 1
                continue

            raise error

        return ShopifyResponse(
            status_code=response.status_code,
            data=self._decode_body(method, response),
            headers=response.headers
        )

    def get(self, path: str, options: Any = None, ctx: Optional[RequestContext] = None) -> Any:
        """GET a path and return the decoded body."""
        return self.request("GET", path, options=options, ctx=ctx).data

    def get_with_pagination(
        self,
        path: str,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Tuple[Any, Pagination]:
        """GET a list path and return the decoded body and its cursors."""
        response = self.request("GET", path, options=options, ctx=ctx)
        pagination = extract_pagination(response.headers.get(Headers.LINK))
        return response.data, pagination

    def post(self, path: str, data: Any = None, ctx: Optional[RequestContext] = None) -> Any:
        """POST a JSON body and return the decoded body."""
        return self.request("POST", path, data=data, ctx=ctx).data

    def put(
        self,
        path: str,
        data: Any = None,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Any:
        """PUT a JSON body and return the decoded body."""
        return self.request("PUT", path, data=data, options=options, ctx=ctx).data

    def delete(self, path: str, options: Any = None, ctx: Optional[RequestContext] = None) -> None:
        """DELETE a path. An empty response body is a success."""
        self.request("DELETE", path, options=options, ctx=ctx)

    def count(self, path: str, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        """GET a count.json path and return the count."""
        data = self.get(path, options=options, ctx=ctx)
        if not isinstance(data, dict) or "count" not in data:
            raise ResponseDecodingError("count is missing from response")
        try:
            return int(data["count"])
        except (TypeError, ValueError) as e:
            raise ResponseDecodingError(f"invalid count: {data['count']!r}") from e
