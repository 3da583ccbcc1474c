"""
Resource services and models for the Admin REST API.
"""

from .base import (
    CountMixin,
    CreateMixin,
    CrudService,
    DeleteMixin,
    GetMixin,
    ListMixin,
    ResourceService,
    UpdateMixin,
)
from .metafields import Metafield, MetafieldService, MetafieldsMixin, MetafieldType
from .products import (
    Collect,
    CollectService,
    CustomCollection,
    CustomCollectionService,
    Image,
    ImageService,
    Product,
    ProductListOptions,
    ProductListing,
    ProductListingService,
    ProductOption,
    ProductService,
    ProductStatus,
    Rule,
    SmartCollection,
    SmartCollectionService,
    Variant,
    VariantService,
)
from .customers import (
    Customer,
    CustomerAddress,
    CustomerAddressService,
    CustomerSearchOptions,
    CustomerService,
    EmailMarketingConsent,
    SMSMarketingConsent,
)
from .orders import (
    AbandonedCheckout,
    AbandonedCheckoutService,
    Address,
    DraftOrder,
    DraftOrderInvoice,
    DraftOrderService,
    Fulfillment,
    FulfillmentEvent,
    FulfillmentEventService,
    FulfillmentService,
    FulfillmentsMixin,
    FulfillmentTrackingInfo,
    LineItem,
    Order,
    OrderCancelOptions,
    OrderListOptions,
    OrderRisk,
    OrderRiskService,
    OrderService,
    Transaction,
    TransactionService,
)
from .discounts import (
    DiscountCode,
    DiscountCodeService,
    GiftCard,
    GiftCardService,
    PriceRule,
    PriceRuleService,
)
from .inventory import (
    CarrierService,
    CarrierServiceService,
    InventoryItem,
    InventoryItemService,
    InventoryLevel,
    InventoryLevelAdjustOptions,
    InventoryLevelListOptions,
    InventoryLevelService,
    ShippingZone,
    ShippingZoneService,
)
from .online_store import (
    Asset,
    AssetService,
    Blog,
    BlogService,
    Redirect,
    RedirectService,
    Theme,
    ThemeListOptions,
    ThemeService,
)
from .access import (
    ApiPermissionsService,
    ApplicationCharge,
    ApplicationChargeService,
    StorefrontAccessToken,
    StorefrontAccessTokenService,
    Webhook,
    WebhookOptions,
    WebhookService,
)

__all__ = [
    "ResourceService", "CrudService",
    "ListMixin", "CountMixin", "GetMixin", "CreateMixin", "UpdateMixin", "DeleteMixin",
    "Metafield", "MetafieldService", "MetafieldsMixin", "MetafieldType",
    "Product", "ProductOption", "ProductStatus", "ProductListOptions", "ProductService",
    "Variant", "VariantService", "Image", "ImageService",
    "ProductListing", "ProductListingService", "Collect", "CollectService",
    "CustomCollection", "CustomCollectionService",
    "Rule", "SmartCollection", "SmartCollectionService",
    "Customer", "CustomerAddress", "CustomerSearchOptions",
    "EmailMarketingConsent", "SMSMarketingConsent",
    "CustomerService", "CustomerAddressService",
    "Address", "LineItem", "Order", "OrderListOptions", "OrderCancelOptions", "OrderService",
    "DraftOrder", "DraftOrderInvoice", "DraftOrderService",
    "Transaction", "TransactionService",
    "Fulfillment", "FulfillmentTrackingInfo", "FulfillmentService", "FulfillmentsMixin",
    "FulfillmentEvent", "FulfillmentEventService",
    "OrderRisk", "OrderRiskService", "AbandonedCheckout", "AbandonedCheckoutService",
    "PriceRule", "PriceRuleService", "DiscountCode", "DiscountCodeService",
    "GiftCard", "GiftCardService",
    "InventoryItem", "InventoryItemService", "InventoryLevel", "InventoryLevelService",
    "InventoryLevelListOptions", "InventoryLevelAdjustOptions",
    "ShippingZone", "ShippingZoneService", "CarrierService", "CarrierServiceService",
    "Theme", "ThemeListOptions", "ThemeService", "Asset", "AssetService",
    "Blog", "BlogService", "Redirect", "RedirectService",
    "Webhook", "WebhookOptions", "WebhookService",
    "ApplicationCharge", "ApplicationChargeService",
    "StorefrontAccessToken", "StorefrontAccessTokenService", "ApiPermissionsService",
]
