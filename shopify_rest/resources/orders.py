"""
Order resources: orders, draft orders, transactions, fulfillments and their
tracking events, order risks and abandoned checkouts.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from ..context import RequestContext
from ..models import ListOptions, Pagination, ShopifyObject
from ..utils import fulfillment_path_prefix
from .base import CrudService, ResourceService, object_id
from .customers import Customer
from .metafields import Metafield, MetafieldsMixin


@dataclass
class Address(ShopifyObject):
    """Billing or shipping address of an order or checkout."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None


@dataclass
class TaxLine(ShopifyObject):
    title: Optional[str] = None
    price: Optional[Decimal] = None
    rate: Optional[Decimal] = None


@dataclass
class NoteAttribute(ShopifyObject):
    name: Optional[str] = None
    value: Any = None


@dataclass
class AppliedDiscount(ShopifyObject):
    title: Optional[str] = None
    description: Optional[str] = None
    value: Optional[str] = None
    value_type: Optional[str] = None
    amount: Optional[Decimal] = None


@dataclass
class LineItem(ShopifyObject):
    id: Optional[int] = None
    product_id: Optional[int] = None
    variant_id: Optional[int] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None
    total_discount: Optional[Decimal] = None
    title: Optional[str] = None
    variant_title: Optional[str] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    vendor: Optional[str] = None
    gift_card: Optional[bool] = None
    taxable: Optional[bool] = None
    requires_shipping: Optional[bool] = None
    fulfillment_service: Optional[str] = None
    fulfillment_status: Optional[str] = None
    fulfillable_quantity: Optional[int] = None
    grams: Optional[int] = None
    properties: Optional[List[NoteAttribute]] = None
    tax_lines: Optional[List[TaxLine]] = None
    applied_discount: Optional[AppliedDiscount] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class ShippingLine(ShopifyObject):
    id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[Decimal] = None
    code: Optional[str] = None
    source: Optional[str] = None
    handle: Optional[str] = None
    custom: Optional[bool] = None
    carrier_identifier: Optional[str] = None
    tax_lines: Optional[List[TaxLine]] = None


@dataclass
class OrderDiscountCode(ShopifyObject):
    """Discount code applied to an order."""
    code: Optional[str] = None
    amount: Optional[Decimal] = None
    type: Optional[str] = None


@dataclass
class Transaction(ShopifyObject):
    id: Optional[int] = None
    order_id: Optional[int] = None
    parent_id: Optional[int] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    kind: Optional[str] = None
    gateway: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    authorization: Optional[str] = None
    error_code: Optional[str] = None
    source_name: Optional[str] = None
    test: Optional[bool] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None
    device_id: Optional[int] = None
    created_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    receipt: Optional[Dict[str, Any]] = None
    payment_details: Optional[Dict[str, Any]] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class FulfillmentTrackingInfo(ShopifyObject):
    company: Optional[str] = None
    number: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Receipt(ShopifyObject):
    testcase: Optional[bool] = None
    authorization: Optional[str] = None


@dataclass
class FulfillmentOrderLineItem(ShopifyObject):
    id: Optional[int] = None
    quantity: Optional[int] = None


@dataclass
class LineItemByFulfillmentOrder(ShopifyObject):
    fulfillment_order_id: Optional[int] = None
    fulfillment_order_line_items: Optional[List[FulfillmentOrderLineItem]] = None


@dataclass
class Fulfillment(ShopifyObject):
    id: Optional[int] = None
    order_id: Optional[int] = None
    location_id: Optional[int] = None
    status: Optional[str] = None
    service: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tracking_company: Optional[str] = None
    shipment_status: Optional[str] = None
    tracking_info: Optional[FulfillmentTrackingInfo] = None
    tracking_number: Optional[str] = None
    tracking_numbers: Optional[List[str]] = None
    tracking_url: Optional[str] = None
    tracking_urls: Optional[List[str]] = None
    receipt: Optional[Receipt] = None
    line_items: Optional[List[LineItem]] = None
    line_items_by_fulfillment_order: Optional[List[LineItemByFulfillmentOrder]] = None
    notify_customer: Optional[bool] = None


@dataclass
class FulfillmentEvent(ShopifyObject):
    """A tracking update on a fulfillment, e.g. in_transit or delivered."""
    id: Optional[int] = None
    fulfillment_id: Optional[int] = None
    order_id: Optional[int] = None
    shop_id: Optional[int] = None
    status: Optional[str] = None
    message: Optional[str] = None
    happened_at: Optional[datetime] = None
    estimated_delivery_at: Optional[datetime] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    address1: Optional[str] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Order(ShopifyObject):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    number: Optional[int] = None
    order_number: Optional[int] = None
    token: Optional[str] = None
    cart_token: Optional[str] = None
    checkout_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    cancel_reason: Optional[str] = None
    customer: Optional[Customer] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    currency: Optional[str] = None
    presentment_currency: Optional[str] = None
    total_price: Optional[Decimal] = None
    subtotal_price: Optional[Decimal] = None
    total_discounts: Optional[Decimal] = None
    total_line_items_price: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    taxes_included: Optional[bool] = None
    total_weight: Optional[int] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    line_items: Optional[List[LineItem]] = None
    shipping_lines: Optional[List[ShippingLine]] = None
    tax_lines: Optional[List[TaxLine]] = None
    discount_codes: Optional[List[OrderDiscountCode]] = None
    note: Optional[str] = None
    note_attributes: Optional[List[NoteAttribute]] = None
    tags: Optional[str] = None
    source_name: Optional[str] = None
    gateway: Optional[str] = None
    test: Optional[bool] = None
    buyer_accepts_marketing: Optional[bool] = None
    customer_locale: Optional[str] = None
    landing_site: Optional[str] = None
    referring_site: Optional[str] = None
    browser_ip: Optional[str] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None
    app_id: Optional[int] = None
    order_status_url: Optional[str] = None
    transactions: Optional[List[Transaction]] = None
    fulfillments: Optional[List[Fulfillment]] = None
    send_receipt: Optional[bool] = None
    send_fulfillment_receipt: Optional[bool] = None
    inventory_behaviour: Optional[str] = None
    metafields: Optional[List[Metafield]] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class OrderListOptions(ListOptions):
    """Filters accepted by the order list and count endpoints."""
    status: Optional[str] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    processed_at_min: Optional[datetime] = None
    processed_at_max: Optional[datetime] = None
    attribution_app_id: Optional[str] = None


@dataclass
class OrderCancelOptions(ShopifyObject):
    """Body of orders/<id>/cancel.json."""
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    restock: Optional[bool] = None
    reason: Optional[str] = None
    email: Optional[bool] = None


@dataclass
class DraftOrder(ShopifyObject):
    id: Optional[int] = None
    order_id: Optional[int] = None
    name: Optional[str] = None
    customer: Optional[Customer] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    note: Optional[str] = None
    note_attributes: Optional[List[NoteAttribute]] = None
    email: Optional[str] = None
    currency: Optional[str] = None
    invoice_sent_at: Optional[datetime] = None
    invoice_url: Optional[str] = None
    line_items: Optional[List[LineItem]] = None
    shipping_line: Optional[ShippingLine] = None
    tags: Optional[str] = None
    tax_lines: Optional[List[TaxLine]] = None
    applied_discount: Optional[AppliedDiscount] = None
    taxes_included: Optional[bool] = None
    total_tax: Optional[Decimal] = None
    tax_exempt: Optional[bool] = None
    total_price: Optional[Decimal] = None
    subtotal_price: Optional[Decimal] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    status: Optional[str] = None
    # Request only: use the customer's default address
    use_customer_default_address: Optional[bool] = None


@dataclass
class DraftOrderInvoice(ShopifyObject):
    to: Optional[str] = None
    # "from" is a keyword; Shopify reads the sender from the shop otherwise
    sender: Optional[str] = None
    subject: Optional[str] = None
    custom_message: Optional[str] = None
    bcc: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, dict) and "from" in data:
            data = dict(data)
            data["sender"] = data.pop("from")
        return super().from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if "sender" in result:
            result["from"] = result.pop("sender")
        return result


@dataclass
class OrderRisk(ShopifyObject):
    id: Optional[int] = None
    checkout_id: Optional[int] = None
    order_id: Optional[int] = None
    cause_cancel: Optional[bool] = None
    display: Optional[bool] = None
    merchant_message: Optional[str] = None
    message: Optional[str] = None
    score: Optional[Decimal] = None
    source: Optional[str] = None
    recommendation: Optional[str] = None


@dataclass
class AbandonedCheckout(ShopifyObject):
    id: Optional[int] = None
    token: Optional[str] = None
    cart_token: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    gateway: Optional[str] = None
    buyer_accepts_marketing: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    landing_site: Optional[str] = None
    referring_site: Optional[str] = None
    note: Optional[str] = None
    note_attributes: Optional[List[NoteAttribute]] = None
    abandoned_checkout_url: Optional[str] = None
    currency: Optional[str] = None
    presentment_currency: Optional[str] = None
    customer_locale: Optional[str] = None
    source_name: Optional[str] = None
    taxes_included: Optional[bool] = None
    total_weight: Optional[int] = None
    total_discounts: Optional[Decimal] = None
    total_line_items_price: Optional[Decimal] = None
    total_price: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    subtotal_price: Optional[Decimal] = None
    line_items: Optional[List[LineItem]] = None
    shipping_lines: Optional[List[ShippingLine]] = None
    tax_lines: Optional[List[TaxLine]] = None
    discount_codes: Optional[List[OrderDiscountCode]] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    customer: Optional[Customer] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None
    device_id: Optional[int] = None


class FulfillmentService(ResourceService):
    """
    Fulfillments, either of one order (orders/<id>/fulfillments) or at the
    shop level (fulfillments) for fulfillment-order based calls.
    """

    resource_key = "fulfillment"
    collection_key = "fulfillments"
    model = Fulfillment

    def __init__(self, client, resource: Optional[str] = None, resource_id: Optional[int] = None):
        super().__init__(client)
        self.resource = resource
        self.resource_id = resource_id
        self.base_path = fulfillment_path_prefix(resource, resource_id)

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[Fulfillment]:
        return self._get_many(self._path(), options, ctx)

    def count(self, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        return self._count(self._path("count"), options, ctx)

    def get(
        self,
        fulfillment_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        return self._get_one(self._path(fulfillment_id), options, ctx)

    def create(self, fulfillment: Fulfillment, ctx: Optional[RequestContext] = None) -> Optional[Fulfillment]:
        return self._post(self._path(), self._wrap(fulfillment), ctx)

    def update(self, fulfillment: Fulfillment, ctx: Optional[RequestContext] = None) -> Optional[Fulfillment]:
        return self._put(self._path(object_id(fulfillment)), self._wrap(fulfillment), ctx)

    def complete(self, fulfillment_id: int, ctx: Optional[RequestContext] = None) -> Optional[Fulfillment]:
        """Mark a pending fulfillment as complete."""
        return self._post(self._path(fulfillment_id, "complete"), None, ctx)

    def transition(self, fulfillment_id: int, ctx: Optional[RequestContext] = None) -> Optional[Fulfillment]:
        """Move a pending fulfillment to open."""
        return self._post(self._path(fulfillment_id, "open"), None, ctx)

    def cancel(self, fulfillment_id: int, ctx: Optional[RequestContext] = None) -> Optional[Fulfillment]:
        return self._post(self._path(fulfillment_id, "cancel"), None, ctx)

    def update_tracking(
        self,
        fulfillment_id: int,
        tracking_info: FulfillmentTrackingInfo,
        notify_customer: bool = False,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        """Replace the tracking details of a fulfillment."""
        body = Fulfillment(tracking_info=tracking_info, notify_customer=notify_customer)
        return self._post(self._path(fulfillment_id, "update_tracking"), self._wrap(body), ctx)


class FulfillmentEventService(ResourceService):
    """
    Tracking events of a fulfillment, at
    orders/<order_id>/fulfillments/<fulfillment_id>/events/<id>.json.

    New events are sent under "event"; Shopify answers with
    "fulfillment_event".
    """

    base_path = "orders"
    resource_key = "fulfillment_event"
    collection_key = "fulfillment_events"
    model = FulfillmentEvent

    def _events_path(self, order_id: int, fulfillment_id: int, *parts: Any) -> str:
        return self._path(order_id, "fulfillments", fulfillment_id, "events", *parts)

    def list(
        self,
        order_id: int,
        fulfillment_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> List[FulfillmentEvent]:
        return self._get_many(self._events_path(order_id, fulfillment_id), options, ctx)

    def get(
        self,
        order_id: int,
        fulfillment_id: int,
        event_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[FulfillmentEvent]:
        return self._get_one(self._events_path(order_id, fulfillment_id, event_id), options, ctx)

    def create(
        self,
        order_id: int,
        fulfillment_id: int,
        event: FulfillmentEvent,
        ctx: Optional[RequestContext] = None
    ) -> Optional[FulfillmentEvent]:
        """Record a tracking update such as "out_for_delivery"."""
        return self._post(self._events_path(order_id, fulfillment_id), self._wrap(event, "event"), ctx)

    def delete(
        self,
        order_id: int,
        fulfillment_id: int,
        event_id: int,
        ctx: Optional[RequestContext] = None
    ) -> None:
        self._remove(self._events_path(order_id, fulfillment_id, event_id), ctx=ctx)


class FulfillmentsMixin:
    """
    Fulfillment operations for a resource service.

    The service sets fulfillment_resource to the owner path fragment, e.g.
    "orders".
    """

    fulfillment_resource: str = ""

    def _fulfillments(self, resource_id: int) -> FulfillmentService:
        return FulfillmentService(self.client, self.fulfillment_resource, resource_id)

    def list_fulfillments(
        self,
        resource_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> List[Fulfillment]:
        return self._fulfillments(resource_id).list(options, ctx)

    def count_fulfillments(
        self,
        resource_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> int:
        return self._fulfillments(resource_id).count(options, ctx)

    def get_fulfillment(
        self,
        resource_id: int,
        fulfillment_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        return self._fulfillments(resource_id).get(fulfillment_id, options, ctx)

    def create_fulfillment(
        self,
        resource_id: int,
        fulfillment: Fulfillment,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        return self._fulfillments(resource_id).create(fulfillment, ctx)

    def update_fulfillment(
        self,
        resource_id: int,
        fulfillment: Fulfillment,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        return self._fulfillments(resource_id).update(fulfillment, ctx)

    def complete_fulfillment(
        self,
        resource_id: int,
        fulfillment_id: int,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        return self._fulfillments(resource_id).complete(fulfillment_id, ctx)

    def transition_fulfillment(
        self,
        resource_id: int,
        fulfillment_id: int,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        return self._fulfillments(resource_id).transition(fulfillment_id, ctx)

    def cancel_fulfillment(
        self,
        resource_id: int,
        fulfillment_id: int,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Fulfillment]:
        return self._fulfillments(resource_id).cancel(fulfillment_id, ctx)


class OrderService(MetafieldsMixin, FulfillmentsMixin, CrudService):
    """Orders at orders/<id>.json."""

    base_path = "orders"
    resource_key = "order"
    collection_key = "orders"
    model = Order
    metafield_resource = "orders"
    fulfillment_resource = "orders"

    def cancel(
        self,
        order_id: int,
        options: Optional[OrderCancelOptions] = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Order]:
        """
        Cancel an order.

        Args:
            order_id: Order to cancel
            options: Refund, restock and notification settings
            ctx: Deadline and cancellation for the call
        """
        return self._post(self._path(order_id, "cancel"), options, ctx)

    def close(self, order_id: int, ctx: Optional[RequestContext] = None) -> Optional[Order]:
        return self._post(self._path(order_id, "close"), None, ctx)

    def open(self, order_id: int, ctx: Optional[RequestContext] = None) -> Optional[Order]:
        """Re-open a closed order."""
        return self._post(self._path(order_id, "open"), None, ctx)


class DraftOrderService(MetafieldsMixin, CrudService):
    """Draft orders at draft_orders/<id>.json."""

    base_path = "draft_orders"
    resource_key = "draft_order"
    collection_key = "draft_orders"
    model = DraftOrder
    metafield_resource = "draft_orders"

    def send_invoice(
        self,
        draft_order_id: int,
        invoice: DraftOrderInvoice,
        ctx: Optional[RequestContext] = None
    ) -> Optional[DraftOrderInvoice]:
        """Email the invoice of a draft order to the customer."""
        return self._post(
            self._path(draft_order_id, "send_invoice"),
            self._wrap(invoice, "draft_order_invoice"),
            ctx,
            key="draft_order_invoice",
            model=DraftOrderInvoice
        )

    def complete(
        self,
        draft_order_id: int,
        payment_pending: bool = False,
        ctx: Optional[RequestContext] = None
    ) -> Optional[DraftOrder]:
        """
        Turn a draft order into an order.

        With payment_pending the order is created unpaid; otherwise it is
        marked as paid through the manual gateway.
        """
        return self._put(
            self._path(draft_order_id, "complete"),
            None,
            ctx,
            options={"payment_pending": payment_pending}
        )


class TransactionService(ResourceService):
    """Transactions of an order, at orders/<order_id>/transactions/<id>.json."""

    base_path = "orders"
    resource_key = "transaction"
    collection_key = "transactions"
    model = Transaction

    def list(self, order_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> List[Transaction]:
        return self._get_many(self._path(order_id, "transactions"), options, ctx)

    def count(self, order_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        return self._count(self._path(order_id, "transactions", "count"), options, ctx)

    def get(
        self,
        order_id: int,
        transaction_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Transaction]:
        return self._get_one(self._path(order_id, "transactions", transaction_id), options, ctx)

    def create(
        self,
        order_id: int,
        transaction: Transaction,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Transaction]:
        return self._post(self._path(order_id, "transactions"), self._wrap(transaction), ctx)


class OrderRiskService(ResourceService):
    """Fraud risks of an order, at orders/<order_id>/risks/<id>.json."""

    base_path = "orders"
    resource_key = "risk"
    collection_key = "risks"
    model = OrderRisk

    def list(self, order_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> List[OrderRisk]:
        return self._get_many(self._path(order_id, "risks"), options, ctx)

    def list_with_pagination(
        self,
        order_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Tuple[List[OrderRisk], Pagination]:
        return self._get_page(self._path(order_id, "risks"), options, ctx)

    def get(
        self,
        order_id: int,
        risk_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[OrderRisk]:
        return self._get_one(self._path(order_id, "risks", risk_id), options, ctx)

    def create(self, order_id: int, risk: OrderRisk, ctx: Optional[RequestContext] = None) -> Optional[OrderRisk]:
        return self._post(self._path(order_id, "risks"), self._wrap(risk), ctx)

    def update(
        self,
        order_id: int,
        risk_id: int,
        risk: OrderRisk,
        ctx: Optional[RequestContext] = None
    ) -> Optional[OrderRisk]:
        return self._put(self._path(order_id, "risks", risk_id), self._wrap(risk), ctx)

    def delete(self, order_id: int, risk_id: int, ctx: Optional[RequestContext] = None) -> None:
        self._remove(self._path(order_id, "risks", risk_id), ctx=ctx)


class AbandonedCheckoutService(ResourceService):
    """Abandoned checkouts, at checkouts.json."""

    base_path = "checkouts"
    resource_key = "checkout"
    collection_key = "checkouts"
    model = AbandonedCheckout

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[AbandonedCheckout]:
        return self._get_many(self._path(), options, ctx)

    def list_with_pagination(
        self,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Tuple[List[AbandonedCheckout], Pagination]:
        return self._get_page(self._path(), options, ctx)
