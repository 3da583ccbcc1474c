"""
Customer resources: customers and their addresses.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from ..context import RequestContext
from ..models import QueryOptions, ShopifyObject
from .base import CrudService, ResourceService, object_id
from .metafields import Metafield, MetafieldsMixin


@dataclass
class CustomerAddress(ShopifyObject):
    id: Optional[int] = None
    customer_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    province_code: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    default: Optional[bool] = None


@dataclass
class EmailMarketingConsent(ShopifyObject):
    state: Optional[str] = None
    opt_in_level: Optional[str] = None
    consent_updated_at: Optional[datetime] = None


@dataclass
class SMSMarketingConsent(ShopifyObject):
    state: Optional[str] = None
    opt_in_level: Optional[str] = None
    consent_updated_at: Optional[datetime] = None
    consent_collected_from: Optional[str] = None


@dataclass
class Customer(ShopifyObject):
    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    state: Optional[str] = None
    note: Optional[str] = None
    verified_email: Optional[bool] = None
    multipass_identifier: Optional[str] = None
    orders_count: Optional[int] = None
    tax_exempt: Optional[bool] = None
    total_spent: Optional[Decimal] = None
    phone: Optional[str] = None
    tags: Optional[str] = None
    last_order_id: Optional[int] = None
    last_order_name: Optional[str] = None
    accepts_marketing: Optional[bool] = None
    accepts_marketing_updated_at: Optional[datetime] = None
    email_marketing_consent: Optional[EmailMarketingConsent] = None
    sms_marketing_consent: Optional[SMSMarketingConsent] = None
    default_address: Optional[CustomerAddress] = None
    addresses: Optional[List[CustomerAddress]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    metafields: Optional[List[Metafield]] = None


@dataclass
class CustomerSearchOptions(QueryOptions):
    """
    Options for customers/search.json.

    query uses Shopify's search syntax, e.g. "email:bob@example.com".
    """
    query: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    fields: Optional[str] = None
    order: Optional[str] = None


class CustomerService(MetafieldsMixin, CrudService):
    """Customers at customers/<id>.json."""

    base_path = "customers"
    resource_key = "customer"
    collection_key = "customers"
    model = Customer
    metafield_resource = "customers"

    def search(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[Customer]:
        """
        Search customers.

        Args:
            options: CustomerSearchOptions or a dict with "query"
            ctx: Deadline and cancellation for the call

        Returns:
            List[Customer]: Matching customers
        """
        return self._get_many(self._path("search"), options, ctx)

    def list_orders(self, customer_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> list:
        """List the orders placed by a customer."""
        from .orders import Order

        return self._get_many(self._path(customer_id, "orders"), options, ctx, key="orders", model=Order)

    def list_tags(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[str]:
        """List every tag used on customers of the shop."""
        data = self.client.get(self._path("tags"), options=options, ctx=ctx)
        return [str(tag) for tag in (data or {}).get("tags") or []]


class CustomerAddressService(ResourceService):
    """Addresses of a customer, at customers/<customer_id>/addresses/<id>.json."""

    base_path = "customers"
    resource_key = "customer_address"
    collection_key = "addresses"
    model = CustomerAddress

    def list(
        self,
        customer_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> List[CustomerAddress]:
        return self._get_many(self._path(customer_id, "addresses"), options, ctx)

    def get(
        self,
        customer_id: int,
        address_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[CustomerAddress]:
        return self._get_one(self._path(customer_id, "addresses", address_id), options, ctx)

    def create(
        self,
        customer_id: int,
        address: CustomerAddress,
        ctx: Optional[RequestContext] = None
    ) -> Optional[CustomerAddress]:
        return self._post(self._path(customer_id, "addresses"), self._wrap(address, "address"), ctx)

    def update(
        self,
        customer_id: int,
        address: CustomerAddress,
        ctx: Optional[RequestContext] = None
    ) -> Optional[CustomerAddress]:
        path = self._path(customer_id, "addresses", object_id(address))
        return self._put(path, self._wrap(address, "address"), ctx)

    def delete(self, customer_id: int, address_id: int, ctx: Optional[RequestContext] = None) -> None:
        self._remove(self._path(customer_id, "addresses", address_id), ctx=ctx)

    def set_default(
        self,
        customer_id: int,
        address_id: int,
        ctx: Optional[RequestContext] = None
    ) -> Optional[CustomerAddress]:
        """Make an address the customer's default address."""
        return self._put(self._path(customer_id, "addresses", address_id, "default"), None, ctx)
