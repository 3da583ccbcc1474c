"""
Inventory and shipping resources: inventory items, inventory levels,
shipping zones and carrier services.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..context import RequestContext
from ..models import QueryOptions, ShopifyObject
from .base import (
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ListMixin,
    ResourceService,
    UpdateMixin,
    object_id,
)


@dataclass
class InventoryItem(ShopifyObject):
    id: Optional[int] = None
    sku: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    cost: Optional[Decimal] = None
    tracked: Optional[bool] = None
    requires_shipping: Optional[bool] = None
    country_code_of_origin: Optional[str] = None
    province_code_of_origin: Optional[str] = None
    harmonized_system_code: Optional[str] = None
    country_harmonized_system_codes: Optional[List[Dict[str, Any]]] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class InventoryLevel(ShopifyObject):
    """Available quantity of one inventory item at one location."""
    inventory_item_id: Optional[int] = None
    location_id: Optional[int] = None
    available: Optional[int] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class InventoryLevelListOptions(QueryOptions):
    """At least one of inventory_item_ids or location_ids is required."""
    inventory_item_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    limit: Optional[int] = None
    updated_at_min: Optional[datetime] = None


@dataclass
class InventoryLevelAdjustOptions(ShopifyObject):
    """Body of inventory_levels/adjust.json; the adjustment may be negative."""
    inventory_item_id: Optional[int] = None
    location_id: Optional[int] = None
    available_adjustment: Optional[int] = None


@dataclass
class ShippingProvince(ShopifyObject):
    id: Optional[int] = None
    country_id: Optional[int] = None
    shipping_zone_id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None
    tax: Optional[Decimal] = None
    tax_name: Optional[str] = None
    tax_type: Optional[str] = None
    tax_percentage: Optional[Decimal] = None


@dataclass
class ShippingCountry(ShopifyObject):
    id: Optional[int] = None
    shipping_zone_id: Optional[int] = None
    name: Optional[str] = None
    tax: Optional[Decimal] = None
    code: Optional[str] = None
    tax_name: Optional[str] = None
    provinces: Optional[List[ShippingProvince]] = None


@dataclass
class WeightBasedShippingRate(ShopifyObject):
    id: Optional[int] = None
    shipping_zone_id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    weight_low: Optional[Decimal] = None
    weight_high: Optional[Decimal] = None


@dataclass
class PriceBasedShippingRate(ShopifyObject):
    id: Optional[int] = None
    shipping_zone_id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    min_order_subtotal: Optional[Decimal] = None
    max_order_subtotal: Optional[Decimal] = None


@dataclass
class CarrierShippingRateProvider(ShopifyObject):
    id: Optional[int] = None
    carrier_service_id: Optional[int] = None
    shipping_zone_id: Optional[int] = None
    flat_modifier: Optional[Decimal] = None
    percent_modifier: Optional[Decimal] = None
    service_filter: Optional[Dict[str, str]] = None


@dataclass
class ShippingZone(ShopifyObject):
    id: Optional[int] = None
    name: Optional[str] = None
    profile_id: Optional[str] = None
    location_group_id: Optional[str] = None
    admin_graphql_api_id: Optional[str] = None
    countries: Optional[List[ShippingCountry]] = None
    weight_based_shipping_rates: Optional[List[WeightBasedShippingRate]] = None
    price_based_shipping_rates: Optional[List[PriceBasedShippingRate]] = None
    carrier_shipping_rate_providers: Optional[List[CarrierShippingRateProvider]] = None


@dataclass
class CarrierService(ShopifyObject):
    """
    A third-party shipping rate provider.

    Shopify requests shipping rates from callback_url at checkout.
    """
    id: Optional[int] = None
    name: Optional[str] = None
    active: Optional[bool] = None
    service_discovery: Optional[bool] = None
    carrier_service_type: Optional[str] = None
    admin_graphql_api_id: Optional[str] = None
    format: Optional[str] = None
    callback_url: Optional[str] = None


class InventoryItemService(ResourceService):
    """Inventory items at inventory_items/<id>.json."""

    base_path = "inventory_items"
    resource_key = "inventory_item"
    collection_key = "inventory_items"
    model = InventoryItem

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[InventoryItem]:
        """List inventory items; Shopify requires the ids option."""
        return self._get_many(self._path(), options, ctx)

    def get(
        self,
        inventory_item_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[InventoryItem]:
        return self._get_one(self._path(inventory_item_id), options, ctx)

    def update(self, item: InventoryItem, ctx: Optional[RequestContext] = None) -> Optional[InventoryItem]:
        return self._put(self._path(object_id(item)), self._wrap(item), ctx)


class InventoryLevelService(ResourceService):
    """
    Inventory levels at inventory_levels.json.

    Levels have no id of their own; they are addressed by the
    inventory_item_id and location_id pair. Mutations post that pair in an
    unwrapped body and return {"inventory_level": {...}}.
    """

    base_path = "inventory_levels"
    resource_key = "inventory_level"
    collection_key = "inventory_levels"
    model = InventoryLevel

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[InventoryLevel]:
        return self._get_many(self._path(), options, ctx)

    def adjust(
        self,
        options: InventoryLevelAdjustOptions,
        ctx: Optional[RequestContext] = None
    ) -> Optional[InventoryLevel]:
        """Add available_adjustment to the available quantity."""
        return self._post(self._path("adjust"), options, ctx)

    def connect(self, level: InventoryLevel, ctx: Optional[RequestContext] = None) -> Optional[InventoryLevel]:
        """Stock an inventory item at a location."""
        return self._post(self._path("connect"), level, ctx)

    def set(self, level: InventoryLevel, ctx: Optional[RequestContext] = None) -> Optional[InventoryLevel]:
        """Overwrite the available quantity."""
        return self._post(self._path("set"), level, ctx)

    def delete(self, inventory_item_id: int, location_id: int, ctx: Optional[RequestContext] = None) -> None:
        """Stop stocking an inventory item at a location."""
        options = {"inventory_item_id": inventory_item_id, "location_id": location_id}
        self._remove(self._path(), options, ctx)


class ShippingZoneService(ResourceService):
    base_path = "shipping_zones"
    resource_key = "shipping_zone"
    collection_key = "shipping_zones"
    model = ShippingZone

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[ShippingZone]:
        return self._get_many(self._path(), options, ctx)


class CarrierServiceService(ListMixin, GetMixin, CreateMixin, UpdateMixin, DeleteMixin, ResourceService):
    """Carrier services at carrier_services/<id>.json."""

    base_path = "carrier_services"
    resource_key = "carrier_service"
    collection_key = "carrier_services"
    model = CarrierService
