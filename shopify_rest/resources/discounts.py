"""
Discount resources: price rules, their discount codes and gift cards.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional

from ..context import RequestContext
from ..models import ShopifyObject
from .base import (
    CountMixin,
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ListMixin,
    ResourceService,
    UpdateMixin,
    object_id,
)


@dataclass
class PrerequisiteSubtotalRange(ShopifyObject):
    greater_than_or_equal_to: Optional[Decimal] = None


@dataclass
class PrerequisiteQuantityRange(ShopifyObject):
    greater_than_or_equal_to: Optional[int] = None


@dataclass
class PrerequisiteShippingPriceRange(ShopifyObject):
    less_than_or_equal_to: Optional[Decimal] = None


@dataclass
class PrerequisiteToEntitlementQuantityRatio(ShopifyObject):
    prerequisite_quantity: Optional[int] = None
    entitled_quantity: Optional[int] = None


@dataclass
class PriceRule(ShopifyObject):
    """
    Discount logic shared by one or more discount codes.

    value is negative for a reduction, e.g. Decimal("-10.0") with
    value_type "percentage".
    """
    id: Optional[int] = None
    title: Optional[str] = None
    value_type: Optional[str] = None
    value: Optional[Decimal] = None
    customer_selection: Optional[str] = None
    target_type: Optional[str] = None
    target_selection: Optional[str] = None
    allocation_method: Optional[str] = None
    allocation_limit: Optional[int] = None
    once_per_customer: Optional[bool] = None
    usage_limit: Optional[int] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    entitled_product_ids: Optional[List[int]] = None
    entitled_variant_ids: Optional[List[int]] = None
    entitled_collection_ids: Optional[List[int]] = None
    entitled_country_ids: Optional[List[int]] = None
    prerequisite_product_ids: Optional[List[int]] = None
    prerequisite_variant_ids: Optional[List[int]] = None
    prerequisite_collection_ids: Optional[List[int]] = None
    prerequisite_saved_search_ids: Optional[List[int]] = None
    prerequisite_customer_ids: Optional[List[int]] = None
    prerequisite_subtotal_range: Optional[PrerequisiteSubtotalRange] = None
    prerequisite_quantity_range: Optional[PrerequisiteQuantityRange] = None
    prerequisite_shipping_price_range: Optional[PrerequisiteShippingPriceRange] = None
    prerequisite_to_entitlement_quantity_ratio: Optional[PrerequisiteToEntitlementQuantityRatio] = None


@dataclass
class DiscountCode(ShopifyObject):
    id: Optional[int] = None
    price_rule_id: Optional[int] = None
    code: Optional[str] = None
    usage_count: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class GiftCard(ShopifyObject):
    id: Optional[int] = None
    api_client_id: Optional[int] = None
    balance: Optional[Decimal] = None
    initial_value: Optional[Decimal] = None
    code: Optional[str] = None
    currency: Optional[str] = None
    customer_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    disabled_at: Optional[datetime] = None
    expires_on: Optional[date] = None
    last_characters: Optional[str] = None
    line_item_id: Optional[int] = None
    note: Optional[str] = None
    order_id: Optional[int] = None
    template_suffix: Optional[str] = None
    user_id: Optional[int] = None


class PriceRuleService(ListMixin, GetMixin, CreateMixin, UpdateMixin, DeleteMixin, ResourceService):
    """Price rules at price_rules/<id>.json."""

    base_path = "price_rules"
    resource_key = "price_rule"
    collection_key = "price_rules"
    model = PriceRule


class DiscountCodeService(ResourceService):
    """Discount codes of a price rule, at price_rules/<id>/discount_codes/<id>.json."""

    base_path = "price_rules"
    resource_key = "discount_code"
    collection_key = "discount_codes"
    model = DiscountCode

    def list(
        self,
        price_rule_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> List[DiscountCode]:
        return self._get_many(self._path(price_rule_id, "discount_codes"), options, ctx)

    def get(
        self,
        price_rule_id: int,
        discount_code_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[DiscountCode]:
        return self._get_one(self._path(price_rule_id, "discount_codes", discount_code_id), options, ctx)

    def create(
        self,
        price_rule_id: int,
        discount_code: DiscountCode,
        ctx: Optional[RequestContext] = None
    ) -> Optional[DiscountCode]:
        return self._post(self._path(price_rule_id, "discount_codes"), self._wrap(discount_code), ctx)

    def update(
        self,
        price_rule_id: int,
        discount_code: DiscountCode,
        ctx: Optional[RequestContext] = None
    ) -> Optional[DiscountCode]:
        path = self._path(price_rule_id, "discount_codes", object_id(discount_code))
        return self._put(path, self._wrap(discount_code), ctx)

    def delete(self, price_rule_id: int, discount_code_id: int, ctx: Optional[RequestContext] = None) -> None:
        self._remove(self._path(price_rule_id, "discount_codes", discount_code_id), ctx=ctx)


class GiftCardService(ListMixin, CountMixin, GetMixin, CreateMixin, UpdateMixin, ResourceService):
    """
    Gift cards at gift_cards/<id>.json.

    Gift cards cannot be deleted; disable them instead.
    """

    base_path = "gift_cards"
    resource_key = "gift_card"
    collection_key = "gift_cards"
    model = GiftCard

    def disable(self, gift_card_id: int, ctx: Optional[RequestContext] = None) -> Optional[GiftCard]:
        """Permanently disable a gift card."""
        body = {"gift_card": {"id": gift_card_id}}
        return self._post(self._path(gift_card_id, "disable"), body, ctx)
