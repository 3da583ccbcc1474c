"""
Product catalogue resources: products, their variants and images,
sales-channel listings and collections.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..context import RequestContext
from ..models import ListOptions, Pagination, ShopifyObject
from .base import (
    CountMixin,
    CreateMixin,
    CrudService,
    DeleteMixin,
    GetMixin,
    ListMixin,
    ResourceService,
    object_id,
)
from .metafields import Metafield, MetafieldsMixin


class ProductStatus(str, Enum):
    """Product publishing status."""
    ACTIVE = "active"
    ARCHIVED = "archived"
    DRAFT = "draft"


@dataclass
class ProductOption(ShopifyObject):
    id: Optional[int] = None
    product_id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    values: Optional[List[str]] = None


@dataclass
class PresentmentPrice(ShopifyObject):
    amount: Optional[Decimal] = None
    currency_code: Optional[str] = None


@dataclass
class PresentmentPrices(ShopifyObject):
    price: Optional[PresentmentPrice] = None
    compare_at_price: Optional[PresentmentPrice] = None


@dataclass
class Variant(ShopifyObject):
    """A product variant. Prices and weight are Decimals."""
    id: Optional[int] = None
    product_id: Optional[int] = None
    title: Optional[str] = None
    sku: Optional[str] = None
    position: Optional[int] = None
    grams: Optional[int] = None
    inventory_policy: Optional[str] = None
    price: Optional[Decimal] = None
    compare_at_price: Optional[Decimal] = None
    fulfillment_service: Optional[str] = None
    inventory_management: Optional[str] = None
    inventory_item_id: Optional[int] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    taxable: Optional[bool] = None
    tax_code: Optional[str] = None
    barcode: Optional[str] = None
    image_id: Optional[int] = None
    inventory_quantity: Optional[int] = None
    weight: Optional[Decimal] = None
    weight_unit: Optional[str] = None
    old_inventory_quantity: Optional[int] = None
    requires_shipping: Optional[bool] = None
    admin_graphql_api_id: Optional[str] = None
    metafields: Optional[List[Metafield]] = None
    presentment_prices: Optional[List[PresentmentPrices]] = None


@dataclass
class Image(ShopifyObject):
    """
    A product image.

    Create it either from src or from a base64 attachment (with an
    optional filename). Shopify prefers the attachment when both are set.
    """
    id: Optional[int] = None
    product_id: Optional[int] = None
    position: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    width: Optional[int] = None
    height: Optional[int] = None
    src: Optional[str] = None
    attachment: Optional[str] = None
    filename: Optional[str] = None
    variant_ids: Optional[List[int]] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class Product(ShopifyObject):
    id: Optional[int] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    tags: Optional[str] = None
    status: Optional[ProductStatus] = None
    options: Optional[List[ProductOption]] = None
    variants: Optional[List[Variant]] = None
    image: Optional[Image] = None
    images: Optional[List[Image]] = None
    template_suffix: Optional[str] = None
    metafields_global_title_tag: Optional[str] = None
    metafields_global_description_tag: Optional[str] = None
    metafields: Optional[List[Metafield]] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class ProductListOptions(ListOptions):
    """Filters accepted by the product list and count endpoints."""
    collection_id: Optional[int] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    published_at_min: Optional[datetime] = None
    published_at_max: Optional[datetime] = None
    published_status: Optional[str] = None
    presentment_currencies: Optional[str] = None
    status: Optional[List[ProductStatus]] = None
    title: Optional[str] = None


@dataclass
class ProductListing(ShopifyObject):
    """A product published to the calling app's sales channel."""
    product_id: Optional[int] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    tags: Optional[str] = None
    options: Optional[List[ProductOption]] = None
    variants: Optional[List[Variant]] = None
    images: Optional[List[Image]] = None


@dataclass
class Collect(ShopifyObject):
    """Link between a product and a custom collection."""
    id: Optional[int] = None
    collection_id: Optional[int] = None
    product_id: Optional[int] = None
    featured: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    position: Optional[int] = None
    sort_value: Optional[str] = None


@dataclass
class CustomCollection(ShopifyObject):
    id: Optional[int] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    updated_at: Optional[datetime] = None
    body_html: Optional[str] = None
    sort_order: Optional[str] = None
    template_suffix: Optional[str] = None
    image: Optional[Image] = None
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    metafields: Optional[List[Metafield]] = None


@dataclass
class Rule(ShopifyObject):
    """Smart collection membership rule, e.g. tag equals "sale"."""
    column: Optional[str] = None
    relation: Optional[str] = None
    condition: Optional[str] = None


@dataclass
class SmartCollection(ShopifyObject):
    id: Optional[int] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    updated_at: Optional[datetime] = None
    body_html: Optional[str] = None
    sort_order: Optional[str] = None
    template_suffix: Optional[str] = None
    image: Optional[Image] = None
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    rules: Optional[List[Rule]] = None
    disjunctive: Optional[bool] = None
    metafields: Optional[List[Metafield]] = None


class ProductService(MetafieldsMixin, CrudService):
    """Products at products/<id>.json."""

    base_path = "products"
    resource_key = "product"
    collection_key = "products"
    model = Product
    metafield_resource = "products"


class VariantService(MetafieldsMixin, ResourceService):
    """
    Variants are listed and created under their product but fetched and
    updated at variants/<id>.json.
    """

    base_path = "variants"
    resource_key = "variant"
    collection_key = "variants"
    model = Variant
    metafield_resource = "variants"

    def _product_path(self, product_id: int, *parts: Any) -> str:
        return "/".join(["products", str(product_id), "variants"] + [str(p) for p in parts]) + ".json"

    def list(
        self,
        product_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> List[Variant]:
        return self._get_many(self._product_path(product_id), options, ctx)

    def count(self, product_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        return self._count(self._product_path(product_id, "count"), options, ctx)

    def get(self, variant_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> Optional[Variant]:
        return self._get_one(self._path(variant_id), options, ctx)

    def create(self, product_id: int, variant: Variant, ctx: Optional[RequestContext] = None) -> Optional[Variant]:
        return self._post(self._product_path(product_id), self._wrap(variant), ctx)

    def update(self, variant: Variant, ctx: Optional[RequestContext] = None) -> Optional[Variant]:
        return self._put(self._path(object_id(variant)), self._wrap(variant), ctx)

    def delete(self, product_id: int, variant_id: int, ctx: Optional[RequestContext] = None) -> None:
        self._remove(self._product_path(product_id, variant_id), ctx=ctx)


class ImageService(ResourceService):
    """Images of a product, at products/<product_id>/images/<id>.json."""

    base_path = "products"
    resource_key = "image"
    collection_key = "images"
    model = Image

    def list(self, product_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> List[Image]:
        return self._get_many(self._path(product_id, "images"), options, ctx)

    def count(self, product_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        return self._count(self._path(product_id, "images", "count"), options, ctx)

    def get(
        self,
        product_id: int,
        image_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Image]:
        return self._get_one(self._path(product_id, "images", image_id), options, ctx)

    def create(self, product_id: int, image: Image, ctx: Optional[RequestContext] = None) -> Optional[Image]:
        return self._post(self._path(product_id, "images"), self._wrap(image), ctx)

    def update(self, product_id: int, image: Image, ctx: Optional[RequestContext] = None) -> Optional[Image]:
        return self._put(self._path(product_id, "images", object_id(image)), self._wrap(image), ctx)

    def delete(self, product_id: int, image_id: int, ctx: Optional[RequestContext] = None) -> None:
        self._remove(self._path(product_id, "images", image_id), ctx=ctx)


class ProductListingService(ResourceService):
    """Products published to the calling app's sales channel."""

    base_path = "product_listings"
    resource_key = "product_listing"
    collection_key = "product_listings"
    model = ProductListing

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[ProductListing]:
        return self._get_many(self._path(), options, ctx)

    def list_with_pagination(
        self,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Tuple[List[ProductListing], Pagination]:
        return self._get_page(self._path(), options, ctx)

    def count(self, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        return self._count(self._path("count"), options, ctx)

    def get(
        self,
        product_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[ProductListing]:
        return self._get_one(self._path(product_id), options, ctx)

    def get_product_ids(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[int]:
        """Ids of every product published to the channel."""
        data = self.client.get(self._path("product_ids"), options=options, ctx=ctx)
        return list((data or {}).get("product_ids") or [])

    def publish(self, product_id: int, ctx: Optional[RequestContext] = None) -> Optional[ProductListing]:
        """Publish a product to the channel."""
        body: Dict[str, Any] = {"product_listing": {"product_id": product_id}}
        return self._put(self._path(product_id), body, ctx)

    def delete(self, product_id: int, ctx: Optional[RequestContext] = None) -> None:
        """Unpublish a product from the channel."""
        self._remove(self._path(product_id), ctx=ctx)


class CollectService(ListMixin, CountMixin, GetMixin, CreateMixin, DeleteMixin, ResourceService):
    """Product/collection links. Collects cannot be updated, only replaced."""

    base_path = "collects"
    resource_key = "collect"
    collection_key = "collects"
    model = Collect


class CustomCollectionService(MetafieldsMixin, CrudService):
    base_path = "custom_collections"
    resource_key = "custom_collection"
    collection_key = "custom_collections"
    model = CustomCollection
    metafield_resource = "collections"


class SmartCollectionService(MetafieldsMixin, CrudService):
    base_path = "smart_collections"
    resource_key = "smart_collection"
    collection_key = "smart_collections"
    model = SmartCollection
    metafield_resource = "collections"
