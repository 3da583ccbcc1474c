"""
Metafields: namespaced key/value extensions attached to the shop or to
other resources (products, customers, orders, ...).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from ..context import RequestContext
from ..models import ShopifyObject
from ..utils import metafield_path_prefix
from .base import CrudService


class MetafieldType(str, Enum):
    """Metafield value types accepted by Shopify."""
    BOOLEAN = "boolean"
    COLOR = "color"
    DATE = "date"
    DATE_TIME = "date_time"
    DIMENSION = "dimension"
    JSON = "json"
    MONEY = "money"
    MULTI_LINE_TEXT_FIELD = "multi_line_text_field"
    NUMBER_DECIMAL = "number_decimal"
    NUMBER_INTEGER = "number_integer"
    RATING = "rating"
    RICH_TEXT_FIELD = "rich_text_field"
    SINGLE_LINE_TEXT_FIELD = "single_line_text_field"
    URL = "url"
    VOLUME = "volume"
    WEIGHT = "weight"


@dataclass
class Metafield(ShopifyObject):
    """
    A Shopify metafield.

    value is always sent as given; use type to tell Shopify how to read it.
    """
    id: Optional[int] = None
    namespace: Optional[str] = None
    key: Optional[str] = None
    value: Any = None
    type: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[int] = None
    owner_resource: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class MetafieldService(CrudService):
    """
    Metafields of the shop, or of one resource when resource and
    resource_id are given.
    """

    resource_key = "metafield"
    collection_key = "metafields"
    model = Metafield

    def __init__(self, client, resource: Optional[str] = None, resource_id: Optional[int] = None):
        super().__init__(client)
        self.resource = resource
        self.resource_id = resource_id
        self.base_path = metafield_path_prefix(resource, resource_id)


class MetafieldsMixin:
    """
    Metafield operations for a resource service.

    The service sets metafield_resource to the owner path fragment, e.g.
    "products".
    """

    metafield_resource: str = ""

    def _metafields(self, resource_id: int) -> MetafieldService:
        return MetafieldService(self.client, self.metafield_resource, resource_id)

    def list_metafields(
        self,
        resource_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> List[Metafield]:
        return self._metafields(resource_id).list(options, ctx)

    def count_metafields(
        self,
        resource_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> int:
        return self._metafields(resource_id).count(options, ctx)

    def get_metafield(
        self,
        resource_id: int,
        metafield_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Metafield]:
        return self._metafields(resource_id).get(metafield_id, options, ctx)

    def create_metafield(
        self,
        resource_id: int,
        metafield: Metafield,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Metafield]:
        return self._metafields(resource_id).create(metafield, ctx)

    def update_metafield(
        self,
        resource_id: int,
        metafield: Metafield,
        ctx: Optional[RequestContext] = None
    ) -> Optional[Metafield]:
        return self._metafields(resource_id).update(metafield, ctx)

    def delete_metafield(
        self,
        resource_id: int,
        metafield_id: int,
        ctx: Optional[RequestContext] = None
    ) -> None:
        self._metafields(resource_id).delete(metafield_id, ctx)
