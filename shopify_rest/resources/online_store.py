"""
Online store resources: themes, theme assets, blogs and URL redirects.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from ..context import RequestContext
from ..models import QueryOptions, ShopifyObject
from .base import (
    CreateMixin,
    CrudService,
    DeleteMixin,
    GetMixin,
    ListMixin,
    ResourceService,
    UpdateMixin,
)
from .metafields import Metafield


@dataclass
class Theme(ShopifyObject):
    id: Optional[int] = None
    name: Optional[str] = None
    src: Optional[str] = None
    previewable: Optional[bool] = None
    processing: Optional[bool] = None
    role: Optional[str] = None
    theme_store_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class ThemeListOptions(QueryOptions):
    role: Optional[str] = None
    fields: Optional[str] = None


@dataclass
class Asset(ShopifyObject):
    """
    A theme file, identified by its key (e.g. "templates/index.liquid").

    Text assets carry value; binary assets carry a base64 attachment or a
    src URL for Shopify to download.
    """
    key: Optional[str] = None
    value: Optional[str] = None
    attachment: Optional[str] = None
    src: Optional[str] = None
    source_key: Optional[str] = None
    content_type: Optional[str] = None
    public_url: Optional[str] = None
    size: Optional[int] = None
    checksum: Optional[str] = None
    theme_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class AssetOptions(QueryOptions):
    key: Optional[str] = field(default=None, metadata={"query": "asset[key]"})
    fields: Optional[str] = None


@dataclass
class Blog(ShopifyObject):
    id: Optional[int] = None
    title: Optional[str] = None
    handle: Optional[str] = None
    commentable: Optional[str] = None
    feedburner: Optional[str] = None
    feedburner_location: Optional[str] = None
    tags: Optional[str] = None
    template_suffix: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    metafields: Optional[List[Metafield]] = None
    admin_graphql_api_id: Optional[str] = None


@dataclass
class Redirect(ShopifyObject):
    """Storefront redirect from path to target."""
    id: Optional[int] = None
    path: Optional[str] = None
    target: Optional[str] = None


class ThemeService(ListMixin, GetMixin, CreateMixin, UpdateMixin, DeleteMixin, ResourceService):
    base_path = "themes"
    resource_key = "theme"
    collection_key = "themes"
    model = Theme


class AssetService(ResourceService):
    """
    Assets of a theme, at themes/<theme_id>/assets.json.

    Single assets are selected with the asset[key] query parameter rather
    than a path segment.
    """

    base_path = "themes"
    resource_key = "asset"
    collection_key = "assets"
    model = Asset

    def list(self, theme_id: int, options: Any = None, ctx: Optional[RequestContext] = None) -> List[Asset]:
        """List the assets of a theme; values are not included."""
        return self._get_many(self._path(theme_id, "assets"), options, ctx)

    def get(self, theme_id: int, key: str, ctx: Optional[RequestContext] = None) -> Optional[Asset]:
        return self._get_one(self._path(theme_id, "assets"), AssetOptions(key=key), ctx)

    def update(self, theme_id: int, asset: Asset, ctx: Optional[RequestContext] = None) -> Optional[Asset]:
        """Create or replace an asset."""
        return self._put(self._path(theme_id, "assets"), self._wrap(asset), ctx)

    def delete(self, theme_id: int, key: str, ctx: Optional[RequestContext] = None) -> None:
        self._remove(self._path(theme_id, "assets"), AssetOptions(key=key), ctx)


class BlogService(CrudService):
    base_path = "blogs"
    resource_key = "blog"
    collection_key = "blogs"
    model = Blog


class RedirectService(CrudService):
    base_path = "redirects"
    resource_key = "redirect"
    collection_key = "redirects"
    model = Redirect
