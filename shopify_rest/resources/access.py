"""
App-level resources: webhook subscriptions, one-time application charges,
storefront access tokens and the app installation itself.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from ..context import RequestContext
from ..models import QueryOptions, ShopifyObject
from .base import CrudService, ResourceService, object_id


@dataclass
class Webhook(ShopifyObject):
    """Subscription delivering topic events (e.g. "orders/create") to address."""
    id: Optional[int] = None
    address: Optional[str] = None
    topic: Optional[str] = None
    format: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    fields: Optional[List[str]] = None
    metafield_namespaces: Optional[List[str]] = None
    private_metafield_namespaces: Optional[List[str]] = None
    api_version: Optional[str] = None


@dataclass
class WebhookOptions(QueryOptions):
    address: Optional[str] = None
    topic: Optional[str] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None


@dataclass
class ApplicationCharge(ShopifyObject):
    id: Optional[int] = None
    name: Optional[str] = None
    api_client_id: Optional[int] = None
    price: Optional[Decimal] = None
    status: Optional[str] = None
    return_url: Optional[str] = None
    test: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    charge_type: Optional[str] = None
    decorated_return_url: Optional[str] = None
    confirmation_url: Optional[str] = None


@dataclass
class StorefrontAccessToken(ShopifyObject):
    id: Optional[int] = None
    title: Optional[str] = None
    access_token: Optional[str] = None
    access_scope: Optional[str] = None
    created_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class WebhookService(CrudService):
    base_path = "webhooks"
    resource_key = "webhook"
    collection_key = "webhooks"
    model = Webhook


class ApplicationChargeService(ResourceService):
    """
    One-time charges at application_charges/<id>.json.

    The merchant approves a charge at its confirmation_url; older API
    versions then require activate().
    """

    base_path = "application_charges"
    resource_key = "application_charge"
    collection_key = "application_charges"
    model = ApplicationCharge

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[ApplicationCharge]:
        return self._get_many(self._path(), options, ctx)

    def get(
        self,
        charge_id: int,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Optional[ApplicationCharge]:
        return self._get_one(self._path(charge_id), options, ctx)

    def create(self, charge: ApplicationCharge, ctx: Optional[RequestContext] = None) -> Optional[ApplicationCharge]:
        return self._post(self._path(), self._wrap(charge), ctx)

    def activate(self, charge: ApplicationCharge, ctx: Optional[RequestContext] = None) -> Optional[ApplicationCharge]:
        return self._post(self._path(object_id(charge), "activate"), self._wrap(charge), ctx)


class StorefrontAccessTokenService(ResourceService):
    base_path = "storefront_access_tokens"
    resource_key = "storefront_access_token"
    collection_key = "storefront_access_tokens"
    model = StorefrontAccessToken

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[StorefrontAccessToken]:
        return self._get_many(self._path(), options, ctx)

    def create(
        self,
        token: StorefrontAccessToken,
        ctx: Optional[RequestContext] = None
    ) -> Optional[StorefrontAccessToken]:
        return self._post(self._path(), self._wrap(token), ctx)

    def delete(self, token_id: int, ctx: Optional[RequestContext] = None) -> None:
        self._remove(self._path(token_id), ctx=ctx)


class ApiPermissionsService(ResourceService):
    """The calling app's installation on the shop."""

    base_path = "api_permissions"

    def delete(self, ctx: Optional[RequestContext] = None) -> None:
        """Uninstall the app, revoking its access token."""
        self._remove(self._path("current"), ctx=ctx)
