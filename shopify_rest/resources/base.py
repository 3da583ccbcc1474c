"""
Generic resource accessors.

Every Shopify resource is a path fragment plus an envelope key:
``{"product": {...}}`` for one object and ``{"products": [...]}`` for a
list. ResourceService wraps and unwraps those envelopes around the shared
client; the operation mixins add list/count/get/create/update/delete and
CrudService combines all of them for resources addressed as
``<base_path>/<id>.json``.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Type

from ..context import RequestContext
from ..exceptions import ResponseDecodingError
from ..models import Pagination, ShopifyObject

if TYPE_CHECKING:
    from ..client import ShopifyClient


class ResourceService:
    """
    Base class for resource services.

    Attributes:
        base_path: Path fragment, e.g. "products"
        resource_key: Envelope key for one object, e.g. "product"
        collection_key: Envelope key for a list, e.g. "products"
        model: ShopifyObject dataclass the envelope decodes into
    """

    base_path: str = ""
    resource_key: str = ""
    collection_key: str = ""
    model: Type[ShopifyObject] = ShopifyObject

    def __init__(self, client: "ShopifyClient"):
        self.client = client

    def _path(self, *parts: Any) -> str:
        """Build "<base_path>/<part>/.../<last>.json"."""
        segments = [self.base_path] + [str(part) for part in parts]
        return "/".join(segment for segment in segments if segment) + ".json"

    def _wrap(self, obj: Any, key: Optional[str] = None) -> Dict[str, Any]:
        key = key or self.resource_key
        if isinstance(obj, ShopifyObject):
            return {key: obj.to_dict()}
        if isinstance(obj, dict):
            return {key: obj}
        raise TypeError(f"Expected a {self.model.__name__} or dict, got {type(obj).__name__}")

    def _unwrap_one(self, data: Any, key: Optional[str] = None, model: Optional[Type[ShopifyObject]] = None):
        key = key or self.resource_key
        model = model or self.model
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ResponseDecodingError(f"expected an object with key {key!r}")
        return model.from_dict(data.get(key))

    def _unwrap_many(self, data: Any, key: Optional[str] = None, model: Optional[Type[ShopifyObject]] = None) -> list:
        key = key or self.collection_key
        model = model or self.model
        if data is None:
            return []
        if not isinstance(data, dict):
            raise ResponseDecodingError(f"expected an object with key {key!r}")
        return model.from_list(data.get(key))

    def _get_one(self, path: str, options: Any = None, ctx: Optional[RequestContext] = None, **unwrap):
        return self._unwrap_one(self.client.get(path, options=options, ctx=ctx), **unwrap)

    def _get_many(self, path: str, options: Any = None, ctx: Optional[RequestContext] = None, **unwrap) -> list:
        return self._unwrap_many(self.client.get(path, options=options, ctx=ctx), **unwrap)

    def _get_page(
        self,
        path: str,
        options: Any = None,
        ctx: Optional[RequestContext] = None,
        **unwrap
    ) -> Tuple[list, Pagination]:
        data, pagination = self.client.get_with_pagination(path, options=options, ctx=ctx)
        return self._unwrap_many(data, **unwrap), pagination

    def _count(self, path: str, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        return self.client.count(path, options=options, ctx=ctx)

    def _post(self, path: str, body: Any, ctx: Optional[RequestContext] = None, **unwrap):
        return self._unwrap_one(self.client.post(path, data=body, ctx=ctx), **unwrap)

    def _put(self, path: str, body: Any, ctx: Optional[RequestContext] = None, options: Any = None, **unwrap):
        return self._unwrap_one(self.client.put(path, data=body, options=options, ctx=ctx), **unwrap)

    def _remove(self, path: str, options: Any = None, ctx: Optional[RequestContext] = None) -> None:
        self.client.delete(path, options=options, ctx=ctx)


def object_id(obj: Any, name: str = "id") -> Any:
    """Read the id of a model or dict, failing loudly when unset."""
    value = obj.get(name) if isinstance(obj, dict) else getattr(obj, name, None)
    if value is None:
        raise ValueError(f"{type(obj).__name__} has no {name}")
    return value


# Operation mixins for resources at <base_path>/<id>.json. Services combine
# the ones their endpoint supports ahead of ResourceService.

class ListMixin:

    def list(self, options: Any = None, ctx: Optional[RequestContext] = None) -> List[Any]:
        """List objects matching the options."""
        return self._get_many(self._path(), options, ctx)

    def list_with_pagination(
        self,
        options: Any = None,
        ctx: Optional[RequestContext] = None
    ) -> Tuple[List[Any], Pagination]:
        """List one page and return the cursors for its neighbours."""
        return self._get_page(self._path(), options, ctx)


class CountMixin:

    def count(self, options: Any = None, ctx: Optional[RequestContext] = None) -> int:
        """Count objects matching the options."""
        return self._count(self._path("count"), options, ctx)


class GetMixin:

    def get(self, resource_id: int, options: Any = None, ctx: Optional[RequestContext] = None):
        """Get one object by id."""
        return self._get_one(self._path(resource_id), options, ctx)


class CreateMixin:

    def create(self, obj: Any, ctx: Optional[RequestContext] = None):
        """Create an object and return it as stored by Shopify."""
        return self._post(self._path(), self._wrap(obj), ctx)


class UpdateMixin:

    def update(self, obj: Any, ctx: Optional[RequestContext] = None):
        """Update an existing object, addressed by its id."""
        return self._put(self._path(object_id(obj)), self._wrap(obj), ctx)


class DeleteMixin:

    def delete(self, resource_id: int, ctx: Optional[RequestContext] = None) -> None:
        """Delete an object by id."""
        self._remove(self._path(resource_id), ctx=ctx)


class CrudService(
    ListMixin,
    CountMixin,
    GetMixin,
    CreateMixin,
    UpdateMixin,
    DeleteMixin,
    ResourceService
):
    """Standard operations for resources at <base_path>/<id>.json."""
