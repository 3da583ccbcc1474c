"""
Core data models for the Shopify REST client.

This module defines the dataclass codec shared by every resource model,
the list/count options sent as query strings, the pagination cursors
extracted from Link headers and the rate-limit bookkeeping snapshot.
"""

import typing
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from .exceptions import ResponseDecodingError
from .utils import parse_datetime, format_datetime

T = TypeVar("T", bound="ShopifyObject")

_type_hints_cache: Dict[type, Dict[str, Any]] = {}


def _type_hints(cls: type) -> Dict[str, Any]:
    hints = _type_hints_cache.get(cls)
    if hints is None:
        hints = typing.get_type_hints(cls)
        _type_hints_cache[cls] = hints
    return hints


def _decode(tp: Any, value: Any, name: str) -> Any:
    """Convert a JSON value into the annotated Python type."""
    if value is None or tp is Any:
        return value

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is typing.Union:
        candidates = [arg for arg in args if arg is not type(None)]
        if len(candidates) == 1:
            return _decode(candidates[0], value, name)
        return value

    if origin in (list, List):
        if not isinstance(value, list):
            raise ResponseDecodingError(f"{name}: expected a list, got {type(value).__name__}")
        item_type = args[0] if args else Any
        return [_decode(item_type, item, name) for item in value]

    if origin in (dict, Dict):
        if not isinstance(value, dict):
            raise ResponseDecodingError(f"{name}: expected an object, got {type(value).__name__}")
        return value

    if isinstance(tp, type):
        if issubclass(tp, ShopifyObject):
            if not isinstance(value, dict):
                raise ResponseDecodingError(f"{name}: expected an object, got {type(value).__name__}")
            return tp.from_dict(value)
        if issubclass(tp, datetime):
            try:
                return parse_datetime(value)
            except (TypeError, ValueError) as e:
                raise ResponseDecodingError(f"{name}: {e}") from e
        if issubclass(tp, date):
            if isinstance(value, date):
                return value
            try:
                return date.fromisoformat(str(value))
            except ValueError as e:
                raise ResponseDecodingError(f"{name}: {e}") from e
        if issubclass(tp, Decimal):
            try:
                return Decimal(str(value))
            except InvalidOperation as e:
                raise ResponseDecodingError(f"{name}: invalid decimal {value!r}") from e
        if issubclass(tp, Enum):
            # Values added by newer API versions stay plain strings
            try:
                return tp(value)
            except ValueError:
                return value

    return value


def _encode(value: Any) -> Any:
    """Convert a Python value into its JSON representation."""
    if isinstance(value, ShopifyObject):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    if isinstance(value, (datetime, date)):
        return format_datetime(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


class ShopifyObject:
    """
    Mixin for resource dataclasses.

    Field names match the JSON keys. Every field defaults to None and None
    fields are left out when encoding, so a partially populated object only
    sends what was set. Unknown JSON keys are ignored when decoding.
    """

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Dict[str, Any]]) -> Optional[T]:
        """Build an instance from a decoded JSON object."""
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ResponseDecodingError(
                f"{cls.__name__}: expected an object, got {type(data).__name__}"
            )
        hints = _type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            if f.name in data:
                kwargs[f.name] = _decode(hints[f.name], data[f.name], f"{cls.__name__}.{f.name}")
        return cls(**kwargs)

    @classmethod
    def from_list(cls: Type[T], items: Optional[List[Dict[str, Any]]]) -> List[T]:
        """Build a list of instances from a decoded JSON array."""
        if items is None:
            return []
        if not isinstance(items, list):
            raise ResponseDecodingError(
                f"{cls.__name__}: expected a list, got {type(items).__name__}"
            )
        return [cls.from_dict(item) for item in items]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary, omitting unset fields."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = _encode(value)
        return result


class QueryOptions:
    """
    Mixin for option dataclasses sent as query strings.

    A field may set metadata={"query": "asset[key]"} when the parameter name
    is not a valid identifier.
    """

    def to_params(self) -> Dict[str, Any]:
        return {
            f.metadata.get("query", f.name): getattr(self, f.name)
            for f in fields(self)
        }


@dataclass
class ListOptions(QueryOptions):
    """
    General list options accepted by most list endpoints.

    page_info and limit are the cursor pair returned in Pagination; when
    page_info is set Shopify rejects the other filters.
    """
    page_info: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    order: Optional[str] = None
    fields: Optional[str] = None
    vendor: Optional[str] = None
    ids: Optional[List[int]] = None


@dataclass
class CountOptions(QueryOptions):
    """Options accepted by count endpoints."""
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None


@dataclass
class Pagination:
    """
    Cursors for the pages around a list response.

    Pass next_page_options (or previous_page_options) as the options of the
    same list call to fetch that page. Either is None at the ends.
    """
    next_page_options: Optional[ListOptions] = None
    previous_page_options: Optional[ListOptions] = None

    @property
    def has_next(self) -> bool:
        return self.next_page_options is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page_options is not None


@dataclass
class RateLimitInfo:
    """
    Snapshot of the REST call bucket as last reported by Shopify.

    Attributes:
        request_count: Credits used, from X-Shopify-Shop-Api-Call-Limit
        bucket_size: Bucket capacity, from X-Shopify-Shop-Api-Call-Limit
        retry_after_seconds: Retry-After of the last response, 0 if none
    """
    request_count: int = 0
    bucket_size: int = 0
    retry_after_seconds: float = 0.0

    @property
    def remaining(self) -> Optional[int]:
        if not self.bucket_size:
            return None
        return self.bucket_size - self.request_count


@dataclass
class ShopifyResponse:
    """Decoded response returned by ShopifyClient.request."""
    status_code: int
    data: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
