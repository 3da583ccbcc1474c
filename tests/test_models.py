"""
Unit tests for shopify_rest.models and the resource dataclasses.

Tests JSON decoding into dataclasses (nested models, datetimes, decimals,
enums), encoding back with unset fields omitted, and query option encoding.
"""

import json
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from shopify_rest.exceptions import ResponseDecodingError
from shopify_rest.models import CountOptions, ListOptions, RateLimitInfo
from shopify_rest.resources import (
    AssetService,
    Customer,
    DraftOrderInvoice,
    GiftCard,
    Metafield,
    Order,
    OrderListOptions,
    Product,
    ProductListOptions,
    ProductStatus,
    Variant,
)
from shopify_rest.resources.online_store import AssetOptions
from shopify_rest.utils import encode_query

from conftest import make_response


class TestDecoding:
    """Test ShopifyObject.from_dict."""

    def test_nested_product(self):
        product = Product.from_dict({
            "id": 1071559582,
            "title": "Burton Custom Freestyle 151",
            "status": "active",
            "created_at": "2024-01-02T10:00:00-05:00",
            "variants": [
                {"id": 1, "price": "19.99", "weight": 0.5},
                {"id": 2, "price": "24.50"}
            ],
            "image": {"id": 9, "src": "https://cdn.shopify.com/a.png"},
            "unknown_field": "ignored"
        })

        assert product.id == 1071559582
        assert product.status == ProductStatus.ACTIVE
        assert product.created_at == datetime(2024, 1, 2, 10, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert [v.price for v in product.variants] == [Decimal("19.99"), Decimal("24.50")]
        assert product.variants[0].weight == Decimal("0.5")
        assert product.image.src == "https://cdn.shopify.com/a.png"
        assert product.handle is None

    def test_utc_suffix(self):
        customer = Customer.from_dict({"id": 1, "created_at": "2024-03-01T12:00:00Z"})
        assert customer.created_at == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_unknown_enum_value_kept(self):
        product = Product.from_dict({"status": "unlisted"})
        assert product.status == "unlisted"

    def test_date_field(self):
        card = GiftCard.from_dict({"id": 1, "expires_on": "2025-12-31", "balance": "25.00"})
        assert card.expires_on == date(2025, 12, 31)
        assert card.balance == Decimal("25.00")

    def test_nested_order(self):
        order = Order.from_dict({
            "id": 450789469,
            "total_price": "409.94",
            "customer": {"id": 207119551, "email": "bob.norman@mail.example.com"},
            "line_items": [{"id": 466157049, "quantity": 1, "price": "199.00"}],
            "shipping_address": {"city": "Ottawa", "latitude": 45.41634}
        })

        assert order.customer.email == "bob.norman@mail.example.com"
        assert order.line_items[0].price == Decimal("199.00")
        assert order.shipping_address.latitude == Decimal("45.41634")

    def test_type_mismatch_raises(self):
        with pytest.raises(ResponseDecodingError):
            Product.from_dict({"variants": {"id": 1}})

        with pytest.raises(ResponseDecodingError):
            Product.from_dict({"created_at": "not a date"})

        with pytest.raises(ResponseDecodingError):
            Variant.from_dict({"price": "abc"})

    def test_from_list(self):
        assert Product.from_list(None) == []
        assert Product.from_list([{"id": 1}, {"id": 2}]) == [Product(id=1), Product(id=2)]


class TestEncoding:
    """Test ShopifyObject.to_dict."""

    def test_unset_fields_are_omitted(self):
        assert Product(title="Hat").to_dict() == {"title": "Hat"}

    def test_values_are_json_ready(self):
        variant = Variant(
            price=Decimal("10.00"),
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            requires_shipping=False
        )

        data = variant.to_dict()

        assert data == {
            "price": "10.00",
            "created_at": "2024-01-01T00:00:00+00:00",
            "requires_shipping": False
        }
        json.dumps(data)

    def test_enum_and_nested(self):
        product = Product(status=ProductStatus.DRAFT, variants=[Variant(sku="A")])
        assert product.to_dict() == {"status": "draft", "variants": [{"sku": "A"}]}

    def test_round_trip_with_omitted_fields(self):
        original = Product(
            id=1,
            title="Hat",
            status=ProductStatus.ACTIVE,
            published_at=datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc),
            variants=[Variant(id=2, price=Decimal("9.99"))],
            metafields=[Metafield(namespace="custom", key="color", value="red")]
        )

        decoded = Product.from_dict(json.loads(json.dumps(original.to_dict())))

        assert decoded == original

    def test_invoice_sender_maps_to_from(self):
        invoice = DraftOrderInvoice(to="a@example.com", sender="shop@example.com")

        assert invoice.to_dict() == {"to": "a@example.com", "from": "shop@example.com"}
        assert DraftOrderInvoice.from_dict({"from": "shop@example.com"}).sender == "shop@example.com"


class TestQueryOptions:
    """Test list/count options encoded as query parameters."""

    def test_list_options(self):
        options = ListOptions(
            limit=50,
            since_id=10,
            created_at_min=datetime(2024, 1, 1, tzinfo=timezone.utc),
            ids=[1, 2, 3]
        )

        assert encode_query(options) == {
            "limit": "50",
            "since_id": "10",
            "created_at_min": "2024-01-01T00:00:00+00:00",
            "ids": "1,2,3"
        }

    def test_subclassed_options(self):
        options = ProductListOptions(status=[ProductStatus.ACTIVE, ProductStatus.DRAFT], vendor="Burton")
        assert encode_query(options) == {"status": "active,draft", "vendor": "Burton"}

    def test_order_list_filters(self, client, mock_request):
        mock_request.return_value = make_response(200, {"orders": [{"id": 450789469}]})
        options = OrderListOptions(
            status="any",
            financial_status="paid",
            processed_at_min=datetime(2024, 2, 1, tzinfo=timezone.utc),
            limit=250
        )

        orders = client.orders.list(options)

        assert orders == [Order(id=450789469)]
        assert mock_request.call_args.kwargs["params"] == {
            "limit": "250",
            "status": "any",
            "financial_status": "paid",
            "processed_at_min": "2024-02-01T00:00:00+00:00"
        }

    def test_renamed_parameter(self):
        assert encode_query(AssetOptions(key="templates/index.liquid")) == {
            "asset[key]": "templates/index.liquid"
        }

    def test_dict_and_none(self):
        assert encode_query(None) == {}
        assert encode_query({"payment_pending": True, "skip": None}) == {"payment_pending": "true"}
        assert encode_query(CountOptions()) == {}

    def test_invalid_options(self):
        with pytest.raises(TypeError):
            encode_query("limit=5")


class TestRateLimitInfo:

    def test_remaining(self):
        assert RateLimitInfo(request_count=32, bucket_size=40).remaining == 8
        assert RateLimitInfo().remaining is None


def test_services_are_importable():
    assert AssetService.collection_key == "assets"
