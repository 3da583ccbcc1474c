"""
Unit tests for shopify_rest.pagination module.

Tests Link header parsing into next/previous cursors, including every
malformed header shape Shopify clients have to reject.
"""

import pytest

from shopify_rest.exceptions import ResponseDecodingError
from shopify_rest.models import ListOptions, Pagination
from shopify_rest.pagination import extract_pagination

from conftest import BASE_URL, make_response


class TestExtractPagination:
    """Test extract_pagination on raw header values."""

    def test_no_header(self):
        """A missing header is an empty pagination, not an error."""
        pagination = extract_pagination(None)

        assert pagination == Pagination()
        assert not pagination.has_next
        assert not pagination.has_previous

    def test_blank_header(self):
        assert extract_pagination("") == Pagination()
        assert extract_pagination("   ") == Pagination()

    def test_next_only(self):
        link = '<https://fooshop.myshopify.com/admin/api/2024-01/products.json?page_info=foo&limit=2>; rel="next"'

        pagination = extract_pagination(link)

        assert pagination.next_page_options == ListOptions(page_info="foo", limit=2)
        assert pagination.previous_page_options is None

    def test_next_and_previous(self):
        link = (
            '<http://valid.url?page_info=foo&limit=2>; rel="next", '
            '<http://valid.url?page_info=bar>; rel="previous"'
        )

        pagination = extract_pagination(link)

        assert pagination.next_page_options == ListOptions(page_info="foo", limit=2)
        assert pagination.previous_page_options == ListOptions(page_info="bar")
        assert pagination.has_next
        assert pagination.has_previous

    def test_unknown_relation_is_ignored(self):
        link = (
            '<http://valid.url?page_info=foo>; rel="first", '
            '<http://valid.url?page_info=bar>; rel="next"'
        )

        pagination = extract_pagination(link)

        assert pagination.next_page_options == ListOptions(page_info="bar")
        assert pagination.previous_page_options is None

    def test_invalid_entry(self):
        with pytest.raises(ResponseDecodingError) as exc_info:
            extract_pagination("invalid link")

        assert exc_info.value.message == "could not extract pagination link header"

    def test_missing_rel(self):
        with pytest.raises(ResponseDecodingError) as exc_info:
            extract_pagination("<http://valid.url?page_info=foo>")

        assert "could not extract pagination link header" in str(exc_info.value)

    def test_invalid_url(self):
        with pytest.raises(ResponseDecodingError) as exc_info:
            extract_pagination('<:invalid.url>; rel="next"')

        assert exc_info.value.message == "pagination does not contain a valid URL"

    def test_invalid_url_escape(self):
        with pytest.raises(ResponseDecodingError) as exc_info:
            extract_pagination('<http://valid.url?%invalid_query>; rel="next"')

        assert exc_info.value.message == 'invalid URL escape "%in"'

    def test_missing_page_info(self):
        with pytest.raises(ResponseDecodingError) as exc_info:
            extract_pagination('<http://valid.url?foo=bar>; rel="next"')

        assert "page_info is missing" in str(exc_info.value)

    def test_invalid_limit(self):
        with pytest.raises(ResponseDecodingError) as exc_info:
            extract_pagination('<http://valid.url?page_info=foo&limit=invalid>; rel="next"')

        assert "invalid" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_percent_encoded_cursor_is_decoded(self):
        link = '<http://valid.url?page_info=ab%3Dcd&limit=10>; rel="next"'

        pagination = extract_pagination(link)

        assert pagination.next_page_options.page_info == "ab=cd"
        assert pagination.next_page_options.limit == 10


class TestListWithPagination:
    """Test pagination through the client and resource services."""

    def test_products_page_walk(self, client, mock_request):
        """The returned cursor is sent back as the next page's query."""
        mock_request.side_effect = [
            make_response(
                200,
                {"products": [{"id": 1}, {"id": 2}]},
                headers={"Link": f'<{BASE_URL}/products.json?page_info=abc&limit=2>; rel="next"'}
            ),
            make_response(
                200,
                {"products": [{"id": 3}]},
                headers={"Link": f'<{BASE_URL}/products.json?page_info=xyz&limit=2>; rel="previous"'}
            ),
        ]

        products, pagination = client.products.list_with_pagination(ListOptions(limit=2))
        assert [p.id for p in products] == [1, 2]
        assert pagination.next_page_options == ListOptions(page_info="abc", limit=2)

        products, pagination = client.products.list_with_pagination(pagination.next_page_options)
        assert [p.id for p in products] == [3]
        assert not pagination.has_next
        assert pagination.previous_page_options == ListOptions(page_info="xyz", limit=2)

        second_call = mock_request.call_args_list[1]
        assert second_call.kwargs["params"] == {"page_info": "abc", "limit": "2"}

    def test_no_link_header(self, client, mock_request):
        mock_request.return_value = make_response(200, {"customers": [{"id": 1}]})

        customers, pagination = client.customers.list_with_pagination()

        assert len(customers) == 1
        assert pagination == Pagination()

    def test_malformed_link_header_raises(self, client, mock_request):
        mock_request.return_value = make_response(
            200,
            {"orders": []},
            headers={"Link": "garbage"}
        )

        with pytest.raises(ResponseDecodingError):
            client.orders.list_with_pagination()
