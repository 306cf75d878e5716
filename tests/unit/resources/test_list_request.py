"""Unit tests for list navigation and list requests."""

import uuid

import pytest

from graphcommunity.sharepoint import InvalidIdentifierError, ListCreationInformation
from graphcommunity.sharepoint.config import (
    ACCEPT_HEADER_NAME,
    ACCEPT_HEADER_VALUE,
    ODATA_VERSION_HEADER_NAME,
    ODATA_VERSION_HEADER_VALUE,
)


def _assert_protocol_headers(request):
    assert request.headers.getall(ACCEPT_HEADER_NAME) == [ACCEPT_HEADER_VALUE]
    assert request.headers.getall(ODATA_VERSION_HEADER_NAME) == [ODATA_VERSION_HEADER_VALUE]


class TestListById:
    def test_generates_correct_request_uri_and_headers(self, api, web_url):
        list_id = uuid.uuid4()

        request = api.web.lists[list_id].request().resource.build_http_request()

        assert request.url == f"{web_url}/_api/web/lists('{list_id}')"
        assert request.method == "GET"
        _assert_protocol_headers(request)

    def test_missing_id_raises_before_request(self, api, mock_transport):
        with pytest.raises(InvalidIdentifierError, match="missing id"):
            api.web.lists[uuid.UUID(int=0)]
        mock_transport.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_returns_correct_response(self, api, mock_transport, load_fixture):
        mock_transport.send.return_value = load_fixture("get_list_response.json")

        actual = await api.web.lists["6f094ea6-2222-4f2e-b864-54f706f8b07a"].request().get()

        assert actual.id == "6f094ea6-2222-4f2e-b864-54f706f8b07a"
        assert actual.title == "Events"
        assert actual.base_template == 106
        mock_transport.send.assert_awaited_once()


class TestListByTitle:
    def test_generates_correct_request_uri_and_headers(self, api, web_url):
        request = api.web.lists["mockListTitle"].request().resource.build_http_request()

        assert request.url == f"{web_url}/_api/web/lists/getByTitle('mockListTitle')"
        _assert_protocol_headers(request)

    def test_title_with_quote_escaped(self, api, web_url):
        url = api.web.lists["Bob's"].url
        assert url == f"{web_url}/_api/web/lists/getByTitle('Bob''s')"

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_missing_title_raises_before_request(self, api, mock_transport, title):
        with pytest.raises(InvalidIdentifierError, match="missing title"):
            api.web.lists[title]
        mock_transport.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_returns_correct_response(self, api, mock_transport, load_fixture):
        mock_transport.send.return_value = load_fixture("get_list_response.json")

        actual = await api.web.lists["Events"].request().get()

        assert actual.id == "6f094ea6-2222-4f2e-b864-54f706f8b07a"
        assert actual.title == "Events"
        assert actual.description == ""


class TestListWrites:
    @pytest.mark.asyncio
    async def test_update_uses_merge_tunnelling(self, api, mock_transport, sent_requests):
        mock_transport.send.return_value = None

        await api.web.lists["Events"].request().update({"Description": "Team events"})

        (request,) = sent_requests()
        assert request.method == "POST"
        assert request.headers["X-HTTP-Method"] == "MERGE"
        assert request.headers["IF-MATCH"] == "*"
        assert request.body == '{"Description":"Team events"}'
        assert request.content_type == "application/json"
        _assert_protocol_headers(request)

    @pytest.mark.asyncio
    async def test_delete_with_etag(self, api, mock_transport, sent_requests, web_url):
        mock_transport.send.return_value = None

        await api.web.lists["Events"].request().delete(etag='"3"')

        (request,) = sent_requests()
        assert request.url == f"{web_url}/_api/web/lists/getByTitle('Events')"
        assert request.headers["X-HTTP-Method"] == "DELETE"
        assert request.headers["IF-MATCH"] == '"3"'
        assert request.body is None


class TestListCollection:
    @pytest.mark.asyncio
    async def test_add(self, api, mock_transport, sent_requests, load_fixture, web_url):
        mock_transport.send.return_value = load_fixture("get_list_response.json")

        created = await api.web.lists.request().add(
            ListCreationInformation(title="Events", base_template=106)
        )

        (request,) = sent_requests()
        assert request.url == f"{web_url}/_api/web/lists"
        assert request.method == "POST"
        assert request.body == '{"Title":"Events","BaseTemplate":106}'
        assert created.title == "Events"

    @pytest.mark.asyncio
    async def test_get_first_page(self, api, mock_transport, sent_requests, web_url, load_fixture):
        row = load_fixture("get_list_response.json")["d"]
        mock_transport.send.return_value = {"d": {"results": [row]}}

        page = await api.web.lists.request().select("Id", "Title").top(10).get()

        assert [lst.title for lst in page.items] == ["Events"]
        assert page.next_link is None
        (request,) = sent_requests()
        assert request.url == f"{web_url}/_api/web/lists?$select=Id,Title&$top=10"

    def test_top_must_be_positive(self, api):
        with pytest.raises(ValueError):
            api.web.lists.request().top(0)


def test_each_request_owns_its_headers(api):
    first = api.web.lists["Events"].request()
    second = api.web.lists["Events"].request()
    first.resource.add_header("X-Custom", "1")

    assert "X-Custom" not in second.resource.headers
    assert first.resource.headers is not second.resource.headers


def test_custom_header_does_not_duplicate_protocol_header(api):
    request = api.web.lists["Events"].request()
    request.resource.add_header("accept", ACCEPT_HEADER_VALUE)

    http_request = request.resource.build_http_request()
    assert http_request.headers.getall(ACCEPT_HEADER_NAME) == [ACCEPT_HEADER_VALUE]
