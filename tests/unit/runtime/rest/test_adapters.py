"""Unit tests for OData response adapters."""

import pytest

from graphcommunity.sharepoint.core import SerializationError
from graphcommunity.sharepoint.models import ListItem, SPList
from graphcommunity.sharepoint.runtime.rest import CollectionAdapter, EntityAdapter, Page


class TestEntityAdapter:
    def test_verbose_envelope(self, load_fixture):
        lst = EntityAdapter(SPList).parse(load_fixture("get_list_response.json"))
        assert lst.title == "Events"

    def test_minimal_payload(self):
        lst = EntityAdapter(SPList).parse({"Id": "abc", "Title": "Tasks"})
        assert lst.id == "abc"

    def test_not_an_object(self):
        with pytest.raises(SerializationError):
            EntityAdapter(SPList).parse(["not", "an", "object"])

    def test_missing_required_field(self):
        with pytest.raises(SerializationError):
            EntityAdapter(SPList).parse({"d": {"Title": "no id"}})


class TestCollectionAdapter:
    def test_verbose_results_and_next(self, load_fixture):
        page = CollectionAdapter(ListItem).parse(load_fixture("get_items_page1.json"))
        assert isinstance(page, Page)
        assert [item.id for item in page.items] == [1, 2]
        assert "skiptoken" in page.next_link

    def test_last_page_has_no_next_link(self, load_fixture):
        page = CollectionAdapter(ListItem).parse(load_fixture("get_items_page2.json"))
        assert page.next_link is None

    @pytest.mark.parametrize("key", ["odata.nextLink", "@odata.nextLink"])
    def test_minimal_value_and_next(self, key):
        page = CollectionAdapter(ListItem).parse(
            {"value": [{"Id": 5}], key: "https://next"}
        )
        assert page.items[0].id == 5
        assert page.next_link == "https://next"

    def test_order_preserved(self):
        rows = [{"Id": i} for i in (9, 3, 7)]
        page = CollectionAdapter(ListItem).parse({"d": {"results": rows}})
        assert [item.id for item in page.items] == [9, 3, 7]

    def test_missing_results(self):
        with pytest.raises(SerializationError):
            CollectionAdapter(ListItem).parse({"d": {"Id": 1}})

    def test_results_not_a_list(self):
        with pytest.raises(SerializationError):
            CollectionAdapter(ListItem).parse({"d": {"results": {"Id": 1}}})

    def test_invalid_row(self):
        with pytest.raises(SerializationError):
            CollectionAdapter(ListItem).parse({"d": {"results": [{"Title": "no id"}]}})
