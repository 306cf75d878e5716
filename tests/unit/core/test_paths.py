"""Unit tests for resource path composition."""

import uuid

import pytest

from graphcommunity.sharepoint.core import (
    GuidIdentifier,
    NameIdentifier,
    ResourceUrl,
    address_member,
    append_by_title,
    append_key,
    append_segment,
    escape_odata_literal,
)

BASE = "https://mock.sharepoint.com/sites/mockSite/_api/web"


class TestAppendSegment:
    def test_appends_literal(self):
        url = append_segment(BASE, "lists")
        assert url == f"{BASE}/lists"
        assert isinstance(url, ResourceUrl)

    def test_trailing_slash_on_base_is_not_doubled(self):
        assert append_segment(BASE + "/", "lists") == f"{BASE}/lists"

    def test_returns_new_value(self):
        base = ResourceUrl(BASE)
        child = base.segment("lists")
        assert base == BASE
        assert child is not base

    def test_empty_segment_rejected(self):
        with pytest.raises(ValueError):
            append_segment(BASE, "/")

    def test_composition_is_associative(self):
        step_by_step = ResourceUrl(BASE).segment("lists").segment("items")
        combined = ResourceUrl(BASE).segment("lists/items")
        assert step_by_step == combined


class TestAppendKey:
    def test_guid_key_preserves_case_and_hyphenation(self):
        raw = "6F094EA6-2222-4f2e-B864-54f706f8b07a"
        assert append_key(BASE, "lists", GuidIdentifier(raw)) == f"{BASE}/lists('{raw}')"

    def test_integer_key(self):
        assert append_key(BASE, "items", 7) == f"{BASE}/items(7)"

    def test_boolean_key_rejected(self):
        with pytest.raises(TypeError):
            append_key(BASE, "items", True)

    def test_name_key_is_escaped(self):
        assert append_key(BASE, "fields", NameIdentifier("it's")) == f"{BASE}/fields('it''s')"


class TestAppendByTitle:
    def test_plain_title(self):
        assert (
            append_by_title(BASE, "lists", "mockListTitle")
            == f"{BASE}/lists/getByTitle('mockListTitle')"
        )

    def test_single_quotes_doubled(self):
        assert (
            append_by_title(BASE, "lists", "Bob's Tasks")
            == f"{BASE}/lists/getByTitle('Bob''s%20Tasks')"
        )

    def test_non_ascii_percent_encoded(self):
        assert (
            append_by_title(BASE, "lists", "Übersicht")
            == f"{BASE}/lists/getByTitle('%C3%9Cbersicht')"
        )

    def test_reserved_characters_encoded(self):
        url = append_by_title(BASE, "lists", "a/b?c#d%")
        assert url.endswith("getByTitle('a%2Fb%3Fc%23d%25')")


class TestAddressMember:
    def test_guid_member(self):
        guid = str(uuid.uuid4())
        assert (
            address_member(f"{BASE}/lists", GuidIdentifier(guid))
            == f"{BASE}/lists('{guid}')"
        )

    def test_name_member(self):
        assert (
            address_member(f"{BASE}/lists", NameIdentifier("Events"))
            == f"{BASE}/lists/getByTitle('Events')"
        )

    def test_integer_member(self):
        assert ResourceUrl(f"{BASE}/lists('x')/items").member(3) == f"{BASE}/lists('x')/items(3)"


def test_escape_odata_literal_keeps_doubled_quotes_literal():
    assert escape_odata_literal("''") == "''''"
