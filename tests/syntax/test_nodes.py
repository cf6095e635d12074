"""Tests for guarded raw node accessors."""

from __future__ import annotations

from tsdecl.syntax.nodes import (
    get_field,
    get_members_from_node,
    get_node,
    get_nodes,
    node_flags,
    node_text,
)


class TestGetField:
    def test_reads_mapping(self) -> None:
        assert get_field({"a": 1}, "a") == 1

    def test_missing_key(self) -> None:
        assert get_field({"a": 1}, "b") is None

    def test_non_mapping(self) -> None:
        assert get_field(None, "a") is None
        assert get_field("text", "a") is None
        assert get_field([1, 2], "a") is None


class TestGetNode:
    def test_only_mappings(self) -> None:
        assert get_node({"name": {"text": "x"}}, "name") == {"text": "x"}
        assert get_node({"name": "x"}, "name") is None

    def test_get_nodes_filters_elements(self) -> None:
        node = {"statements": [{"kind": "A"}, None, "junk", {"kind": "B"}]}

        assert get_nodes(node, "statements") == [{"kind": "A"}, {"kind": "B"}]

    def test_get_nodes_non_list(self) -> None:
        assert get_nodes({"statements": "abc"}, "statements") == []
        assert get_nodes({"statements": {"kind": "A"}}, "statements") == []


class TestNodeText:
    def test_text(self) -> None:
        assert node_text({"text": "foo"}) == "foo"

    def test_escaped_text_fallback(self) -> None:
        """JSON dumps of compiler identifiers only carry escapedText."""
        assert node_text({"escapedText": "foo"}) == "foo"

    def test_empty_text_is_none(self) -> None:
        assert node_text({"text": ""}) is None

    def test_non_string_text(self) -> None:
        assert node_text({"text": 5}) is None
        assert node_text(None) is None


class TestNodeFlags:
    def test_int_flags(self) -> None:
        assert node_flags({"flags": 16}) == 16

    def test_missing_or_invalid(self) -> None:
        assert node_flags({}) == 0
        assert node_flags({"flags": "16"}) == 0
        assert node_flags({"flags": True}) == 0


class TestGetMembersFromNode:
    def test_returns_members(self) -> None:
        members = [{"kind": "PropertySignature"}]

        assert get_members_from_node({"members": members}) is members

    def test_empty_members_returned(self) -> None:
        assert get_members_from_node({"members": []}) == []

    def test_absent(self) -> None:
        assert get_members_from_node({"kind": "FunctionDeclaration"}) is None
        assert get_members_from_node(None) is None
