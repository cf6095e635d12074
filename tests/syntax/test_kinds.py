"""Tests for SyntaxKind names and the numeric kind table."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tsdecl.core.errors import ErrorCode, SourceError
from tsdecl.syntax.kinds import KindTable, SyntaxKind

# Excerpt of JSON.stringify(ts.SyntaxKind): both directions plus marker aliases
ENUM_DUMP = {
    "0": "Unknown",
    "80": "Identifier",
    "263": "FunctionDeclaration",
    "268": "ModuleDeclaration",
    "244": "FirstStatement",
    "Unknown": 0,
    "Identifier": 80,
    "FunctionDeclaration": 263,
    "ModuleDeclaration": 268,
    "VariableStatement": 244,
    "FirstStatement": 244,
    "LastKeyword": 165,
    "ObjectKeyword": 165,
}


class TestKindTableFromDump:
    """Building tables from enum dumps."""

    def test_name_to_value_entries(self) -> None:
        table = KindTable.from_enum_dump(ENUM_DUMP)

        assert table.name_of(263) == "FunctionDeclaration"
        assert table.name_of(268) == "ModuleDeclaration"

    def test_marker_aliases_never_canonical(self) -> None:
        table = KindTable.from_enum_dump(ENUM_DUMP)

        assert table.name_of(244) == "VariableStatement"
        assert table.name_of(165) == "ObjectKeyword"

    def test_reverse_only_entries_used(self) -> None:
        table = KindTable.from_enum_dump({"7": "SemicolonToken"})

        assert table.name_of(7) == "SemicolonToken"

    def test_reverse_marker_ignored(self) -> None:
        table = KindTable.from_enum_dump({"5": "FirstTriviaToken"})

        assert table.name_of(5) == "Unknown(5)"


class TestKindTableLookup:
    """Name lookups."""

    def test_symbolic_kind_passes_through(self) -> None:
        assert KindTable().name_of("ClassDeclaration") == "ClassDeclaration"

    def test_enum_member_resolves_to_value(self) -> None:
        assert KindTable().name_of(SyntaxKind.IMPORT_DECLARATION) == "ImportDeclaration"

    def test_unmapped_integer(self) -> None:
        assert KindTable().name_of(42) == "Unknown(42)"

    @pytest.mark.parametrize("kind", [None, True, 1.5, ["x"]])
    def test_odd_discriminants(self, kind: object) -> None:
        assert KindTable().name_of(kind) == "Unknown"

    def test_get_node_name_reads_kind(self) -> None:
        table = KindTable({263: "FunctionDeclaration"})
        raw = {"kind": 263, "name": {"kind": "Identifier"}}

        assert table.get_node_name(raw) == "FunctionDeclaration"

    def test_kind_of_returns_member(self) -> None:
        table = KindTable({263: "FunctionDeclaration"})

        assert table.kind_of({"kind": 263}) is SyntaxKind.FUNCTION_DECLARATION
        assert table.kind_of({"kind": "InterfaceDeclaration"}) is SyntaxKind.INTERFACE_DECLARATION

    def test_kind_of_unknown_names(self) -> None:
        table = KindTable()

        assert table.kind_of({"kind": "JsxElement"}) is SyntaxKind.UNKNOWN
        assert table.kind_of({"kind": 999}) is SyntaxKind.UNKNOWN
        assert table.kind_of("not a node") is SyntaxKind.UNKNOWN
        assert table.kind_of({}) is SyntaxKind.UNKNOWN


class TestKindTableLoad:
    """Loading tables from disk."""

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "kinds.json"
        path.write_text(json.dumps(ENUM_DUMP))

        table = KindTable.load(path)

        assert table.name_of(80) == "Identifier"

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "kinds.yaml"
        path.write_text("Identifier: 80\nClassDeclaration: 264\n")

        table = KindTable.load(path)

        assert table.name_of(264) == "ClassDeclaration"
        assert len(table) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceError) as exc_info:
            KindTable.load(tmp_path / "missing.json")
        assert exc_info.value.code == ErrorCode.SOURCE_NOT_FOUND

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "kinds.json"
        path.write_text("{not json")

        with pytest.raises(SourceError) as exc_info:
            KindTable.load(path)
        assert exc_info.value.code == ErrorCode.KIND_TABLE_INVALID

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "kinds.yaml"
        path.write_bytes(b"Identifier: 80\n\xff\xfe: 1\n")

        with pytest.raises(SourceError) as exc_info:
            KindTable.load(path)
        assert exc_info.value.code == ErrorCode.KIND_TABLE_INVALID

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "kinds.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(SourceError):
            KindTable.load(path)

    def test_no_entries(self, tmp_path: Path) -> None:
        path = tmp_path / "kinds.json"
        path.write_text('{"comment": "nothing here"}')

        with pytest.raises(SourceError, match="no SyntaxKind entries"):
            KindTable.load(path)
