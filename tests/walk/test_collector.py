"""Tests for per-statement declaration collection."""

from __future__ import annotations

from typing import Any

import pytest
from builders import (
    class_decl,
    enum_decl,
    export_assignment,
    function_decl,
    ident,
    import_decl,
    import_equals,
    interface_decl,
    module_decl,
    namespace_decl,
    node,
    type_alias,
    variable_statement,
)
from structlog.testing import capture_logs

from tsdecl.declarations.factory import NodeFactory
from tsdecl.declarations.models import (
    ExportNode,
    ImportNode,
    ModuleNode,
    NamespaceNode,
    PropertyNode,
    VariableNode,
)
from tsdecl.syntax.kinds import KindTable, NodeFlags
from tsdecl.walk.collector import DeclarationKind, WalkState, classify, collect_node
from tsdecl.walk.names import parse_name_from_node
from tsdecl.walk.namespace import NamespaceScope


@pytest.fixture
def state() -> WalkState:
    return WalkState()


@pytest.fixture
def root() -> ModuleNode:
    return ModuleNode(name="root")


class TestClassify:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (function_decl("f"), DeclarationKind.FUNCTION),
            (interface_decl("I"), DeclarationKind.INTERFACE),
            (type_alias("T"), DeclarationKind.TYPE_ALIAS),
            (class_decl("C"), DeclarationKind.CLASS),
            (variable_statement("v"), DeclarationKind.VARIABLE),
            (export_assignment(ident("x")), DeclarationKind.EXPORT_ASSIGNMENT),
            (import_decl("m"), DeclarationKind.IMPORT),
            (import_equals("e"), DeclarationKind.IMPORT_EQUALS),
            (enum_decl("E"), DeclarationKind.ENUM),
            (namespace_decl("N"), DeclarationKind.NAMESPACE),
            (namespace_decl("N", flags=NodeFlags.EXPORT_NAMESPACE), DeclarationKind.NAMESPACE),
            (module_decl("m"), DeclarationKind.MODULE),
            (node("ExpressionStatement"), DeclarationKind.OTHER),
            (node("NotARealKind"), DeclarationKind.OTHER),
            ({"no": "kind"}, DeclarationKind.OTHER),
            (None, DeclarationKind.OTHER),
        ],
    )
    def test_classify(self, raw: Any, expected: DeclarationKind, state: WalkState) -> None:
        assert classify(raw, state) is expected

    def test_other_flags_are_modules(self, state: WalkState) -> None:
        assert classify(namespace_decl("N", flags=0), state) is DeclarationKind.MODULE

    def test_namespace_flags_configurable(self) -> None:
        state = WalkState(namespace_flags=frozenset({32}))

        assert classify(namespace_decl("N", flags=32), state) is DeclarationKind.NAMESPACE
        assert classify(namespace_decl("N"), state) is DeclarationKind.MODULE


class TestSupportedKinds:
    """Each supported declaration adds exactly one child keyed by its display name."""

    @pytest.mark.parametrize(
        ("raw", "node_type"),
        [
            (function_decl("foo"), PropertyNode),
            (interface_decl("Shape", "area"), PropertyNode),
            (type_alias("Id"), PropertyNode),
            (class_decl("Circle", "draw"), PropertyNode),
            (variable_statement("x", "y"), VariableNode),
            (export_assignment(ident("bar")), ExportNode),
            (import_decl("fs", "fs"), ImportNode),
            (module_decl("path"), ModuleNode),
        ],
    )
    def test_one_child_per_declaration(
        self, raw: Any, node_type: type, root: ModuleNode, state: WalkState
    ) -> None:
        collect_node(raw, root, state)

        key = parse_name_from_node(raw)
        assert list(root.children) == [key]
        assert isinstance(root.children[key], node_type)

    def test_namespace_key_prefixed(self, root: ModuleNode, state: WalkState) -> None:
        collect_node(namespace_decl("NS", function_decl("bar")), root, state)

        namespace = root.children["namespaceNS"]
        assert isinstance(namespace, NamespaceNode)
        assert namespace.name == "NS"
        assert list(namespace.children) == ["bar"]

    def test_module_body_walked(self, root: ModuleNode, state: WalkState) -> None:
        collect_node(module_decl("fs", function_decl("readFile")), root, state)

        module = root.children["fs"]
        assert isinstance(module, ModuleNode)
        assert list(module.children) == ["readFile"]

    def test_anonymous_class_keyed_by_sentinel(self, root: ModuleNode, state: WalkState) -> None:
        collect_node(node("ClassDeclaration", members=[]), root, state)

        assert list(root.children) == ["INVALID NAME REF"]
        assert root.children["INVALID NAME REF"].name == "default"

    def test_namespace_updates_scope(self, root: ModuleNode, state: WalkState) -> None:
        scope = collect_node(namespace_decl("NS"), root, state)

        assert scope.current == "NS"

    def test_module_without_body(self, root: ModuleNode, state: WalkState) -> None:
        raw = node("ModuleDeclaration", name=ident("Empty"))
        raw["flags"] = int(NodeFlags.NAMESPACE)

        collect_node(raw, root, state)

        assert root.children["namespaceEmpty"].children == {}


class TestSkippedKinds:
    @pytest.mark.parametrize(
        "raw",
        [
            import_equals("legacy"),
            enum_decl("Color"),
            node("ExpressionStatement"),
            node("SomethingElse", name=ident("x")),
            {"kind": 12345},
            {},
            None,
            "not a node",
            42,
        ],
    )
    def test_no_child_and_scope_unchanged(
        self, raw: Any, root: ModuleNode, state: WalkState
    ) -> None:
        scope = NamespaceScope(current="Outer")

        result = collect_node(raw, root, state, scope)

        assert root.children == {}
        assert result is scope

    def test_unsupported_declaration_logged(self, root: ModuleNode, state: WalkState) -> None:
        with capture_logs() as logs:
            collect_node(enum_decl("Color"), root, state)

        assert [entry["event"] for entry in logs] == ["unsupported_declaration"]
        assert logs[0]["declaration"] == "enum"


class TestMalformedInput:
    """Malformed nodes never raise."""

    @pytest.mark.parametrize(
        "raw",
        [
            node("FunctionDeclaration"),
            node("FunctionDeclaration", name="not-a-node"),
            node("VariableStatement", declarationList=None),
            node("VariableStatement", declarationList=node("X", declarations="oops")),
            node("ExportAssignment", expression=[1, 2]),
            node("ImportDeclaration", importClause=5),
            node("ClassDeclaration", members=None),
            node("ModuleDeclaration", body="nope"),
        ],
    )
    def test_collect_does_not_raise(self, raw: Any, root: ModuleNode, state: WalkState) -> None:
        collect_node(raw, root, state)

        assert len(root.children) <= 1

    def test_collected_declaration_logged(self, root: ModuleNode, state: WalkState) -> None:
        with capture_logs() as logs:
            collect_node(function_decl("foo"), root, state)

        assert logs == [
            {
                "event": "declaration_collected",
                "log_level": "debug",
                "declaration": "function",
                "name": "foo",
                "context": "root",
            }
        ]


def test_numeric_kinds_with_table(root: ModuleNode) -> None:
    table = KindTable({263: "FunctionDeclaration", 80: "Identifier"})
    state = WalkState(factory=NodeFactory(table), kinds=table)

    collect_node({"kind": 263, "name": {"kind": 80, "escapedText": "f"}}, root, state)

    assert root.children["f"].to_dict()["declaration"] == "FunctionDeclaration"
