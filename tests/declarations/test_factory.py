"""Tests for NodeFactory."""

from __future__ import annotations

from builders import (
    class_decl,
    export_assignment,
    function_decl,
    ident,
    import_decl,
    interface_decl,
    node,
    string_literal,
    variable_statement,
)

from tsdecl.declarations.factory import ANONYMOUS_NAME, NodeFactory
from tsdecl.declarations.models import (
    ExportNode,
    ImportNode,
    ModuleNode,
    NamespaceNode,
    PropertyNode,
    VariableNode,
)
from tsdecl.syntax.kinds import DeclarationFlags, KindTable


class TestContextNodes:
    def test_module_node(self) -> None:
        module = NodeFactory().create_module_node("root")

        assert isinstance(module, ModuleNode)
        assert module.name == "root"
        assert module.children == {}

    def test_namespace_node(self) -> None:
        namespace = NodeFactory.create().create_namespace_node("NS")

        assert isinstance(namespace, NamespaceNode)
        assert namespace.name == "NS"


class TestPropertyNodes:
    def test_explicit_name(self) -> None:
        prop = NodeFactory().create_property_node(function_decl("foo"), "foo")

        assert isinstance(prop, PropertyNode)
        assert prop.name == "foo"
        assert prop.declaration == "FunctionDeclaration"
        assert prop.members == []
        assert prop.exported is False

    def test_class_name_derived_from_node(self) -> None:
        prop = NodeFactory().create_property_node(class_decl("Shape", "area", "draw"))

        assert prop.name == "Shape"
        assert prop.declaration == "ClassDeclaration"
        assert prop.members == ["area", "draw"]

    def test_anonymous_class(self) -> None:
        anonymous = node("ClassDeclaration", members=[])

        prop = NodeFactory().create_property_node(anonymous)

        assert prop.name == ANONYMOUS_NAME

    def test_constructor_member(self) -> None:
        decl = class_decl("Circle")
        decl["members"].append(node("Constructor", parameters=[]))

        prop = NodeFactory().create_property_node(decl)

        assert prop.members == ["constructor"]

    def test_interface_members(self) -> None:
        prop = NodeFactory().create_property_node(interface_decl("Point", "x", "y"), "Point")

        assert prop.members == ["x", "y"]

    def test_exported_modifier(self) -> None:
        decl = function_decl("foo", modifiers=[node("ExportKeyword")])

        prop = NodeFactory().create_property_node(decl, "foo")

        assert prop.exported is True

    def test_numeric_kinds(self) -> None:
        table = KindTable({263: "FunctionDeclaration", 95: "ExportKeyword"})
        decl = {"kind": 263, "name": {"kind": 80, "text": "f"}, "modifiers": [{"kind": 95}]}

        prop = NodeFactory(table).create_property_node(decl, "f")

        assert prop.declaration == "FunctionDeclaration"
        assert prop.exported is True

    def test_malformed_members_ignored(self) -> None:
        decl = node("ClassDeclaration", name=ident("C"), members="nope")

        prop = NodeFactory().create_property_node(decl)

        assert prop.members == []


class TestVariableNodes:
    def test_var_declarators(self) -> None:
        var = NodeFactory().create_variable_node(variable_statement("x", "y"))

        assert isinstance(var, VariableNode)
        assert var.name == "x y"
        assert var.declarators == ["x", "y"]
        assert var.keyword == "var"

    def test_const_and_let(self) -> None:
        factory = NodeFactory()

        const = factory.create_variable_node(
            variable_statement("a", decl_flags=DeclarationFlags.CONST)
        )
        let = factory.create_variable_node(variable_statement("b", decl_flags=DeclarationFlags.LET))

        assert const.keyword == "const"
        assert let.keyword == "let"

    def test_missing_declaration_list(self) -> None:
        var = NodeFactory().create_variable_node(node("VariableStatement"))

        assert var.name == ""
        assert var.declarators == []


class TestExportNodes:
    def test_export_default_identifier(self) -> None:
        export = NodeFactory().create_export_node(export_assignment(ident("bar")))

        assert isinstance(export, ExportNode)
        assert export.name == "bar"
        assert export.expression == "bar"
        assert export.export_equals is False

    def test_export_equals(self) -> None:
        export = NodeFactory().create_export_node(export_assignment(ident("lib"), equals=True))

        assert export.export_equals is True

    def test_missing_expression(self) -> None:
        export = NodeFactory().create_export_node(node("ExportAssignment"))

        assert export.name == ANONYMOUS_NAME
        assert export.expression == ""


class TestImportNodes:
    def test_default_and_named(self) -> None:
        imp = NodeFactory().create_import_node(import_decl("fs", "fs", "readFile"))

        assert isinstance(imp, ImportNode)
        assert imp.name == "fs"
        assert imp.module == "fs"
        assert imp.bindings == ["fs", "readFile"]

    def test_namespace_import(self) -> None:
        clause = node("ImportClause", namedBindings=node("NamespaceImport", name=ident("path")))
        decl = node(
            "ImportDeclaration", importClause=clause, moduleSpecifier=string_literal("path")
        )

        imp = NodeFactory().create_import_node(decl)

        assert imp.bindings == ["* as path"]

    def test_renamed_specifier(self) -> None:
        spec = node("ImportSpecifier", name=ident("local"), propertyName=ident("orig"))
        clause = node("ImportClause", namedBindings=node("NamedImports", elements=[spec]))
        decl = node("ImportDeclaration", importClause=clause, moduleSpecifier=string_literal("m"))

        imp = NodeFactory().create_import_node(decl)

        assert imp.bindings == ["orig as local"]

    def test_side_effect_import(self) -> None:
        decl = node("ImportDeclaration", moduleSpecifier=string_literal("./polyfill"))

        imp = NodeFactory().create_import_node(decl)

        assert imp.module == "./polyfill"
        assert imp.bindings == []
