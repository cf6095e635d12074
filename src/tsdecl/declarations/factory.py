"""Constructors for declaration tree nodes.

Factory methods only read the raw node they are given; they never fail on
well-formed input and fall back to empty details on malformed input.
"""

from __future__ import annotations

from typing import Any

from tsdecl.declarations.models import (
    ExportNode,
    ImportNode,
    ModuleNode,
    NamespaceNode,
    PropertyNode,
    VariableNode,
)
from tsdecl.declarations.printer import print_type
from tsdecl.syntax.kinds import DEFAULT_KIND_TABLE, DeclarationFlags, KindTable, SyntaxKind
from tsdecl.syntax.nodes import (
    get_field,
    get_members_from_node,
    get_node,
    get_nodes,
    is_node,
    is_sequence,
    node_flags,
    node_text,
)
from tsdecl.syntax.normalize import strip_details_from_tree

# Name given to declarations such as `export default class {}`
ANONYMOUS_NAME = "default"


class NodeFactory:
    """Builds output nodes from raw AST nodes."""

    def __init__(self, kinds: KindTable | None = None) -> None:
        self.kinds = kinds or DEFAULT_KIND_TABLE

    @classmethod
    def create(cls, kinds: KindTable | None = None) -> NodeFactory:
        return cls(kinds)

    def create_namespace_node(self, name: str) -> NamespaceNode:
        return NamespaceNode(name=name)

    def create_module_node(self, name: str) -> ModuleNode:
        return ModuleNode(name=name)

    def create_property_node(self, node: Any, name: str | None = None) -> PropertyNode:
        if name is None:
            name = node_text(get_node(node, "name")) or ANONYMOUS_NAME
        return PropertyNode(
            name=name,
            declaration=self.kinds.kind_of(node).value,
            members=self._member_names(node),
            exported=self._is_exported(node),
        )

    def create_variable_node(self, node: Any) -> VariableNode:
        declaration_list = get_node(node, "declarationList")
        declarators = [
            self._print(get_field(d, "name")) for d in get_nodes(declaration_list, "declarations")
        ]
        return VariableNode(
            name=" ".join(declarators),
            keyword=_declaration_keyword(node_flags(declaration_list)),
            declarators=declarators,
            exported=self._is_exported(node),
        )

    def create_export_node(self, node: Any) -> ExportNode:
        expression = self._print(get_node(node, "expression"))
        return ExportNode(
            name=expression or ANONYMOUS_NAME,
            expression=expression,
            export_equals=get_field(node, "isExportEquals") is True,
        )

    def create_import_node(self, node: Any) -> ImportNode:
        module = node_text(get_node(node, "moduleSpecifier"))
        return ImportNode(
            name=module or "",
            module=module,
            bindings=self._import_bindings(get_node(node, "importClause")),
        )

    def _print(self, node: Any) -> str:
        if not is_node(node):
            return ""
        return print_type(strip_details_from_tree(node, self.kinds))

    def _is_exported(self, node: Any) -> bool:
        return any(
            self.kinds.kind_of(modifier) is SyntaxKind.EXPORT_KEYWORD
            for modifier in get_nodes(node, "modifiers")
        )

    def _member_names(self, node: Any) -> list[str]:
        members = get_members_from_node(node)
        if not is_sequence(members):
            return []
        names: list[str] = []
        for member in members:
            if self.kinds.kind_of(member) is SyntaxKind.CONSTRUCTOR:
                names.append("constructor")
                continue
            text = node_text(get_node(member, "name"))
            if text is not None:
                names.append(text)
        return names

    def _import_bindings(self, clause: Any) -> list[str]:
        if clause is None:
            return []
        bindings: list[str] = []
        default = node_text(get_node(clause, "name"))
        if default is not None:
            bindings.append(default)

        named = get_node(clause, "namedBindings")
        if self.kinds.kind_of(named) is SyntaxKind.NAMESPACE_IMPORT:
            alias = node_text(get_node(named, "name"))
            if alias is not None:
                bindings.append(f"* as {alias}")
        for spec in get_nodes(named, "elements"):
            local = node_text(get_node(spec, "name"))
            imported = node_text(get_node(spec, "propertyName"))
            if local is None:
                continue
            bindings.append(f"{imported} as {local}" if imported else local)
        return bindings


def _declaration_keyword(flags: int) -> str:
    if flags & DeclarationFlags.CONST:
        return "const"
    if flags & DeclarationFlags.LET:
        return "let"
    return "var"
