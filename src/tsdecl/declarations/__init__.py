"""Declaration tree nodes, their factory, and the type printer."""

from tsdecl.declarations.factory import NodeFactory
from tsdecl.declarations.models import (
    ContextNode,
    DeclarationNode,
    ExportNode,
    ImportNode,
    ModuleNode,
    NamespaceNode,
    PropertyNode,
    VariableNode,
)
from tsdecl.declarations.printer import print_type

__all__ = [
    "NodeFactory",
    "ContextNode",
    "DeclarationNode",
    "ExportNode",
    "ImportNode",
    "ModuleNode",
    "NamespaceNode",
    "PropertyNode",
    "VariableNode",
    "print_type",
]
