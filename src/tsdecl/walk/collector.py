"""Per-statement declaration collection.

``traverse_node`` feeds a node's statements through ``collect_node`` in
order. Each statement-level raw node is classified into a
``DeclarationKind`` and contributes at most one child to the enclosing
context. Module and namespace declarations additionally walk their body
into the new child.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from tsdecl.declarations.factory import NodeFactory
from tsdecl.declarations.models import ContextNode
from tsdecl.syntax.kinds import DEFAULT_KIND_TABLE, KindTable, NodeFlags, SyntaxKind
from tsdecl.syntax.nodes import get_field, get_node, is_sequence, node_flags
from tsdecl.walk.names import parse_name_from_node
from tsdecl.walk.namespace import NamespaceScope

logger = structlog.get_logger()

DEFAULT_MAX_DEPTH = 200


class DeclarationKind(Enum):
    NAMESPACE = "namespace"
    MODULE = "module"
    FUNCTION = "function"
    INTERFACE = "interface"
    TYPE_ALIAS = "type_alias"
    CLASS = "class"
    VARIABLE = "variable"
    EXPORT_ASSIGNMENT = "export_assignment"
    IMPORT = "import"
    IMPORT_EQUALS = "import_equals"
    ENUM = "enum"
    OTHER = "other"


_KIND_MAP: dict[SyntaxKind, DeclarationKind] = {
    SyntaxKind.FUNCTION_DECLARATION: DeclarationKind.FUNCTION,
    SyntaxKind.INTERFACE_DECLARATION: DeclarationKind.INTERFACE,
    SyntaxKind.TYPE_ALIAS_DECLARATION: DeclarationKind.TYPE_ALIAS,
    SyntaxKind.CLASS_DECLARATION: DeclarationKind.CLASS,
    SyntaxKind.VARIABLE_STATEMENT: DeclarationKind.VARIABLE,
    SyntaxKind.EXPORT_ASSIGNMENT: DeclarationKind.EXPORT_ASSIGNMENT,
    SyntaxKind.IMPORT_DECLARATION: DeclarationKind.IMPORT,
    SyntaxKind.IMPORT_EQUALS_DECLARATION: DeclarationKind.IMPORT_EQUALS,
    SyntaxKind.ENUM_DECLARATION: DeclarationKind.ENUM,
}

# Named and keyed by the resolver, built with create_property_node(node, name)
_NAMED_PROPERTY_KINDS = frozenset(
    {DeclarationKind.FUNCTION, DeclarationKind.INTERFACE, DeclarationKind.TYPE_ALIAS}
)

_UNSUPPORTED_KINDS = frozenset({DeclarationKind.IMPORT_EQUALS, DeclarationKind.ENUM})


@dataclass
class WalkState:
    """Collaborators shared by every step of one walk."""

    factory: NodeFactory = field(default_factory=NodeFactory)
    kinds: KindTable = DEFAULT_KIND_TABLE
    namespace_flags: frozenset[int] = frozenset(int(flag) for flag in NodeFlags)
    max_depth: int = DEFAULT_MAX_DEPTH


def classify(node: Any, state: WalkState) -> DeclarationKind:
    kind = state.kinds.kind_of(node)
    if kind is SyntaxKind.MODULE_DECLARATION:
        if node_flags(node) in state.namespace_flags:
            return DeclarationKind.NAMESPACE
        return DeclarationKind.MODULE
    return _KIND_MAP.get(kind, DeclarationKind.OTHER)


def traverse_node(
    node: Any,
    context: ContextNode,
    state: WalkState,
    scope: NamespaceScope | None = None,
    depth: int = 0,
) -> NamespaceScope:
    """Collect ``node``'s statements, or ``node`` itself, into ``context``.

    Statements are collected in order, so children keep source order. The
    namespace scope is handed from each statement to the next.
    """
    scope = scope if scope is not None else NamespaceScope()
    statements = get_field(node, "statements")
    if statements is None:
        return collect_node(node, context, state, scope, depth)
    if not is_sequence(statements):
        return scope
    for statement in statements:
        scope = collect_node(statement, context, state, scope, depth)
    return scope


def collect_node(
    node: Any,
    context: ContextNode,
    state: WalkState,
    scope: NamespaceScope | None = None,
    depth: int = 0,
) -> NamespaceScope:
    """Add the declaration for ``node`` (if any) to ``context``.

    Returns the namespace scope the walk continues with.
    """
    scope = scope if scope is not None else NamespaceScope()
    decl = classify(node, state)
    if decl is DeclarationKind.OTHER:
        return scope
    if decl in _UNSUPPORTED_KINDS:
        logger.debug("unsupported_declaration", declaration=decl.value)
        return scope

    factory = state.factory
    name = parse_name_from_node(node, state.kinds)

    if decl is DeclarationKind.NAMESPACE:
        namespace = factory.create_namespace_node(name)
        context.add_child("namespace" + name, namespace)
        inner = scope.enter(name)
        after_body = _walk_body(node, namespace, state, inner, depth)
        scope = inner.leave(after_body)
    elif decl is DeclarationKind.MODULE:
        module = factory.create_module_node(name)
        context.add_child(name, module)
        scope = _walk_body(node, module, state, scope, depth)
    elif decl in _NAMED_PROPERTY_KINDS:
        context.add_child(name, factory.create_property_node(node, name))
    elif decl is DeclarationKind.CLASS:
        context.add_child(name, factory.create_property_node(node))
    elif decl is DeclarationKind.VARIABLE:
        context.add_child(name, factory.create_variable_node(node))
    elif decl is DeclarationKind.EXPORT_ASSIGNMENT:
        context.add_child(name, factory.create_export_node(node))
    elif decl is DeclarationKind.IMPORT:
        context.add_child(name, factory.create_import_node(node))

    logger.debug("declaration_collected", declaration=decl.value, name=name, context=context.name)
    return scope


def _walk_body(
    node: Any,
    context: ContextNode,
    state: WalkState,
    scope: NamespaceScope,
    depth: int,
) -> NamespaceScope:
    body = get_node(node, "body")
    if body is None:
        return scope
    if depth + 1 > state.max_depth:
        logger.warning("walk_depth_exceeded", context=context.name, max_depth=state.max_depth)
        return scope
    return traverse_node(body, context, state, scope, depth + 1)
