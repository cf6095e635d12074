"""Recursive walk from a raw AST root to a declaration tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from tsdecl.core.logging import walk_scope
from tsdecl.declarations.factory import NodeFactory
from tsdecl.declarations.models import ModuleNode
from tsdecl.syntax.kinds import KindTable
from tsdecl.syntax.nodes import get_members_from_node
from tsdecl.walk.collector import WalkState, traverse_node
from tsdecl.walk.namespace import NamespaceMode, NamespaceScope

if TYPE_CHECKING:
    from tsdecl.config.models import WalkConfig

logger = structlog.get_logger()

ROOT_NAME = "root"

__all__ = [
    "ROOT_NAME",
    "WalkResult",
    "get_members_from_node",
    "recursive_walk_tree",
    "traverse_node",
    "walk_tree",
]


@dataclass(frozen=True, slots=True)
class WalkResult:
    root: ModuleNode
    namespace: NamespaceScope


def walk_tree(
    ast: Any,
    *,
    kinds: KindTable | None = None,
    config: WalkConfig | None = None,
    namespace_mode: NamespaceMode | None = None,
) -> WalkResult:
    """Walk ``ast`` into a fresh root module.

    Every call builds its own factory, root and namespace scope, so walks
    of independent roots do not interact.
    """
    factory = NodeFactory.create(kinds)
    state = WalkState(factory=factory, kinds=factory.kinds)
    mode: NamespaceMode = "flat"
    if config is not None:
        state.namespace_flags = frozenset(config.namespace_flags)
        state.max_depth = config.max_depth
        mode = config.namespace_mode
    if namespace_mode is not None:
        mode = namespace_mode

    root = factory.create_module_node(ROOT_NAME)
    with walk_scope():
        logger.info("walk_started", namespace_mode=mode, max_depth=state.max_depth)
        scope = traverse_node(ast, root, state, NamespaceScope(mode=mode))
        logger.info("walk_finished", declarations=len(root.children), namespace=scope.current)
    return WalkResult(root=root, namespace=scope)


def recursive_walk_tree(ast: Any, kinds: KindTable | None = None) -> ModuleNode:
    """Walk ``ast`` and return the root of the declaration tree."""
    return walk_tree(ast, kinds=kinds).root

