"""Declaration collection: name resolution, namespace scope, and the tree walk."""

from tsdecl.walk.collector import (
    DeclarationKind,
    WalkState,
    classify,
    collect_node,
    traverse_node,
)
from tsdecl.walk.names import SENTINEL_NAME, ResolvedName, parse_name_from_node, resolve_name
from tsdecl.walk.namespace import NamespaceScope
from tsdecl.walk.walker import (
    ROOT_NAME,
    WalkResult,
    get_members_from_node,
    recursive_walk_tree,
    walk_tree,
)

__all__ = [
    "DeclarationKind",
    "WalkState",
    "classify",
    "collect_node",
    "SENTINEL_NAME",
    "ResolvedName",
    "parse_name_from_node",
    "resolve_name",
    "NamespaceScope",
    "ROOT_NAME",
    "WalkResult",
    "get_members_from_node",
    "recursive_walk_tree",
    "traverse_node",
    "walk_tree",
]
