"""Raw AST vocabulary: kind names, flags, guarded field access, debug normalization."""

from tsdecl.syntax.kinds import (
    DEFAULT_KIND_TABLE,
    DeclarationFlags,
    KindTable,
    NodeFlags,
    SyntaxKind,
)
from tsdecl.syntax.nodes import (
    NOISE_FIELDS,
    RawNode,
    get_field,
    get_members_from_node,
    get_node,
    get_nodes,
    is_node,
    is_sequence,
    node_flags,
    node_text,
)
from tsdecl.syntax.normalize import NormalizedNode, strip_details_from_tree

__all__ = [
    "DEFAULT_KIND_TABLE",
    "DeclarationFlags",
    "KindTable",
    "NodeFlags",
    "SyntaxKind",
    "NOISE_FIELDS",
    "RawNode",
    "get_field",
    "get_members_from_node",
    "get_node",
    "get_nodes",
    "is_node",
    "is_sequence",
    "node_flags",
    "node_text",
    "NormalizedNode",
    "strip_details_from_tree",
]
