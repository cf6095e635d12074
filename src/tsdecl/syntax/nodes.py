"""Guarded accessors over raw AST mappings.

Raw nodes come from outside and may be missing any field, so every read
goes through these helpers instead of indexing directly.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

RawNode = Mapping[str, Any]

# Positional and back-reference fields that never carry declaration content
NOISE_FIELDS = frozenset({"pos", "end", "parent", "flags"})


def is_node(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def get_field(node: Any, key: str) -> Any:
    """Return ``node[key]`` or None when node is not a mapping or lacks the key."""
    if not isinstance(node, Mapping):
        return None
    return node.get(key)


def get_node(node: Any, key: str) -> RawNode | None:
    value = get_field(node, key)
    return value if isinstance(value, Mapping) else None


def get_nodes(node: Any, key: str) -> list[RawNode]:
    """Mapping elements of a list field; anything else yields an empty list."""
    value = get_field(node, key)
    if not is_sequence(value):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def node_text(node: Any) -> str | None:
    """Identifier/literal text, or None when absent or empty.

    Live compiler nodes expose ``text``; JSON dumps of identifiers only
    carry ``escapedText``.
    """
    for key in ("text", "escapedText"):
        value = get_field(node, key)
        if isinstance(value, str) and value:
            return value
    return None


def node_flags(node: Any) -> int:
    flags = get_field(node, "flags")
    if isinstance(flags, int) and not isinstance(flags, bool):
        return flags
    return 0


def get_members_from_node(node: Any) -> Any:
    """Return the node's ``members`` collection, or None when it has none."""
    return get_field(node, "members")
