"""Debug normalization of raw AST subtrees.

Produces a plain, parser-independent copy of a subtree that is safe to
print or serialize: positional fields, flags, and the ``parent``
back-reference are dropped, and numeric kinds become their names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from tsdecl.syntax.kinds import DEFAULT_KIND_TABLE, KindTable
from tsdecl.syntax.nodes import NOISE_FIELDS, is_node, is_sequence

NormalizedValue = Union[str, int, float, bool, None, list["NormalizedValue"], "NormalizedNode"]
NormalizedNode = dict[str, NormalizedValue]

# (raw container, copy being filled)
_Pending = list[tuple[Any, Any]]


def strip_details_from_tree(
    root: Mapping[str, Any], kinds: KindTable | None = None
) -> NormalizedNode:
    """Return a deep copy of ``root`` without noise fields and with named kinds.

    Noise fields are filtered out before descending, so the ``parent``
    back-reference is never followed. Kinds that are already names are
    left unchanged, which makes the pass idempotent.

    The copy is built with an explicit work stack, so arbitrarily deep
    expressions (long ``a + b + ...`` chains) do not hit the recursion limit.
    """
    kinds = kinds or DEFAULT_KIND_TABLE
    clone: NormalizedNode = {}
    pending: _Pending = [(root, clone)]
    while pending:
        source, target = pending.pop()
        if isinstance(target, dict):
            for key, value in source.items():
                if key in NOISE_FIELDS:
                    continue
                target[key] = _empty_copy(value, pending)
            # Naming looks only at the kind value, which is already in place
            if "kind" in target:
                target["kind"] = kinds.get_node_name(target)
        else:
            target.extend(_empty_copy(item, pending) for item in source)
    return clone


def _empty_copy(value: Any, pending: _Pending) -> NormalizedValue:
    """Scalars are returned as-is; containers get an empty copy queued for filling."""
    if is_node(value):
        node: NormalizedNode = {}
        pending.append((value, node))
        return node
    if is_sequence(value):
        items: list[NormalizedValue] = []
        pending.append((value, items))
        return items
    return value
