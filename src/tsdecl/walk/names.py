"""Display-name resolution for raw declaration nodes.

Names are derived from whichever field the node's shape provides, tried in
a fixed priority order. Resolution never raises: a node that matches no
rule resolves to an explicit "unresolved" result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tsdecl.declarations.printer import print_type
from tsdecl.syntax.kinds import KindTable
from tsdecl.syntax.nodes import get_node, get_nodes, node_text
from tsdecl.syntax.normalize import strip_details_from_tree

SENTINEL_NAME = "INVALID NAME REF"


@dataclass(frozen=True, slots=True)
class ResolvedName:
    """Outcome of name resolution.

    ``source`` names the field the text came from (``name``, ``type``,
    ``moduleSpecifier``, ``expression`` or ``declarationList``).
    """

    text: str | None
    source: str | None = None

    @property
    def resolved(self) -> bool:
        return self.text is not None

    def __str__(self) -> str:
        return self.text if self.text is not None else SENTINEL_NAME


UNRESOLVED = ResolvedName(text=None)


def resolve_name(node: Any, kinds: KindTable | None = None) -> ResolvedName:
    """Resolve a display name; the first matching rule wins."""
    text = node_text(get_node(node, "name"))
    if text is not None:
        return ResolvedName(text, "name")

    text = node_text(get_node(get_node(node, "type"), "typeName"))
    if text is not None:
        return ResolvedName(text, "type")

    text = node_text(get_node(node, "moduleSpecifier"))
    if text is not None:
        return ResolvedName(text, "moduleSpecifier")

    expression = get_node(node, "expression")
    if expression is not None:
        text = print_type(strip_details_from_tree(expression, kinds))
        if text:
            return ResolvedName(text, "expression")

    declarations = get_nodes(get_node(node, "declarationList"), "declarations")
    if declarations:
        text = " ".join(print_type(strip_details_from_tree(d, kinds)) for d in declarations)
        if text.strip():
            return ResolvedName(text, "declarationList")

    return UNRESOLVED


def parse_name_from_node(node: Any, kinds: KindTable | None = None) -> str:
    """Display name as text, with ``SENTINEL_NAME`` for unresolvable nodes."""
    return str(resolve_name(node, kinds))
