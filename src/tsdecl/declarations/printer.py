"""Render normalized type and expression nodes back to TypeScript-like text.

Only a descriptive rendering is needed, so unknown shapes fall back to
their ``text`` and then to their kind name rather than failing. Nesting
beyond ``MAX_PRINT_DEPTH`` is elided as ``...``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextvars import ContextVar
from typing import Any

from tsdecl.syntax.kinds import SyntaxKind
from tsdecl.syntax.nodes import get_field, get_node, get_nodes, node_text

_KEYWORD_TEXT: dict[str, str] = {
    SyntaxKind.ANY_KEYWORD.value: "any",
    SyntaxKind.UNKNOWN_KEYWORD.value: "unknown",
    SyntaxKind.NUMBER_KEYWORD.value: "number",
    SyntaxKind.BIGINT_KEYWORD.value: "bigint",
    SyntaxKind.BOOLEAN_KEYWORD.value: "boolean",
    SyntaxKind.STRING_KEYWORD.value: "string",
    SyntaxKind.SYMBOL_KEYWORD.value: "symbol",
    SyntaxKind.OBJECT_KEYWORD.value: "object",
    SyntaxKind.VOID_KEYWORD.value: "void",
    SyntaxKind.UNDEFINED_KEYWORD.value: "undefined",
    SyntaxKind.NEVER_KEYWORD.value: "never",
    SyntaxKind.TRUE_KEYWORD.value: "true",
    SyntaxKind.FALSE_KEYWORD.value: "false",
    SyntaxKind.NULL_KEYWORD.value: "null",
    SyntaxKind.THIS_KEYWORD.value: "this",
}

# Each level costs a few interpreter frames, so this stays well inside the
# default recursion limit
MAX_PRINT_DEPTH = 100
ELIDED = "..."

_print_depth: ContextVar[int] = ContextVar("print_depth", default=0)


def print_type(node: Any) -> str:
    """Render a normalized node. Scalars render as themselves."""
    if not isinstance(node, Mapping):
        return "" if node is None else str(node)

    depth = _print_depth.get()
    if depth >= MAX_PRINT_DEPTH:
        return ELIDED
    token = _print_depth.set(depth + 1)
    try:
        return _render(node)
    finally:
        _print_depth.reset(token)


def _render(node: Mapping[str, Any]) -> str:
    kind = node.get("kind")
    kind_name = kind if isinstance(kind, str) else ""
    if kind_name in _KEYWORD_TEXT:
        return _KEYWORD_TEXT[kind_name]

    printer = _PRINTERS.get(kind_name)
    if printer is not None:
        return printer(node)

    text = node_text(node)
    if text is not None:
        return text
    return str(kind) if kind is not None else ""


def _join(nodes: list[Mapping[str, Any]], sep: str = ", ") -> str:
    return sep.join(print_type(n) for n in nodes)


def _type_arguments(node: Mapping[str, Any]) -> str:
    args = get_nodes(node, "typeArguments")
    return f"<{_join(args)}>" if args else ""


def _annotated(node: Mapping[str, Any]) -> str:
    text = print_type(get_field(node, "name"))
    if get_field(node, "questionToken"):
        text += "?"
    type_node = get_node(node, "type")
    if type_node is not None:
        text += f": {print_type(type_node)}"
    return text


def _print_qualified_name(node: Mapping[str, Any]) -> str:
    return f"{print_type(get_field(node, 'left'))}.{print_type(get_field(node, 'right'))}"


def _print_property_access(node: Mapping[str, Any]) -> str:
    return f"{print_type(get_field(node, 'expression'))}.{print_type(get_field(node, 'name'))}"


def _print_call(node: Mapping[str, Any]) -> str:
    callee = print_type(get_field(node, "expression"))
    return f"{callee}{_type_arguments(node)}({_join(get_nodes(node, 'arguments'))})"


def _print_new(node: Mapping[str, Any]) -> str:
    return f"new {_print_call(node)}"


def _print_string_literal(node: Mapping[str, Any]) -> str:
    text = get_field(node, "text")
    return f'"{text}"' if isinstance(text, str) else '""'


def _print_type_reference(node: Mapping[str, Any]) -> str:
    return f"{print_type(get_field(node, 'typeName'))}{_type_arguments(node)}"


def _print_array_type(node: Mapping[str, Any]) -> str:
    element = get_node(node, "elementType")
    text = print_type(element)
    if get_field(element, "kind") in (SyntaxKind.UNION_TYPE.value, SyntaxKind.FUNCTION_TYPE.value):
        text = f"({text})"
    return f"{text}[]"


def _print_tuple(node: Mapping[str, Any]) -> str:
    return f"[{_join(get_nodes(node, 'elements'))}]"


def _print_union(node: Mapping[str, Any]) -> str:
    return _join(get_nodes(node, "types"), " | ")


def _print_intersection(node: Mapping[str, Any]) -> str:
    return _join(get_nodes(node, "types"), " & ")


def _print_literal_type(node: Mapping[str, Any]) -> str:
    return print_type(get_field(node, "literal"))


def _print_parenthesized(node: Mapping[str, Any]) -> str:
    inner = get_field(node, "type") or get_field(node, "expression")
    return f"({print_type(inner)})"


def _print_type_literal(node: Mapping[str, Any]) -> str:
    members = get_nodes(node, "members")
    if not members:
        return "{}"
    return "{ " + "; ".join(print_type(m) for m in members) + " }"


def _print_signature(node: Mapping[str, Any]) -> str:
    params = _join(get_nodes(node, "parameters"))
    text = f"{print_type(get_field(node, 'name'))}({params})"
    type_node = get_node(node, "type")
    if type_node is not None:
        text += f": {print_type(type_node)}"
    return text


def _print_function_type(node: Mapping[str, Any]) -> str:
    params = _join(get_nodes(node, "parameters"))
    return f"({params}) => {print_type(get_field(node, 'type'))}"


def _print_arrow_function(node: Mapping[str, Any]) -> str:
    params = _join(get_nodes(node, "parameters"))
    return f"({params}) => {{...}}"


def _print_object_literal(node: Mapping[str, Any]) -> str:
    return "{...}" if get_nodes(node, "properties") else "{}"


def _print_array_literal(node: Mapping[str, Any]) -> str:
    return f"[{_join(get_nodes(node, 'elements'))}]"


_PRINTERS: dict[str, Callable[[Mapping[str, Any]], str]] = {
    SyntaxKind.QUALIFIED_NAME.value: _print_qualified_name,
    SyntaxKind.PROPERTY_ACCESS_EXPRESSION.value: _print_property_access,
    SyntaxKind.CALL_EXPRESSION.value: _print_call,
    SyntaxKind.NEW_EXPRESSION.value: _print_new,
    SyntaxKind.STRING_LITERAL.value: _print_string_literal,
    SyntaxKind.TYPE_REFERENCE.value: _print_type_reference,
    SyntaxKind.ARRAY_TYPE.value: _print_array_type,
    SyntaxKind.TUPLE_TYPE.value: _print_tuple,
    SyntaxKind.UNION_TYPE.value: _print_union,
    SyntaxKind.INTERSECTION_TYPE.value: _print_intersection,
    SyntaxKind.LITERAL_TYPE.value: _print_literal_type,
    SyntaxKind.PARENTHESIZED_TYPE.value: _print_parenthesized,
    SyntaxKind.PARENTHESIZED_EXPRESSION.value: _print_parenthesized,
    SyntaxKind.TYPE_LITERAL.value: _print_type_literal,
    SyntaxKind.FUNCTION_TYPE.value: _print_function_type,
    SyntaxKind.ARROW_FUNCTION.value: _print_arrow_function,
    SyntaxKind.OBJECT_LITERAL_EXPRESSION.value: _print_object_literal,
    SyntaxKind.ARRAY_LITERAL_EXPRESSION.value: _print_array_literal,
    SyntaxKind.VARIABLE_DECLARATION.value: _annotated,
    SyntaxKind.PARAMETER.value: _annotated,
    SyntaxKind.PROPERTY_SIGNATURE.value: _annotated,
    SyntaxKind.METHOD_SIGNATURE.value: _print_signature,
}
