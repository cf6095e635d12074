"""Tree-sitter front end for TypeScript sources.

Parses ``.ts``/``.tsx`` source with tree-sitter and converts the concrete
syntax tree into raw AST mappings shaped like the TypeScript compiler's:
symbolic ``kind`` names, compiler field names (``name``, ``statements``,
``declarationList``, ``moduleSpecifier``, ...), ``pos``/``end`` byte
offsets, ``flags`` and a ``parent`` back-reference.

Only the shapes the declaration walk and the printer look at are modelled
in detail. Every other syntax node becomes an ``Unknown`` node carrying its
source ``text``.
"""

from __future__ import annotations

import importlib
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import tree_sitter

from tsdecl.core.errors import SourceError
from tsdecl.syntax.kinds import DeclarationFlags, NodeFlags, SyntaxKind

logger = structlog.get_logger()

GRAMMAR_MODULE = "tree_sitter_typescript"

# extension -> grammar function in tree_sitter_typescript
LANGUAGE_FUNCS: dict[str, str] = {
    ".ts": "language_typescript",
    ".mts": "language_typescript",
    ".cts": "language_typescript",
    ".tsx": "language_tsx",
}

_KEYWORD_TYPES: dict[str, SyntaxKind] = {
    "any": SyntaxKind.ANY_KEYWORD,
    "unknown": SyntaxKind.UNKNOWN_KEYWORD,
    "number": SyntaxKind.NUMBER_KEYWORD,
    "bigint": SyntaxKind.BIGINT_KEYWORD,
    "boolean": SyntaxKind.BOOLEAN_KEYWORD,
    "string": SyntaxKind.STRING_KEYWORD,
    "symbol": SyntaxKind.SYMBOL_KEYWORD,
    "object": SyntaxKind.OBJECT_KEYWORD,
    "void": SyntaxKind.VOID_KEYWORD,
    "undefined": SyntaxKind.UNDEFINED_KEYWORD,
    "never": SyntaxKind.NEVER_KEYWORD,
}

_LITERAL_KEYWORDS: dict[str, SyntaxKind] = {
    "true": SyntaxKind.TRUE_KEYWORD,
    "false": SyntaxKind.FALSE_KEYWORD,
    "null": SyntaxKind.NULL_KEYWORD,
    "this": SyntaxKind.THIS_KEYWORD,
    "undefined": SyntaxKind.UNDEFINED_KEYWORD,
}

# Expression forms of `export default function () {}`, across grammar versions
_ANONYMOUS_FUNCTIONS = frozenset(
    {"function", "function_expression", "generator_function", "generator_function_expression"}
)

RawDict = dict[str, Any]


@dataclass
class ParseResult:
    """Result of parsing a source file."""

    ast: RawDict
    language: str
    error_count: int
    total_nodes: int


def _text(node: Any) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text


def _link_parents(root: RawDict) -> None:
    stack = [root]
    while stack:
        node = stack.pop()
        for key, value in list(node.items()):
            if key == "parent":
                continue
            children = value if isinstance(value, list) else [value]
            for child in children:
                if isinstance(child, dict):
                    child["parent"] = node
                    stack.append(child)


@dataclass
class TypeScriptParser:
    """
    Tree-sitter parser producing compiler-shaped raw ASTs.

    Usage::

        parser = TypeScriptParser()
        result = parser.parse(Path("src/index.ts"))
        root = recursive_walk_tree(result.ast)
    """

    _parser: Any = field(default=None, repr=False)
    _languages: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._parser = tree_sitter.Parser()
        self._languages = {}

    def _get_language(self, func_name: str) -> Any:
        if func_name in self._languages:
            return self._languages[func_name]
        try:
            mod = importlib.import_module(GRAMMAR_MODULE)
            lang = tree_sitter.Language(getattr(mod, func_name)())
        except (ImportError, AttributeError) as err:
            raise SourceError.grammar_missing(f"{GRAMMAR_MODULE}.{func_name}") from err
        self._languages[func_name] = lang
        return lang

    def parse(self, path: Path, content: bytes | None = None) -> ParseResult:
        """
        Parse a TypeScript file.

        Args:
            path: Path to file (used for grammar selection)
            content: File content as bytes. If None, reads from path.

        Returns:
            ParseResult holding the converted raw AST.
        """
        suffix = path.suffix.lower()
        func_name = LANGUAGE_FUNCS.get(suffix)
        if func_name is None:
            raise SourceError.unsupported(str(path), suffix)
        if content is None:
            if not path.exists():
                raise SourceError.not_found(str(path))
            content = path.read_bytes()

        self._parser.language = self._get_language(func_name)
        tree = self._parser.parse(content)

        error_count = 0
        total_nodes = 0

        # Long operator chains nest one level per term
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            total_nodes += 1
            if node.type == "ERROR" or node.is_missing:
                error_count += 1
            stack.extend(node.children)

        if error_count:
            logger.warning("parse_errors", path=str(path), error_count=error_count)

        ast = _Converter().source_file(tree.root_node, str(path))
        _link_parents(ast)
        return ParseResult(
            ast=ast,
            language="tsx" if suffix == ".tsx" else "typescript",
            error_count=error_count,
            total_nodes=total_nodes,
        )

    def parse_source(self, source: str, file_name: str = "input.ts") -> ParseResult:
        return self.parse(Path(file_name), source.encode("utf-8"))


class _Converter:
    """Converts tree-sitter nodes to raw AST mappings."""

    def __init__(self) -> None:
        self._statements: dict[str, Callable[[Any, list[RawDict]], RawDict | None]] = {
            "function_declaration": self._function,
            "generator_function_declaration": self._function,
            "function_signature": self._function,
            "class_declaration": self._class,
            "abstract_class_declaration": self._class,
            "interface_declaration": self._interface,
            "type_alias_declaration": self._type_alias,
            "enum_declaration": self._enum,
            "lexical_declaration": self._variable_statement,
            "variable_declaration": self._variable_statement,
            "import_statement": self._import,
            "import_alias": self._import_alias,
            "export_statement": self._export,
            "module": self._module,
            "internal_module": self._module,
            "ambient_declaration": self._ambient,
            "expression_statement": self._expression_statement,
        }

    def _make(self, kind: SyntaxKind, ts_node: Any, **fields: Any) -> RawDict:
        node: RawDict = {"kind": kind.value, "pos": ts_node.start_byte, "end": ts_node.end_byte}
        node.update({key: value for key, value in fields.items() if value is not None})
        return node

    def _unknown(self, ts_node: Any) -> RawDict:
        return self._make(SyntaxKind.UNKNOWN, ts_node, text=_text(ts_node), nodeType=ts_node.type)

    def _identifier(self, ts_node: Any) -> RawDict | None:
        if ts_node is None:
            return None
        if ts_node.type == "string":
            return self._make(SyntaxKind.STRING_LITERAL, ts_node, text=_unquote(_text(ts_node)))
        return self._make(SyntaxKind.IDENTIFIER, ts_node, text=_text(ts_node))

    def _modifiers(self, ts_node: Any, extra: list[RawDict]) -> list[RawDict] | None:
        modifiers = list(extra)
        if ts_node.type == "abstract_class_declaration":
            modifiers.append(self._make(SyntaxKind.ABSTRACT_KEYWORD, ts_node))
        return modifiers or None

    # Statements

    def source_file(self, root: Any, file_name: str) -> RawDict:
        return self._make(
            SyntaxKind.SOURCE_FILE,
            root,
            fileName=file_name,
            statements=self._statement_list(root),
        )

    def _block(self, body: Any) -> RawDict | None:
        if body is None:
            return None
        return self._make(SyntaxKind.MODULE_BLOCK, body, statements=self._statement_list(body))

    def _statement_list(self, ts_node: Any) -> list[RawDict]:
        children = ts_node.named_children
        return [self.statement(child) for child in children if child.type != "comment"]

    def statement(self, ts_node: Any, modifiers: list[RawDict] | None = None) -> RawDict:
        handler = self._statements.get(ts_node.type)
        result = handler(ts_node, modifiers or []) if handler is not None else None
        return result if result is not None else self._unknown(ts_node)

    def _function(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        return self._make(
            SyntaxKind.FUNCTION_DECLARATION,
            ts_node,
            name=self._identifier(ts_node.child_by_field_name("name")),
            modifiers=self._modifiers(ts_node, modifiers),
            parameters=self._parameters(ts_node.child_by_field_name("parameters")),
            type=self._annotation(ts_node.child_by_field_name("return_type")),
        )

    def _class(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        body = ts_node.child_by_field_name("body")
        return self._make(
            SyntaxKind.CLASS_DECLARATION,
            ts_node,
            name=self._identifier(ts_node.child_by_field_name("name")),
            modifiers=self._modifiers(ts_node, modifiers),
            members=self._members(body),
        )

    def _interface(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        body = ts_node.child_by_field_name("body")
        return self._make(
            SyntaxKind.INTERFACE_DECLARATION,
            ts_node,
            name=self._identifier(ts_node.child_by_field_name("name")),
            modifiers=modifiers or None,
            members=self._members(body),
        )

    def _type_alias(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        return self._make(
            SyntaxKind.TYPE_ALIAS_DECLARATION,
            ts_node,
            name=self._identifier(ts_node.child_by_field_name("name")),
            modifiers=modifiers or None,
            type=self.type_node(ts_node.child_by_field_name("value")),
        )

    def _enum(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        body = ts_node.child_by_field_name("body")
        members = []
        if body is not None:
            for child in body.named_children:
                name_node = child
                if child.type == "enum_assignment":
                    name_node = child.child_by_field_name("name")
                name = self._identifier(name_node)
                members.append(self._make(SyntaxKind.UNKNOWN, child, name=name))
        return self._make(
            SyntaxKind.ENUM_DECLARATION,
            ts_node,
            name=self._identifier(ts_node.child_by_field_name("name")),
            modifiers=modifiers or None,
            members=members,
        )

    def _variable_statement(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        keyword = ts_node.children[0].type if ts_node.children else "var"
        flags = {"const": DeclarationFlags.CONST, "let": DeclarationFlags.LET}.get(keyword, 0)
        declarations = [
            self._make(
                SyntaxKind.VARIABLE_DECLARATION,
                child,
                name=self._binding_name(child.child_by_field_name("name")),
                type=self._annotation(child.child_by_field_name("type")),
                initializer=self.expression(child.child_by_field_name("value")),
            )
            for child in ts_node.named_children
            if child.type == "variable_declarator"
        ]
        declaration_list = self._make(
            SyntaxKind.VARIABLE_DECLARATION_LIST,
            ts_node,
            flags=int(flags),
            declarations=declarations,
        )
        return self._make(
            SyntaxKind.VARIABLE_STATEMENT,
            ts_node,
            modifiers=modifiers or None,
            declarationList=declaration_list,
        )

    def _binding_name(self, ts_node: Any) -> RawDict | None:
        if ts_node is None:
            return None
        if ts_node.type == "identifier":
            return self._identifier(ts_node)
        # Destructuring patterns keep their source text
        return self._unknown(ts_node)

    def _import(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        source = ts_node.child_by_field_name("source")
        require = next(
            (c for c in ts_node.named_children if c.type == "import_require_clause"), None
        )
        if require is not None:
            alias = next((c for c in require.named_children if c.type == "identifier"), None)
            return self._make(
                SyntaxKind.IMPORT_EQUALS_DECLARATION,
                ts_node,
                name=self._identifier(alias),
                moduleReference=self._make(
                    SyntaxKind.EXTERNAL_MODULE_REFERENCE,
                    require,
                    expression=self._identifier(require.child_by_field_name("source")),
                ),
            )

        clause = next((c for c in ts_node.named_children if c.type == "import_clause"), None)
        return self._make(
            SyntaxKind.IMPORT_DECLARATION,
            ts_node,
            modifiers=modifiers or None,
            importClause=self._import_clause(clause),
            moduleSpecifier=self._identifier(source),
        )

    def _import_clause(self, clause: Any) -> RawDict | None:
        if clause is None:
            return None
        name = None
        named_bindings = None
        for child in clause.named_children:
            if child.type == "identifier":
                name = self._identifier(child)
            elif child.type == "namespace_import":
                alias = next((c for c in child.named_children if c.type == "identifier"), None)
                named_bindings = self._make(
                    SyntaxKind.NAMESPACE_IMPORT, child, name=self._identifier(alias)
                )
            elif child.type == "named_imports":
                elements = []
                for spec in child.named_children:
                    if spec.type != "import_specifier":
                        continue
                    imported = spec.child_by_field_name("name")
                    alias = spec.child_by_field_name("alias")
                    elements.append(
                        self._make(
                            SyntaxKind.IMPORT_SPECIFIER,
                            spec,
                            name=self._identifier(alias or imported),
                            propertyName=self._identifier(imported) if alias else None,
                        )
                    )
                named_bindings = self._make(SyntaxKind.NAMED_IMPORTS, child, elements=elements)
        return self._make(SyntaxKind.IMPORT_CLAUSE, clause, name=name, namedBindings=named_bindings)

    def _import_alias(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        named = ts_node.named_children
        return self._make(
            SyntaxKind.IMPORT_EQUALS_DECLARATION,
            ts_node,
            name=self._identifier(named[0]) if named else None,
            modifiers=modifiers or None,
        )

    def _export(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict | None:
        export_modifiers = [*modifiers, self._make(SyntaxKind.EXPORT_KEYWORD, ts_node)]
        is_default = any(child.type == "default" for child in ts_node.children)
        if is_default:
            export_modifiers.append(self._make(SyntaxKind.DEFAULT_KEYWORD, ts_node))

        declaration = ts_node.child_by_field_name("declaration")
        if declaration is not None:
            return self.statement(declaration, export_modifiers)

        value = ts_node.child_by_field_name("value")
        if value is not None and value.type == "class":
            return self._class(value, export_modifiers)
        if value is not None and value.type in _ANONYMOUS_FUNCTIONS:
            return self._function(value, export_modifiers)
        if value is None and any(child.type == "=" for child in ts_node.children):
            value = ts_node.named_children[-1] if ts_node.named_children else None
            return self._make(
                SyntaxKind.EXPORT_ASSIGNMENT,
                ts_node,
                isExportEquals=True,
                expression=self.expression(value),
            )
        if value is not None:
            return self._make(
                SyntaxKind.EXPORT_ASSIGNMENT,
                ts_node,
                isExportEquals=False,
                expression=self.expression(value),
            )
        return self._make(SyntaxKind.EXPORT_DECLARATION, ts_node, text=_text(ts_node))

    def _module(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        name_node = ts_node.child_by_field_name("name")
        body = ts_node.child_by_field_name("body")
        is_namespace = ts_node.type == "internal_module"
        exported = any(m["kind"] == SyntaxKind.EXPORT_KEYWORD.value for m in modifiers)
        if is_namespace:
            flags = NodeFlags.EXPORT_NAMESPACE if exported else NodeFlags.NAMESPACE
        else:
            flags = 0

        block = self._block(body)

        # `namespace A.B {}` nests one declaration per dotted segment
        if name_node is not None and name_node.type == "nested_identifier":
            segments = _text(name_node).split(".")
        else:
            segments = [None]

        node = block
        for index, segment in reversed(list(enumerate(segments))):
            if segment is None:
                name = self._identifier(name_node)
            else:
                name = self._make(SyntaxKind.IDENTIFIER, name_node, text=segment.strip())
            node = self._make(
                SyntaxKind.MODULE_DECLARATION,
                ts_node,
                name=name,
                flags=int(flags),
                modifiers=(modifiers or None) if index == 0 else None,
                body=node,
            )
        return node

    def _ambient(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict | None:
        declare = self._make(SyntaxKind.DECLARE_KEYWORD, ts_node)
        named = [child for child in ts_node.named_children if child.type != "comment"]
        if any(child.type == "global" for child in ts_node.children):
            body = next((c for c in named if c.type == "statement_block"), None)
            return self._make(
                SyntaxKind.MODULE_DECLARATION,
                ts_node,
                name=self._make(SyntaxKind.IDENTIFIER, ts_node, text="global"),
                flags=0,
                modifiers=[*modifiers, declare],
                body=self._block(body),
            )
        if not named:
            return None
        return self.statement(named[0], [*modifiers, declare])

    def _expression_statement(self, ts_node: Any, modifiers: list[RawDict]) -> RawDict:
        inner = ts_node.named_children[0] if ts_node.named_children else None
        if inner is not None and inner.type == "internal_module":
            return self._module(inner, modifiers)
        return self._make(
            SyntaxKind.EXPRESSION_STATEMENT, ts_node, expression=self.expression(inner)
        )

    # Members and parameters

    def _members(self, body: Any) -> list[RawDict] | None:
        if body is None:
            return None
        members = []
        for child in body.named_children:
            name = self._identifier(child.child_by_field_name("name"))
            if child.type == "method_definition":
                kind = SyntaxKind.METHOD_DECLARATION
                if name is not None and name.get("text") == "constructor":
                    kind = SyntaxKind.CONSTRUCTOR
            elif child.type in ("method_signature", "abstract_method_signature"):
                kind = SyntaxKind.METHOD_SIGNATURE
            elif child.type == "property_signature":
                kind = SyntaxKind.PROPERTY_SIGNATURE
            elif child.type in ("public_field_definition", "field_definition"):
                kind = SyntaxKind.PROPERTY_DECLARATION
            elif child.type == "index_signature":
                kind = SyntaxKind.INDEX_SIGNATURE
            else:
                continue
            members.append(
                self._make(
                    kind,
                    child,
                    name=name if kind is not SyntaxKind.INDEX_SIGNATURE else None,
                    parameters=self._parameters(child.child_by_field_name("parameters")),
                    type=self._annotation(
                        child.child_by_field_name("return_type")
                        or child.child_by_field_name("type")
                    ),
                )
            )
        return members

    def _parameters(self, ts_node: Any) -> list[RawDict] | None:
        if ts_node is None:
            return None
        params = []
        for child in ts_node.named_children:
            if child.type not in ("required_parameter", "optional_parameter"):
                continue
            params.append(
                self._make(
                    SyntaxKind.PARAMETER,
                    child,
                    name=self._binding_name(child.child_by_field_name("pattern")),
                    questionToken=True if child.type == "optional_parameter" else None,
                    type=self._annotation(child.child_by_field_name("type")),
                )
            )
        return params

    # Types

    def _annotation(self, ts_node: Any) -> RawDict | None:
        if ts_node is None:
            return None
        if ts_node.type == "type_annotation":
            inner = ts_node.named_children[0] if ts_node.named_children else None
            return self.type_node(inner)
        return self.type_node(ts_node)

    def type_node(self, ts_node: Any) -> RawDict | None:
        if ts_node is None:
            return None
        kind = ts_node.type
        if kind == "predefined_type":
            keyword = _KEYWORD_TYPES.get(_text(ts_node))
            return self._make(keyword, ts_node) if keyword else self._unknown(ts_node)
        if kind in ("type_identifier", "nested_type_identifier"):
            return self._make(
                SyntaxKind.TYPE_REFERENCE, ts_node, typeName=self._identifier(ts_node)
            )
        if kind == "generic_type":
            args = ts_node.child_by_field_name("type_arguments")
            return self._make(
                SyntaxKind.TYPE_REFERENCE,
                ts_node,
                typeName=self._identifier(ts_node.child_by_field_name("name")),
                typeArguments=[self.type_node(a) for a in args.named_children] if args else None,
            )
        if kind == "array_type":
            element = ts_node.named_children[0] if ts_node.named_children else None
            return self._make(SyntaxKind.ARRAY_TYPE, ts_node, elementType=self.type_node(element))
        if kind in ("union_type", "intersection_type"):
            target = SyntaxKind.UNION_TYPE if kind == "union_type" else SyntaxKind.INTERSECTION_TYPE
            return self._make(target, ts_node, types=self._flatten(ts_node, kind))
        if kind == "literal_type":
            literal = ts_node.named_children[0] if ts_node.named_children else None
            return self._make(SyntaxKind.LITERAL_TYPE, ts_node, literal=self.expression(literal))
        if kind == "tuple_type":
            return self._make(
                SyntaxKind.TUPLE_TYPE,
                ts_node,
                elements=[self.type_node(c) for c in ts_node.named_children],
            )
        if kind == "parenthesized_type":
            inner = ts_node.named_children[0] if ts_node.named_children else None
            return self._make(SyntaxKind.PARENTHESIZED_TYPE, ts_node, type=self.type_node(inner))
        if kind == "object_type":
            return self._make(SyntaxKind.TYPE_LITERAL, ts_node, members=self._members(ts_node))
        if kind == "function_type":
            return self._make(
                SyntaxKind.FUNCTION_TYPE,
                ts_node,
                parameters=self._parameters(ts_node.child_by_field_name("parameters")),
                type=self.type_node(ts_node.child_by_field_name("return_type")),
            )
        if kind in _LITERAL_KEYWORDS:
            return self._make(_LITERAL_KEYWORDS[kind], ts_node)
        return self._unknown(ts_node)

    def _flatten(self, ts_node: Any, kind: str) -> list[RawDict]:
        types: list[RawDict] = []
        for child in ts_node.named_children:
            if child.type == kind:
                types.extend(self._flatten(child, kind))
            else:
                converted = self.type_node(child)
                if converted is not None:
                    types.append(converted)
        return types

    # Expressions

    def expression(self, ts_node: Any) -> RawDict | None:
        if ts_node is None:
            return None
        kind = ts_node.type
        if kind in ("identifier", "property_identifier", "type_identifier"):
            return self._identifier(ts_node)
        if kind in _LITERAL_KEYWORDS:
            return self._make(_LITERAL_KEYWORDS[kind], ts_node)
        if kind == "string":
            return self._identifier(ts_node)
        if kind == "template_string":
            return self._make(SyntaxKind.TEMPLATE_LITERAL, ts_node, text=_unquote(_text(ts_node)))
        if kind == "number":
            return self._make(SyntaxKind.NUMERIC_LITERAL, ts_node, text=_text(ts_node))
        if kind == "member_expression":
            return self._member_chain(ts_node)
        if kind in ("call_expression", "new_expression"):
            is_call = kind == "call_expression"
            callee_field = "function" if is_call else "constructor"
            target = SyntaxKind.CALL_EXPRESSION if is_call else SyntaxKind.NEW_EXPRESSION
            args = ts_node.child_by_field_name("arguments")
            type_args = ts_node.child_by_field_name("type_arguments")
            return self._make(
                target,
                ts_node,
                expression=self.expression(ts_node.child_by_field_name(callee_field)),
                typeArguments=[self.type_node(a) for a in type_args.named_children]
                if type_args
                else None,
                arguments=[self.expression(a) for a in args.named_children] if args else [],
            )
        if kind == "object":
            return self._make(
                SyntaxKind.OBJECT_LITERAL_EXPRESSION,
                ts_node,
                properties=[self._unknown(c) for c in ts_node.named_children],
            )
        if kind == "array":
            return self._make(
                SyntaxKind.ARRAY_LITERAL_EXPRESSION,
                ts_node,
                elements=[self.expression(c) for c in ts_node.named_children],
            )
        if kind == "arrow_function":
            params = ts_node.child_by_field_name("parameters")
            if params is None:
                single = ts_node.child_by_field_name("parameter")
                param = self._make(SyntaxKind.PARAMETER, single, name=self._identifier(single))
                parameters = [param]
            else:
                parameters = self._parameters(params)
            return self._make(SyntaxKind.ARROW_FUNCTION, ts_node, parameters=parameters)
        if kind == "parenthesized_expression":
            inner = ts_node.named_children[0] if ts_node.named_children else None
            return self._make(
                SyntaxKind.PARENTHESIZED_EXPRESSION, ts_node, expression=self.expression(inner)
            )
        return self._unknown(ts_node)

    def _member_chain(self, ts_node: Any) -> RawDict | None:
        # `a.b.c` nests leftwards; unwind it without recursing per segment
        links = []
        while ts_node is not None and ts_node.type == "member_expression":
            links.append(ts_node)
            ts_node = ts_node.child_by_field_name("object")
        node = self.expression(ts_node)
        for link in reversed(links):
            node = self._make(
                SyntaxKind.PROPERTY_ACCESS_EXPRESSION,
                link,
                expression=node,
                name=self._identifier(link.child_by_field_name("property")),
            )
        return node
