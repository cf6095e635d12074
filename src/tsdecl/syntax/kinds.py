"""SyntaxKind names, node flags, and the numeric kind lookup table.

Raw AST nodes carry their discriminant either as a symbolic name (what the
tree-sitter front end emits) or as the integer value of TypeScript's
``SyntaxKind`` enum (what a compiler JSON dump contains). Integer values
shift between TypeScript releases, so they are never hard-coded here: a
``KindTable`` is loaded from a dump of the enum produced by the same
compiler that produced the AST.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any

import yaml

from tsdecl.core.errors import SourceError


class SyntaxKind(str, Enum):
    """Kind names produced or inspected by tsdecl."""

    UNKNOWN = "Unknown"

    # Names and literals
    IDENTIFIER = "Identifier"
    QUALIFIED_NAME = "QualifiedName"
    STRING_LITERAL = "StringLiteral"
    NUMERIC_LITERAL = "NumericLiteral"
    TEMPLATE_LITERAL = "NoSubstitutionTemplateLiteral"
    TRUE_KEYWORD = "TrueKeyword"
    FALSE_KEYWORD = "FalseKeyword"
    NULL_KEYWORD = "NullKeyword"
    THIS_KEYWORD = "ThisKeyword"

    # Keyword types
    ANY_KEYWORD = "AnyKeyword"
    UNKNOWN_KEYWORD = "UnknownKeyword"
    NUMBER_KEYWORD = "NumberKeyword"
    BIGINT_KEYWORD = "BigIntKeyword"
    BOOLEAN_KEYWORD = "BooleanKeyword"
    STRING_KEYWORD = "StringKeyword"
    SYMBOL_KEYWORD = "SymbolKeyword"
    OBJECT_KEYWORD = "ObjectKeyword"
    VOID_KEYWORD = "VoidKeyword"
    UNDEFINED_KEYWORD = "UndefinedKeyword"
    NEVER_KEYWORD = "NeverKeyword"

    # Modifiers
    EXPORT_KEYWORD = "ExportKeyword"
    DEFAULT_KEYWORD = "DefaultKeyword"
    DECLARE_KEYWORD = "DeclareKeyword"
    ABSTRACT_KEYWORD = "AbstractKeyword"

    # Types
    TYPE_REFERENCE = "TypeReference"
    ARRAY_TYPE = "ArrayType"
    TUPLE_TYPE = "TupleType"
    UNION_TYPE = "UnionType"
    INTERSECTION_TYPE = "IntersectionType"
    LITERAL_TYPE = "LiteralType"
    PARENTHESIZED_TYPE = "ParenthesizedType"
    TYPE_LITERAL = "TypeLiteral"
    FUNCTION_TYPE = "FunctionType"

    # Expressions
    PROPERTY_ACCESS_EXPRESSION = "PropertyAccessExpression"
    CALL_EXPRESSION = "CallExpression"
    NEW_EXPRESSION = "NewExpression"
    OBJECT_LITERAL_EXPRESSION = "ObjectLiteralExpression"
    ARRAY_LITERAL_EXPRESSION = "ArrayLiteralExpression"
    ARROW_FUNCTION = "ArrowFunction"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"

    # Members
    PROPERTY_SIGNATURE = "PropertySignature"
    METHOD_SIGNATURE = "MethodSignature"
    PROPERTY_DECLARATION = "PropertyDeclaration"
    METHOD_DECLARATION = "MethodDeclaration"
    CONSTRUCTOR = "Constructor"
    GET_ACCESSOR = "GetAccessor"
    SET_ACCESSOR = "SetAccessor"
    INDEX_SIGNATURE = "IndexSignature"
    PARAMETER = "Parameter"

    # Statements and declarations
    SOURCE_FILE = "SourceFile"
    VARIABLE_STATEMENT = "VariableStatement"
    VARIABLE_DECLARATION_LIST = "VariableDeclarationList"
    VARIABLE_DECLARATION = "VariableDeclaration"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    CLASS_DECLARATION = "ClassDeclaration"
    INTERFACE_DECLARATION = "InterfaceDeclaration"
    TYPE_ALIAS_DECLARATION = "TypeAliasDeclaration"
    ENUM_DECLARATION = "EnumDeclaration"
    MODULE_DECLARATION = "ModuleDeclaration"
    MODULE_BLOCK = "ModuleBlock"
    IMPORT_EQUALS_DECLARATION = "ImportEqualsDeclaration"
    IMPORT_DECLARATION = "ImportDeclaration"
    IMPORT_CLAUSE = "ImportClause"
    NAMESPACE_IMPORT = "NamespaceImport"
    NAMED_IMPORTS = "NamedImports"
    IMPORT_SPECIFIER = "ImportSpecifier"
    EXPORT_ASSIGNMENT = "ExportAssignment"
    EXPORT_DECLARATION = "ExportDeclaration"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    EXTERNAL_MODULE_REFERENCE = "ExternalModuleReference"


class NodeFlags(IntEnum):
    """ModuleDeclaration flag values that mark a namespace."""

    NAMESPACE = 16
    # Reported on exported namespaces
    EXPORT_NAMESPACE = 4098


class DeclarationFlags(IntEnum):
    """VariableDeclarationList flags that select the declaring keyword."""

    LET = 1
    CONST = 2


# Compiler enum markers such as FirstToken/LastKeyword alias real members
_MARKER_PREFIXES = ("First", "Last")


def _is_marker(name: str) -> bool:
    return any(name.startswith(p) and name[len(p) : len(p) + 1].isupper() for p in _MARKER_PREFIXES)


class KindTable:
    """Maps kind discriminants to canonical SyntaxKind names.

    An empty table passes symbolic kinds through and renders integers it
    does not know as ``Unknown(<n>)``.
    """

    def __init__(self, names: Mapping[int, str] | None = None) -> None:
        self._names: dict[int, str] = dict(names or {})

    def __len__(self) -> int:
        return len(self._names)

    @classmethod
    def from_enum_dump(cls, dump: Mapping[str, Any]) -> KindTable:
        """Build a table from a dump of TypeScript's SyntaxKind enum.

        TypeScript enums serialize both directions (``"Identifier": 80`` and
        ``"80": "LastToken"``). Name-to-value entries are preferred, and
        marker aliases never become canonical names.
        """
        names: dict[int, str] = {}
        reverse: dict[int, str] = {}
        for key, value in dump.items():
            if isinstance(value, bool):
                continue
            if isinstance(value, int) and not _is_marker(key):
                names.setdefault(value, key)
            elif isinstance(value, str) and key.lstrip("-").isdigit() and not _is_marker(value):
                reverse.setdefault(int(key), value)
        for value, name in reverse.items():
            names.setdefault(value, name)
        return cls(names)

    @classmethod
    def load(cls, path: Path) -> KindTable:
        """Load a table from a JSON or YAML enum dump."""
        if not path.exists():
            raise SourceError.not_found(str(path))
        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix.lower() in (".yaml", ".yml"):
                dump = yaml.safe_load(text)
            else:
                dump = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise SourceError.invalid_kind_table(str(path), str(e)) from e
        if not isinstance(dump, dict):
            raise SourceError.invalid_kind_table(str(path), "expected a mapping")
        table = cls.from_enum_dump(dump)
        if not table:
            raise SourceError.invalid_kind_table(str(path), "no SyntaxKind entries found")
        return table

    def name_of(self, kind: Any) -> str:
        """Canonical name for a raw discriminant. Names map to themselves."""
        if isinstance(kind, SyntaxKind):
            return kind.value
        if isinstance(kind, str):
            return kind
        if isinstance(kind, int) and not isinstance(kind, bool):
            return self._names.get(kind, f"{SyntaxKind.UNKNOWN.value}({kind})")
        return SyntaxKind.UNKNOWN.value

    def get_node_name(self, node: Mapping[str, Any]) -> str:
        """Kind name of an (already normalized) node."""
        return self.name_of(node.get("kind"))

    def kind_of(self, node: Any) -> SyntaxKind:
        """Resolve a raw node's discriminant to a SyntaxKind member."""
        if not isinstance(node, Mapping):
            return SyntaxKind.UNKNOWN
        try:
            return SyntaxKind(self.name_of(node.get("kind")))
        except ValueError:
            return SyntaxKind.UNKNOWN


DEFAULT_KIND_TABLE = KindTable()
