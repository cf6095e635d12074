"""Output declaration tree.

Context nodes (modules and namespaces) hold an insertion-ordered mapping of
named children; leaf nodes describe a single declaration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class DeclarationNode:
    """Base for every node in the declaration tree."""

    kind: ClassVar[str] = "declaration"

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "name": self.name}


@dataclass
class ContextNode(DeclarationNode):
    """A named scope that other declarations are attached to."""

    children: dict[str, DeclarationNode] = field(default_factory=dict)

    def add_child(self, name: str, node: DeclarationNode) -> None:
        """Attach ``node`` under ``name``; a duplicate name replaces the earlier child."""
        self.children[name] = node

    def get(self, name: str) -> DeclarationNode | None:
        return self.children.get(name)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["children"] = {key: child.to_dict() for key, child in self.children.items()}
        return data


@dataclass
class ModuleNode(ContextNode):
    kind: ClassVar[str] = "module"


@dataclass
class NamespaceNode(ContextNode):
    kind: ClassVar[str] = "namespace"


@dataclass
class PropertyNode(DeclarationNode):
    """A function, class, interface or type alias."""

    kind: ClassVar[str] = "property"

    declaration: str = ""
    members: list[str] = field(default_factory=list)
    exported: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            declaration=self.declaration, members=list(self.members), exported=self.exported
        )
        return data


@dataclass
class VariableNode(DeclarationNode):
    kind: ClassVar[str] = "variable"

    keyword: str = "var"
    declarators: list[str] = field(default_factory=list)
    exported: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            keyword=self.keyword, declarators=list(self.declarators), exported=self.exported
        )
        return data


@dataclass
class ExportNode(DeclarationNode):
    kind: ClassVar[str] = "export"

    expression: str = ""
    export_equals: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(expression=self.expression, export_equals=self.export_equals)
        return data


@dataclass
class ImportNode(DeclarationNode):
    kind: ClassVar[str] = "import"

    module: str | None = None
    bindings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(module=self.module, bindings=list(self.bindings))
        return data
