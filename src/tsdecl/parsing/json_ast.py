"""Loading compiler AST dumps from JSON.

Dumps are typically produced with the TypeScript compiler API, e.g.
``JSON.stringify(sourceFile, (k, v) => k === "parent" ? undefined : v)``.
Kinds in such dumps are integers; pair them with a ``KindTable``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tsdecl.core.errors import SourceError


def parse_ast_json(text: str, origin: str = "<string>") -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceError.parse_error(origin, str(e)) from e
    if not isinstance(data, dict):
        raise SourceError.parse_error(origin, "AST root must be a JSON object")
    return data


def load_ast_json(path: Path) -> dict[str, Any]:
    """Read a JSON AST dump from ``path``."""
    if not path.exists():
        raise SourceError.not_found(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceError.parse_error(str(path), str(e)) from e
    return parse_ast_json(text, str(path))
