"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and makes the shared AST builders importable.
"""

import sys
from pathlib import Path

import pytest
import structlog

_tests_dir = Path(__file__).parent
_src_dir = _tests_dir.parent / "src"
for _path in (_src_dir, _tests_dir):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

# Force reimport of tsdecl modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("tsdecl"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _reset_structlog() -> None:
    """Start every test from structlog's default (unfiltered) configuration."""
    structlog.reset_defaults()
