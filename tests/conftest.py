"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local supatypes package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of supatypes modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("supatypes"):
        del sys.modules[module_name]

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def blog_document() -> dict[str, Any]:
    """DMMF document for the User/Post blog schema."""
    return json.loads((FIXTURES_DIR / "blog_dmmf.json").read_text(encoding="utf-8"))


@pytest.fixture
def blog_datamodel(blog_document: dict[str, Any]) -> dict[str, Any]:
    return blog_document["datamodel"]


@pytest.fixture
def blog_expected() -> str:
    """Expected generator output for the blog schema."""
    return (FIXTURES_DIR / "blog_database.ts").read_text(encoding="utf-8")
