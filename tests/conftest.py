from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A throwaway repository layout with the root marker in place.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from importstyle.domain.config import CheckerConfig, get_default_config  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """
    Create an empty repository containing only the root marker.

    Structure:
    /repo
      /scripts
        check_imports.py
    """
    root = tmp_path / "repo"
    (root / "scripts").mkdir(parents=True)
    (root / "scripts" / "check_imports.py").write_text("# marker\n", encoding="utf-8")
    return root


@pytest.fixture
def write_file(repo: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a repo-relative file, creating parents."""

    def _write(rel_path: str, content: str) -> Path:
        path = repo / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config() -> CheckerConfig:
    return get_default_config()
