from __future__ import annotations

"""
Path Filtering and Classification.

Decides which discovered files are scanned and whether a file is a public
header. All matching is plain substring / prefix / suffix comparison against
the configured tables; no regular expressions are involved.
"""

import os
from typing import Iterable

from importstyle.domain.config import CheckerConfig
from importstyle.domain.models import FileContext

# -----------------------------------------------------------------------------
# MATCHING PRIMITIVES
# -----------------------------------------------------------------------------

def contains_any(text: str, patterns: Iterable[str]) -> bool:
    """Return True if any pattern is a substring of `text`."""
    return any(p in text for p in patterns)


def starts_with_any(text: str, prefixes: Iterable[str]) -> bool:
    """Return True if `text` starts with any of the prefixes."""
    return any(text.startswith(p) for p in prefixes)

# -----------------------------------------------------------------------------
# FILE CLASSIFICATION
# -----------------------------------------------------------------------------

def is_source_file(file_name: str, config: CheckerConfig) -> bool:
    """
    Check whether a file name is eligible for scanning.

    Hidden files are rejected, as is anything without one of the
    configured source extensions.
    """
    if file_name.startswith("."):
        return False
    return file_name.endswith(tuple(config.source_extensions))


def is_skipped_path(full_path: str, config: CheckerConfig) -> bool:
    """Return True if the full path matches a directory skip pattern."""
    return contains_any(full_path, config.skip_dir_patterns)


def is_public_header(rel_path: str, config: CheckerConfig) -> bool:
    """
    Determine whether a file is part of a module's public API surface.

    Args:
        rel_path: Path relative to the top-level directory holding the file.
        config: Active checker configuration.

    Returns:
        bool: True if the path has a public segment and is not a legacy exception.
    """
    normalized = rel_path.replace(os.sep, "/")
    if config.public_segment not in normalized:
        return False
    return not contains_any(normalized, config.legacy_public_exceptions)


def build_file_context(full_path: str, rel_path: str, config: CheckerConfig) -> FileContext:
    return FileContext(
        path=full_path,
        rel_path=rel_path,
        is_public=is_public_header(rel_path, config),
    )
