from __future__ import annotations

"""
Checker Configuration Model.

Bundles the fixed rule tables into a single immutable object so the walker,
filters and rule evaluator receive them explicitly instead of reading module
globals. Tables are plain strings matched by substring or prefix.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from importstyle.domain import constants


@dataclass(frozen=True)
class CheckerConfig:
    """
    Immutable rule tables for a checker run.

    Attributes:
        root_marker: Repo-relative path whose presence identifies the root.
        source_extensions: File suffixes that are scanned.
        skip_dir_patterns: Substrings excluding a file path from the run.
        skip_import_patterns: Prefixes exempt from the existence check.
        internal_module_prefixes: Module families that must use double quotes.
        public_segment: Path segment marking a public header.
        legacy_public_exceptions: Paths never treated as public.
        repo_root: Explicit root; disables the upward marker search.
    """
    root_marker: str = constants.ROOT_MARKER
    source_extensions: Tuple[str, ...] = constants.SOURCE_EXTENSIONS
    skip_dir_patterns: Tuple[str, ...] = constants.SKIP_DIR_PATTERNS
    skip_import_patterns: Tuple[str, ...] = constants.SKIP_IMPORT_PATTERNS
    internal_module_prefixes: Tuple[str, ...] = constants.INTERNAL_MODULE_PREFIXES
    public_segment: str = constants.PUBLIC_SEGMENT
    legacy_public_exceptions: Tuple[str, ...] = constants.LEGACY_PUBLIC_EXCEPTIONS
    repo_root: Optional[str] = None


def get_default_config() -> CheckerConfig:
    """Return the configuration used when the tool runs without arguments."""
    return CheckerConfig()


def apply_overrides(base: CheckerConfig, **overrides: Optional[str]) -> CheckerConfig:
    """
    Return a copy of `base` with the non-None overrides applied.

    Unknown keys raise TypeError, as with dataclasses.replace.
    """
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return base
    return replace(base, **changes)
