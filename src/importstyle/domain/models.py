from __future__ import annotations

"""
Checker Domain Data Models.

Defines the value objects exchanged between the walker, the per-file
scanner and the diagnostic sink, plus the exceptions raised for fatal
run conditions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------


class ImportCheckError(Exception):
    """Base class for conditions that abort the whole run."""


class RepoRootNotFoundError(ImportCheckError):
    """Raised when no ancestor of the start directory holds the root marker."""

    def __init__(self, start_dir: str, marker: str) -> None:
        super().__init__(
            f"Could not locate the repository root: no '{marker}' found above {start_dir}"
        )
        self.start_dir = start_dir
        self.marker = marker


class RepoListingError(ImportCheckError):
    """Raised when the repository root cannot be listed."""

    def __init__(self, root: str, reason: str) -> None:
        super().__init__(f"Failed to get repo contents {root}")
        self.root = root
        self.reason = reason


# -----------------------------------------------------------------------------
# PARSING MODELS
# -----------------------------------------------------------------------------


class ConditionalState(Enum):
    """Position of a line relative to the SWIFT_PACKAGE conditional block."""
    NORMAL = "normal"
    IN_CONDITIONAL = "in_conditional"
    IN_CONDITIONAL_ELSE = "in_conditional_else"


class LineAction(Enum):
    """What the scanner should do with a line after the state transition."""
    CHECK = "check"
    SKIP = "skip"
    MODULE_IMPORT = "module_import"


class ImportStyle(Enum):
    QUOTED = "quoted"
    ANGLED = "angled"
    OTHER = "other"
    MISSING = "missing"


@dataclass(frozen=True)
class FileContext:
    """
    Immutable facts about a scanned file.

    Attributes:
        path: Absolute filesystem path, used when reporting.
        rel_path: Path relative to the top-level directory that contains it.
        is_public: Whether the file is a public header.
    """
    path: str
    rel_path: str
    is_public: bool = False


@dataclass(frozen=True)
class ImportDirective:
    """
    A single `#import` / `#include` line.

    Attributes:
        line: Stripped line text.
        line_number: 1-based line number.
        keyword: The directive keyword token (e.g. '#import').
        target: The token following the keyword, or None if absent.
        style: Quoting style of the target.
        raw_target: Target with quote and bracket characters removed.
    """
    line: str
    line_number: int
    keyword: str
    target: Optional[str]
    style: ImportStyle
    raw_target: str = ""


# -----------------------------------------------------------------------------
# REPORTING MODELS
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Diagnostic:
    """A rule violation at a given file and line."""
    path: str
    line_number: int
    message: str

    def render(self) -> str:
        return f"Import Error: {self.path}:{self.line_number} {self.message}"


@dataclass
class FileReport:
    """
    Outcome of scanning one file.

    Attributes:
        path: Absolute path of the scanned file.
        diagnostics: Violations in ascending line order.
        error: Read failure message; when set no line was checked.
    """
    path: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.diagnostics
