from __future__ import annotations

"""
Import Line Classifier.

Drives the per-file SWIFT_PACKAGE conditional state machine and extracts
`#import` / `#include` directives from stripped source lines. This is a
line-oriented heuristic, not a preprocessor: nested conditionals and
multi-line directives are not understood.
"""

from typing import Optional, Tuple

from importstyle.domain.constants import (
    CONDITIONAL_BEGIN_MARKER,
    CONDITIONAL_ELSE_MARKER,
    CONDITIONAL_END_MARKER,
    INCLUDE_MARKERS,
    MODULE_IMPORT_MARKER,
)
from importstyle.domain.models import (
    ConditionalState,
    ImportDirective,
    ImportStyle,
    LineAction,
)

_TARGET_DELIMITERS = ('"', "<", ">")


# -----------------------------------------------------------------------------
# STATE MACHINE
# -----------------------------------------------------------------------------

def step_state(line: str, state: ConditionalState) -> Tuple[ConditionalState, LineAction]:
    """
    Advance the conditional state for one stripped line.

    Transitions are checked in priority order and the first match wins:
    entering the block, switching to its #else branch, leaving the #else
    branch, skipping lines of the package-only branch, and finally
    flagging whole-module imports.

    Args:
        line: Stripped source line.
        state: State before this line.

    Returns:
        Tuple[ConditionalState, LineAction]: New state and what to do with the line.
    """
    if state is not ConditionalState.IN_CONDITIONAL and line.startswith(CONDITIONAL_BEGIN_MARKER):
        return ConditionalState.IN_CONDITIONAL, LineAction.CHECK

    if state is ConditionalState.IN_CONDITIONAL and line.startswith(CONDITIONAL_ELSE_MARKER):
        return ConditionalState.IN_CONDITIONAL_ELSE, LineAction.CHECK

    if state is ConditionalState.IN_CONDITIONAL_ELSE and line.startswith(CONDITIONAL_END_MARKER):
        return ConditionalState.NORMAL, LineAction.CHECK

    if state is ConditionalState.IN_CONDITIONAL:
        return state, LineAction.SKIP

    if line.startswith(MODULE_IMPORT_MARKER):
        return state, LineAction.MODULE_IMPORT

    return state, LineAction.CHECK


# -----------------------------------------------------------------------------
# DIRECTIVE EXTRACTION
# -----------------------------------------------------------------------------

def is_include_line(line: str) -> bool:
    return line.startswith(INCLUDE_MARKERS)


def parse_directive(line: str, line_number: int) -> Optional[ImportDirective]:
    """
    Extract the import target from an `#import` / `#include` line.

    The target is the first whitespace-delimited token after the keyword.
    A directive with nothing after the keyword is returned with style
    MISSING rather than rejected, so the caller can report it.

    Args:
        line: Stripped source line.
        line_number: 1-based line number.

    Returns:
        Optional[ImportDirective]: The directive, or None if the line is not one.
    """
    if not is_include_line(line):
        return None

    tokens = line.split()
    keyword = tokens[0]
    if len(tokens) < 2:
        return ImportDirective(
            line=line,
            line_number=line_number,
            keyword=keyword,
            target=None,
            style=ImportStyle.MISSING,
        )

    target = tokens[1]
    return ImportDirective(
        line=line,
        line_number=line_number,
        keyword=keyword,
        target=target,
        style=_classify_target(target),
        raw_target=unquote_target(target),
    )


def unquote_target(target: str) -> str:
    """Remove every quote and angle bracket character from a target token."""
    for ch in _TARGET_DELIMITERS:
        target = target.replace(ch, "")
    return target


def _classify_target(target: str) -> ImportStyle:
    if target.startswith('"'):
        return ImportStyle.QUOTED
    if target.startswith("<"):
        return ImportStyle.ANGLED
    return ImportStyle.OTHER
