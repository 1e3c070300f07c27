from __future__ import annotations

"""
Per-file Import Scanner.

Reads one source file and runs every line through the conditional state
machine and the rule evaluator. The scanner never writes output itself;
it returns a FileReport that the walker merges into the run's sink.
"""

import logging
from typing import List

from importstyle.core.classifier import parse_directive, step_state
from importstyle.core.rules import evaluate_import, module_import_diagnostic
from importstyle.domain.config import CheckerConfig
from importstyle.domain.models import (
    ConditionalState,
    Diagnostic,
    FileContext,
    FileReport,
    LineAction,
)
from importstyle.infra.fs import read_text_file

logger = logging.getLogger(__name__)


def scan_file(ctx: FileContext, repo_root: str, config: CheckerConfig) -> FileReport:
    """
    Scan a file on disk.

    A file that cannot be read or decoded as UTF-8 yields a report with
    `error` set and no diagnostics; the run continues with the next file.

    Args:
        ctx: File context built by the walker.
        repo_root: Absolute repository root for existence checks.
        config: Active rule tables.

    Returns:
        FileReport: Diagnostics in ascending line order, or the read error.
    """
    try:
        content = read_text_file(ctx.path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Read failure on {ctx.path}: {e}")
        return FileReport(path=ctx.path, error=f"Could not read {ctx.path}. {e}")

    return FileReport(path=ctx.path, diagnostics=scan_text(content, ctx, repo_root, config))


def scan_text(
        content: str,
        ctx: FileContext,
        repo_root: str,
        config: CheckerConfig,
) -> List[Diagnostic]:
    """Scan already-loaded file content and return its diagnostics."""
    diagnostics: List[Diagnostic] = []
    state = ConditionalState.NORMAL

    for line_number, raw_line in enumerate(content.splitlines(), start=1):
        line = raw_line.strip()
        state, action = step_state(line, state)

        if action is LineAction.SKIP:
            continue
        if action is LineAction.MODULE_IMPORT:
            diagnostics.append(module_import_diagnostic(ctx, line_number))
            continue

        directive = parse_directive(line, line_number)
        if directive is None:
            continue

        diagnostic = evaluate_import(directive, ctx, state, repo_root, config)
        if diagnostic is not None:
            diagnostics.append(diagnostic)

    return diagnostics
