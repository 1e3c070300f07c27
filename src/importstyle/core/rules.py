from __future__ import annotations

"""
Import Rule Evaluator.

Applies the import style rules to a single classified directive. Rules are
mutually exclusive, so a line yields at most one diagnostic.
"""

import logging
import os
from typing import Optional

from importstyle.core.filters import starts_with_any
from importstyle.domain.config import CheckerConfig
from importstyle.domain.models import (
    ConditionalState,
    Diagnostic,
    FileContext,
    ImportDirective,
    ImportStyle,
)
from importstyle.infra.fs import path_exists

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# MESSAGES
# -----------------------------------------------------------------------------

MSG_MODULE_IMPORT = "@import should not be used in CocoaPods library code"
MSG_ELSE_BRANCH = 'Import in SWIFT_PACKAGE #else should start with "<".'
MSG_PUBLIC_SLASH = 'Public header import should not include "/"'
MSG_DOES_NOT_EXIST = "Import {target} does not exist."
MSG_INTERNAL_ANGLED = 'Imports internal to the repo should use double quotes not "<"'
MSG_MALFORMED = 'Malformed import directive: expected a target after "{keyword}"'


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def module_import_diagnostic(ctx: FileContext, line_number: int) -> Diagnostic:
    """Diagnostic for an `@import` outside the package-only branch."""
    return Diagnostic(ctx.path, line_number, MSG_MODULE_IMPORT)


def evaluate_import(
        directive: ImportDirective,
        ctx: FileContext,
        state: ConditionalState,
        repo_root: str,
        config: CheckerConfig,
) -> Optional[Diagnostic]:
    """
    Check one `#import` / `#include` directive.

    Inside the #else branch of a SWIFT_PACKAGE block only the angle bracket
    rule applies. Elsewhere, quoted imports in public headers must be bare
    file names, quoted imports in other files must resolve relative to the
    repository root, and angle bracket imports must not name a module that
    lives in the repository.

    Args:
        directive: Parsed directive.
        ctx: Context of the file being scanned.
        state: Conditional state at this line.
        repo_root: Absolute repository root.
        config: Active rule tables.

    Returns:
        Optional[Diagnostic]: The violation, if any.
    """
    line_number = directive.line_number

    if directive.style is ImportStyle.MISSING:
        return Diagnostic(ctx.path, line_number, MSG_MALFORMED.format(keyword=directive.keyword))

    if state is ConditionalState.IN_CONDITIONAL_ELSE:
        if directive.style is not ImportStyle.ANGLED:
            return Diagnostic(ctx.path, line_number, MSG_ELSE_BRANCH)
        return None

    if directive.style is ImportStyle.QUOTED:
        if ctx.is_public:
            if "/" in directive.target:
                return Diagnostic(ctx.path, line_number, MSG_PUBLIC_SLASH)
            return None
        return _check_exists(directive, ctx, repo_root, config)

    if directive.style is ImportStyle.ANGLED:
        if starts_with_any(directive.raw_target, config.internal_module_prefixes):
            return Diagnostic(ctx.path, line_number, MSG_INTERNAL_ANGLED)

    return None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_exists(
        directive: ImportDirective,
        ctx: FileContext,
        repo_root: str,
        config: CheckerConfig,
) -> Optional[Diagnostic]:
    """Repo-relative imports must name an existing path under the root."""
    raw = directive.raw_target
    if path_exists(os.path.join(repo_root, raw)):
        return None
    if starts_with_any(raw, config.skip_import_patterns):
        logger.debug(f"Existence check skipped for '{raw}' in {ctx.rel_path}")
        return None
    return Diagnostic(ctx.path, directive.line_number, MSG_DOES_NOT_EXIST.format(target=raw))
