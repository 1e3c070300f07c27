from __future__ import annotations

"""
Unit tests for the Import Rule Evaluator.

Each rule is exercised in isolation against a small repository so the
existence check has something real to resolve.
"""

from pathlib import Path

import pytest

from importstyle.core.classifier import parse_directive
from importstyle.core.rules import (
    MSG_DOES_NOT_EXIST,
    MSG_ELSE_BRANCH,
    MSG_INTERNAL_ANGLED,
    MSG_MODULE_IMPORT,
    MSG_PUBLIC_SLASH,
    evaluate_import,
    module_import_diagnostic,
)
from importstyle.domain.models import ConditionalState, FileContext

PRIVATE = FileContext(path="/repo/Lib/Sources/Lib.m", rel_path="Sources/Lib.m", is_public=False)
PUBLIC = FileContext(path="/repo/Lib/Sources/Public/Lib.h", rel_path="Sources/Public/Lib.h", is_public=True)


@pytest.fixture
def evaluate(repo: Path, write_file, config):
    """Evaluate a single directive line against the fixture repository."""
    write_file("Lib/Sources/Existing.h", "")

    def _evaluate(line, ctx=PRIVATE, state=ConditionalState.NORMAL):
        directive = parse_directive(line, 10)
        assert directive is not None
        return evaluate_import(directive, ctx, state, str(repo), config)

    return _evaluate


def test_existing_repo_relative_import_passes(evaluate):
    assert evaluate('#import "Lib/Sources/Existing.h"') is None


def test_missing_repo_relative_import_reported(evaluate):
    diag = evaluate('#import "Lib/Sources/Missing.h"')
    assert diag is not None
    assert diag.path == PRIVATE.path
    assert diag.line_number == 10
    assert diag.message == MSG_DOES_NOT_EXIST.format(target="Lib/Sources/Missing.h")
    assert diag.message == "Import Lib/Sources/Missing.h does not exist."


@pytest.mark.parametrize("line", ['#import "OCMock/OCMock.h"', '#include "FBLPromise+Then.h"'])
def test_skip_import_patterns_bypass_existence(evaluate, line):
    assert evaluate(line) is None


def test_public_header_with_slash_reported(evaluate):
    diag = evaluate('#import "Sub/Foo.h"', ctx=PUBLIC)
    assert diag.message == MSG_PUBLIC_SLASH


def test_public_header_bare_name_not_checked_for_existence(evaluate):
    # Public headers only need a bare file name; it need not exist at the root.
    assert evaluate('#import "NotAtRoot.h"', ctx=PUBLIC) is None


@pytest.mark.parametrize("target", [
    "FirebaseCore/FirebaseCore.h",
    "GoogleUtilities/GULLogger.h",
    "GoogleDataTransport/GDTCORTransport.h",
])
def test_internal_module_with_angle_brackets_reported(evaluate, target):
    diag = evaluate(f"#import <{target}>")
    assert diag.message == MSG_INTERNAL_ANGLED


def test_external_angle_import_passes(evaluate):
    assert evaluate("#import <Foundation/Foundation.h>") is None
    assert evaluate("#include <nanopb/pb.h>", ctx=PUBLIC) is None


def test_else_branch_requires_angle_brackets(evaluate):
    else_state = ConditionalState.IN_CONDITIONAL_ELSE
    assert evaluate('#import "Foo.h"', state=else_state).message == MSG_ELSE_BRANCH
    # Only the bracket rule applies: internal modules are fine here.
    assert evaluate("#import <FirebaseCore/FirebaseCore.h>", state=else_state) is None


def test_else_branch_skips_public_rule(evaluate):
    diag = evaluate('#import "Sub/Foo.h"', ctx=PUBLIC, state=ConditionalState.IN_CONDITIONAL_ELSE)
    assert diag.message == MSG_ELSE_BRANCH


def test_other_target_form_passes(evaluate):
    assert evaluate("#include HEADER_MACRO") is None


def test_malformed_directive_reported(evaluate):
    diag = evaluate("#import")
    assert diag.message.startswith("Malformed import directive")
    assert '"#import"' in diag.message


def test_module_import_diagnostic():
    diag = module_import_diagnostic(PRIVATE, 4)
    assert diag.render() == f"Import Error: {PRIVATE.path}:4 {MSG_MODULE_IMPORT}"
