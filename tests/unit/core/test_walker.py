from __future__ import annotations

"""
Unit tests for the Repository Walker.

Verifies:
1. Upward root discovery and its failure mode.
2. Enumeration rules (extensions, hidden entries, skip patterns, root files).
3. Exit status of a complete run.
"""

import io
import os
from dataclasses import replace
from pathlib import Path

import pytest

from importstyle.core.sink import DiagnosticSink
from importstyle.core.walker import (
    check_repository,
    find_repo_root,
    iter_source_files,
    run_check,
)
from importstyle.domain.models import RepoListingError, RepoRootNotFoundError


def test_find_repo_root_from_nested_dir(repo, config):
    nested = repo / "Lib" / "Sources" / "Deep"
    nested.mkdir(parents=True)
    assert find_repo_root(str(nested), config) == str(repo)


def test_find_repo_root_defaults_to_cwd(repo, config, monkeypatch):
    monkeypatch.chdir(repo)
    assert find_repo_root(None, config) == str(repo)


def test_find_repo_root_missing_marker_is_fatal(tmp_path, config):
    lonely = tmp_path / "lonely"
    lonely.mkdir()
    marker_config = replace(config, root_marker="scripts/__no_such_marker__.py")

    with pytest.raises(RepoRootNotFoundError) as exc_info:
        find_repo_root(str(lonely), marker_config)

    assert "__no_such_marker__" in str(exc_info.value)


def test_iter_source_files_enumeration_rules(repo, write_file, config):
    write_file("Lib/Sources/A.h", "")
    write_file("Lib/Sources/B.m", "")
    write_file("Lib/Sources/C.swift", "")
    write_file("Lib/Sources/.Hidden.h", "")
    write_file("Lib/.build/D.h", "")
    write_file("Lib/Pods/E.h", "")
    write_file("Other/Sources/Public/Other/F.h", "")
    write_file("RootLevel.h", "")
    write_file(".hiddentop/G.h", "")

    contexts = list(iter_source_files(str(repo), config))
    found = {os.path.relpath(c.path, repo): c for c in contexts}

    assert sorted(found) == [
        os.path.join("Lib", ".build", "D.h"),
        os.path.join("Lib", "Sources", "A.h"),
        os.path.join("Lib", "Sources", "B.m"),
        os.path.join("Other", "Sources", "Public", "Other", "F.h"),
    ]
    assert found[os.path.join("Other", "Sources", "Public", "Other", "F.h")].is_public is True
    assert found[os.path.join("Lib", "Sources", "A.h")].is_public is False


def test_nested_hidden_directory_is_scanned(repo, write_file, config):
    """Only hidden file names are skipped; hidden subdirectories are descended."""
    src = write_file("Lib/Sources/.private/X.m", '#import "NotThere.h"\n')
    sink = DiagnosticSink(stream=io.StringIO())

    contexts = list(iter_source_files(str(repo), config))
    assert [c.path for c in contexts] == [str(src)]

    assert run_check(config, sink, start_dir=str(repo)) == 1
    assert [(d.path, d.line_number) for d in sink.diagnostics] == [(str(src), 1)]
    assert sink.diagnostics[0].message == "Import NotThere.h does not exist."


def test_public_dir_directly_under_top_level_is_not_public(repo, write_file, config):
    """
    Public detection looks at the path below the top-level directory, so
    'Lib/Public/Lib.h' (relative 'Public/Lib.h') is checked as a private file.
    """
    src = write_file("Lib/Public/Lib.h", '#import "Sub/Foo.h"\n')
    nested = write_file("Lib/Sources/Public/Lib/Nested.h", '#import "Sub/Foo.h"\n')
    sink = DiagnosticSink(stream=io.StringIO())

    contexts = {c.path: c for c in iter_source_files(str(repo), config)}
    assert contexts[str(src)].rel_path == os.path.join("Public", "Lib.h")
    assert contexts[str(src)].is_public is False
    assert contexts[str(nested)].is_public is True

    assert run_check(config, sink, start_dir=str(repo)) == 1
    messages = {d.path: d.message for d in sink.diagnostics}
    assert messages == {
        str(src): "Import Sub/Foo.h does not exist.",
        str(nested): 'Public header import should not include "/"',
    }


def test_iter_source_files_ignores_symlinks(repo, write_file, config):
    target = write_file("Lib/Sources/A.h", "")
    link = repo / "Lib" / "Sources" / "Link.h"
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")

    names = [os.path.basename(c.path) for c in iter_source_files(str(repo), config)]
    assert names == ["A.h"]


def test_listing_failure_is_fatal(tmp_path, config):
    sink = DiagnosticSink(stream=io.StringIO())
    missing = str(tmp_path / "does-not-exist")

    with pytest.raises(RepoListingError):
        check_repository(missing, config, sink)

    assert sink.messages == [f"Failed to get repo contents {missing}"]
    assert sink.exit_code == 1


def test_run_check_clean_repo(repo, write_file, config):
    write_file("Lib/Sources/A.h", "#import <Foundation/Foundation.h>\n")
    sink = DiagnosticSink(stream=io.StringIO())

    assert run_check(config, sink, start_dir=str(repo)) == 0
    assert sink.files_checked == 1


def test_run_check_with_errors(repo, write_file, config):
    write_file("Lib/Sources/A.m", '#import "Lib/Sources/Nope.h"\n')
    write_file("Lib/Pods/Ignored.m", '#import "Whatever.h"\n')
    sink = DiagnosticSink(stream=io.StringIO())

    assert run_check(config, sink, start_dir=str(repo / "Lib")) == 1
    assert len(sink.diagnostics) == 1
    assert sink.diagnostics[0].path == str(repo / "Lib" / "Sources" / "A.m")


def test_run_check_explicit_root_skips_search(tmp_path, config):
    root = tmp_path / "unmarked"
    (root / "Lib").mkdir(parents=True)
    (root / "Lib" / "A.m").write_text('#import "Lib/A.m"\n', encoding="utf-8")
    sink = DiagnosticSink(stream=io.StringIO())

    assert run_check(replace(config, repo_root=str(root)), sink) == 0


def test_run_check_root_not_found(tmp_path, config):
    sink = DiagnosticSink(stream=io.StringIO())
    marker_config = replace(config, root_marker="scripts/__no_such_marker__.py")

    assert run_check(marker_config, sink, start_dir=str(tmp_path)) == 1
    assert sink.messages[0].startswith("Could not locate the repository root")
