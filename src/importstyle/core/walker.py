from __future__ import annotations

"""
Repository Walker.

Locates the repository root, enumerates source files below its top-level
directories and feeds each eligible file to the scanner, merging the
results into a DiagnosticSink.
"""

import logging
import os
from typing import Iterator, Optional

from importstyle.core.filters import build_file_context, is_skipped_path, is_source_file
from importstyle.core.scanner import scan_file
from importstyle.core.sink import DiagnosticSink
from importstyle.domain.config import CheckerConfig
from importstyle.domain.models import FileContext, RepoListingError, RepoRootNotFoundError
from importstyle.infra.fs import find_upwards, list_top_level_dirs, walk_regular_files

logger = logging.getLogger(__name__)


# ==============================================================================
# ROOT DISCOVERY
# ==============================================================================

def find_repo_root(start_dir: Optional[str], config: CheckerConfig) -> str:
    """
    Find the repository root by searching upwards for the root marker.

    Args:
        start_dir: Directory to start from; defaults to the working directory.
        config: Active configuration (provides the marker path).

    Returns:
        str: Absolute path of the repository root.

    Raises:
        RepoRootNotFoundError: If the filesystem root is reached first.
    """
    start = os.path.abspath(start_dir or os.getcwd())
    root = find_upwards(start, config.root_marker)
    if not root:
        raise RepoRootNotFoundError(start, config.root_marker)
    logger.debug(f"Repository root resolved to {root}")
    return root


# ==============================================================================
# ENUMERATION
# ==============================================================================

def iter_source_files(repo_root: str, config: CheckerConfig) -> Iterator[FileContext]:
    """
    Yield a FileContext for every file that should be scanned.

    Only files below top-level directories are considered; files directly
    in the root are ignored.

    Raises:
        RepoListingError: If the root directory cannot be listed.
    """
    try:
        top_dirs = list_top_level_dirs(repo_root)
    except OSError as e:
        raise RepoListingError(repo_root, str(e)) from e

    for top in top_dirs:
        for full_path, rel_path in walk_regular_files(top):
            if not is_source_file(os.path.basename(full_path), config):
                continue
            if is_skipped_path(full_path, config):
                logger.debug(f"Skipping excluded path {full_path}")
                continue
            yield build_file_context(full_path, rel_path, config)


# ==============================================================================
# RUN ORCHESTRATION
# ==============================================================================

def check_repository(repo_root: str, config: CheckerConfig, sink: DiagnosticSink) -> DiagnosticSink:
    """
    Scan every eligible file under `repo_root`, recording results in `sink`.

    A root that cannot be listed is logged to the sink and re-raised; the
    caller terminates the run.

    Args:
        repo_root: Absolute repository root.
        config: Active rule tables.
        sink: Run context receiving diagnostics.

    Returns:
        DiagnosticSink: The same sink, for chaining.
    """
    try:
        for ctx in iter_source_files(repo_root, config):
            sink.merge(scan_file(ctx, repo_root, config))
    except RepoListingError as e:
        sink.log(str(e))
        raise

    logger.info(
        f"Checked {sink.files_checked} files under {repo_root}: "
        f"{len(sink.diagnostics)} import errors"
    )
    return sink


def run_check(config: CheckerConfig, sink: DiagnosticSink, start_dir: Optional[str] = None) -> int:
    """
    Resolve the root, check the repository and return the exit status.

    Fatal conditions are recorded in the sink and mapped to status 1.
    """
    try:
        repo_root = config.repo_root or find_repo_root(start_dir, config)
    except RepoRootNotFoundError as e:
        sink.log(str(e))
        return 1

    try:
        check_repository(os.path.abspath(repo_root), config, sink)
    except RepoListingError as e:
        logger.error(f"Aborting: {e.reason}")
        return 1

    return sink.exit_code
