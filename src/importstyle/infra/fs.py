from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' used by the repository walker and the file scanner.
All operations are read-only; failures surface as OSError (or
UnicodeDecodeError for text reads) and are converted by the caller.
"""

import os
from typing import Iterator, List, Tuple

# -----------------------------------------------------------------------------
# READ API
# -----------------------------------------------------------------------------

def read_text_file(file_path: str) -> str:
    """
    Read a whole file as strict UTF-8 text.

    Unlike a lenient reader, undecodable content is an error here: a header
    that is not valid UTF-8 cannot be checked reliably.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        str: Decoded file content.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    with open(file_path, "r", encoding="utf-8", errors="strict", newline="") as f:
        return f.read()


def path_exists(path: str) -> bool:
    """Return True if a file or directory exists at `path`."""
    return os.path.exists(path)


# -----------------------------------------------------------------------------
# DIRECTORY TRAVERSAL API
# -----------------------------------------------------------------------------

def list_top_level_dirs(root: str) -> List[str]:
    """
    List the visible immediate subdirectories of `root`, sorted by name.

    Args:
        root: Directory to list.

    Returns:
        List[str]: Absolute paths of child directories.

    Raises:
        OSError: If `root` cannot be listed.
    """
    out: List[str] = []
    for name in sorted(os.listdir(root)):
        if name.startswith("."):
            continue
        full = os.path.join(root, name)
        if os.path.isdir(full) and not os.path.islink(full):
            out.append(full)
    return out


def walk_regular_files(top: str) -> Iterator[Tuple[str, str]]:
    """
    Recursively yield regular files below `top` in deterministic order.

    Hidden directories are descended like any other; the caller decides
    which file names to accept. Symbolic links are never followed or yielded.

    Args:
        top: Directory to walk.

    Yields:
        Tuple[str, str]: (absolute path, path relative to `top`).
    """
    for root, dirs, files in os.walk(top):
        dirs.sort()
        for file_name in sorted(files):
            full = os.path.join(root, file_name)
            if os.path.islink(full) or not os.path.isfile(full):
                continue
            yield full, os.path.relpath(full, top)


def find_upwards(start_dir: str, marker: str) -> str:
    """
    Search `start_dir` and its ancestors for a directory containing `marker`.

    Args:
        start_dir: Directory where the search begins.
        marker: Relative path that must exist under the candidate.

    Returns:
        str: The first matching directory, or an empty string if the
             filesystem root was reached without a match.
    """
    candidate = os.path.abspath(start_dir)
    while True:
        if os.path.exists(os.path.join(candidate, marker)):
            return candidate
        parent = os.path.dirname(candidate)
        if parent == candidate:
            return ""
        candidate = parent
