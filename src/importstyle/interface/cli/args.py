from __future__ import annotations

"""
CLI Argument Definition and Mapping.

The checker is meant to run with no arguments from anywhere inside the
repository. The optional flags only affect root resolution and logging.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the importstyle CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="importstyle",
        description=(
            "Verify #import / #include / @import style in Objective-C and C "
            "sources across the repository."
        ),
    )

    p.add_argument(
        "--root",
        dest="repo_root",
        default=None,
        help="Repository root to check. Defaults to the nearest ancestor "
             "containing scripts/check_imports.py.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into CheckerConfig overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides accepted by `apply_overrides`.
    """
    overrides: Dict[str, Any] = {}
    if args.repo_root:
        overrides["repo_root"] = args.repo_root
    return overrides
