from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration resolution and the checker run. Diagnostics are printed to
stdout by the sink; log records go to stderr.
"""

import sys
from typing import List, Optional

from importstyle.core.sink import DiagnosticSink
from importstyle.core.walker import run_check
from importstyle.domain.config import apply_overrides, get_default_config
from importstyle.infra.logging import LoggingConfig, configure_logging, get_logger
from importstyle.interface.cli import args as cli_args

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the checker.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 if no import errors were found, 1 otherwise.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    config = apply_overrides(get_default_config(), **cli_args.args_to_overrides(args))
    logger.debug(f"Configuration resolved: root={config.repo_root or '<search>'}")

    sink = DiagnosticSink()
    try:
        return run_check(config, sink)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
