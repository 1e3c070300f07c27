from __future__ import annotations

"""
Diagnostic Sink.

The run context of a checker invocation: it prints every diagnostic and
standalone error line to stdout, keeps them for inspection, and owns the
error flag that decides the exit status. Create one per run.
"""

import sys
from typing import List, Optional, TextIO

from importstyle.domain.models import Diagnostic, FileReport


class DiagnosticSink:
    """Collects output lines and tracks whether any error was recorded."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self.diagnostics: List[Diagnostic] = []
        self.messages: List[str] = []
        self.files_checked = 0
        self.found_error = False

    def log(self, message: str) -> None:
        """Print a standalone error line and flag the run as failed."""
        print(message, file=self._stream or sys.stdout)
        self.messages.append(message)
        self.found_error = True

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        self.log(diagnostic.render())

    def merge(self, file_report: FileReport) -> None:
        """Record a scanned file's outcome, preserving its line order."""
        self.files_checked += 1
        if file_report.error is not None:
            self.log(file_report.error)
        for diagnostic in file_report.diagnostics:
            self.report(diagnostic)

    @property
    def exit_code(self) -> int:
        return 1 if self.found_error else 0
