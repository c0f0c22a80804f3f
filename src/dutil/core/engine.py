"""Scan-and-format orchestration across target paths."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from dutil.config import ReportConfig
from dutil.core.formatter import format_entries
from dutil.core.printer import render_lines
from dutil.core.scanner import scan
from dutil.models.entry import DirectoryEntry

log = logging.getLogger(__name__)


class ReportEngine:
    """Runs the scanner and formatter for each requested path."""

    def __init__(self, config: ReportConfig) -> None:
        self.config = config

    def run(self, paths: Sequence[str] = ()) -> list[DirectoryEntry]:
        """Scan and format every path, concatenating the results in order.

        With no paths the current directory is scanned and labelled
        relative to ``.``.  Each path is scanned and formatted on its own,
        so summary and sorting apply per path.

        Raises:
            ScanError: If any path cannot be scanned.  Nothing is returned
                for the other paths in that case.
        """
        explicit = bool(paths)
        targets = list(paths) if explicit else [os.curdir]

        report: list[DirectoryEntry] = []
        for target in targets:
            entries = scan(target, self.config.cluster_size, explicit=explicit)
            log.info(
                "Scanned %s: %d entries, %d clusters of %d bytes",
                target,
                len(entries),
                entries[-1].clusters,
                self.config.cluster_size,
            )
            report.extend(format_entries(entries, self.config))
        return report

    def render(self, entries: list[DirectoryEntry]) -> list[str]:
        """Render report entries as aligned output lines."""
        return render_lines(entries, self.config.size_mode)
