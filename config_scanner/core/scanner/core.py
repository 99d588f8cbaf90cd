"""
Scan orchestration

Runs the import filter and both detectors over a loaded project and
collects everything into one usage report.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from config_scanner.core.project import SourceFile, load_project
from config_scanner.core.scanner.models import ScanConfig, UsageReport
from config_scanner.core.scanner.ts_ast import (
    CallSiteDetector,
    EnvReadDetector,
    uses_service,
)

logger = logging.getLogger(__name__)

# Called with (file path, in scope) for every file visited
ProgressCallback = Callable[[Path, bool], None]


class ServiceUsageScanner:
    """Scans configuration usage across the files of one project."""

    def __init__(
        self,
        files: list[SourceFile],
        config: Optional[ScanConfig] = None,
        report: Optional[UsageReport] = None,
    ):
        self.files = files
        self.config = config or ScanConfig()
        self.report = report if report is not None else UsageReport()
        self._call_sites = CallSiteDetector(self.report, self.config)
        self._env_reads = EnvReadDetector(self.report, self.config)

    def scan_project(self, on_file: Optional[ProgressCallback] = None) -> UsageReport:
        """
        Scan every in-scope file once

        Files whose imports mention no recognized service type are skipped
        by both detectors.
        """
        scanned = 0
        for source_file in self.files:
            in_scope = uses_service(source_file, self.config)
            if on_file:
                on_file(source_file.path, in_scope)
            if not in_scope:
                logger.debug(f"Skipping {source_file.path}: no service import")
                continue
            self.scan_file(source_file)
            scanned += 1

        logger.info(
            f"Scanned {scanned} of {len(self.files)} files, "
            f"found {len(self.report)} configuration keys"
        )
        return self.report

    def scan_file(self, source_file: SourceFile) -> None:
        self._call_sites.scan_file(source_file)
        self._env_reads.scan_for_process_env(source_file)


def scan_directory(
    root: Path,
    config: Optional[ScanConfig] = None,
    on_file: Optional[ProgressCallback] = None,
) -> UsageReport:
    """Load the project under `root` and scan it."""
    files = load_project(root)
    return ServiceUsageScanner(files, config).scan_project(on_file=on_file)
