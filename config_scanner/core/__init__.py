"""
Core Layer

Source tree loading and the configuration scanner.
"""

from config_scanner.core.project import (
    SourceFile,
    ProjectLoadError,
    RootNotFoundError,
    SourceReadError,
    load_project,
    parse_source,
)
from config_scanner.core.scanner import (
    ScanConfig,
    UsageReport,
    ServiceUsageScanner,
    scan_directory,
    uses_service,
)

__all__ = [
    # project
    "SourceFile",
    "ProjectLoadError",
    "RootNotFoundError",
    "SourceReadError",
    "load_project",
    "parse_source",
    # scanner
    "ScanConfig",
    "UsageReport",
    "ServiceUsageScanner",
    "scan_directory",
    "uses_service",
]
