"""
Scanner module - finds configuration keys in TypeScript sources

- patterns.py: detection catalogs
- models.py: scan configuration and usage report
- ts_ast.py: tree-sitter helpers, import filter and detectors
- core.py: scan orchestration
"""

from config_scanner.core.scanner.models import (
    ScanConfig,
    UsageReport,
    env_key,
)
from config_scanner.core.scanner.patterns import (
    SERVICE_TYPES,
    ACCESSOR_METHODS,
    EXCLUDED_CALLEE_SUBSTRINGS,
    ENV_VAR_ROOT,
)
from config_scanner.core.scanner.ts_ast import (
    CallSiteDetector,
    EnvReadDetector,
    uses_service,
)
from config_scanner.core.scanner.core import (
    ServiceUsageScanner,
    scan_directory,
)

__all__ = [
    # Models
    "ScanConfig",
    "UsageReport",
    "env_key",
    # Catalogs
    "SERVICE_TYPES",
    "ACCESSOR_METHODS",
    "EXCLUDED_CALLEE_SUBSTRINGS",
    "ENV_VAR_ROOT",
    # Detectors
    "CallSiteDetector",
    "EnvReadDetector",
    "uses_service",
    # Core
    "ServiceUsageScanner",
    "scan_directory",
]
