import textwrap
from pathlib import Path

import pytest

from config_scanner.core.scanner.models import UsageReport
from config_scanner.core.scanner.ts_ast import CallSiteDetector, EnvReadDetector

from tests.helpers import parse_ts


@pytest.fixture
def report() -> UsageReport:
    return UsageReport()


@pytest.fixture
def call_keys(report):
    """Run the call-site detector over a snippet and return the report."""
    def _scan(code: str, name: str = "sample.ts") -> UsageReport:
        CallSiteDetector(report).scan_file(parse_ts(code, name))
        return report
    return _scan


@pytest.fixture
def env_keys(report):
    """Run the environment-read detector over a snippet and return the report."""
    def _scan(code: str, name: str = "sample.ts") -> UsageReport:
        EnvReadDetector(report).scan_for_process_env(parse_ts(code, name))
        return report
    return _scan


@pytest.fixture
def write_tree(tmp_path: Path):
    """Write {relative path: source} into tmp_path and return the root."""
    def _write(files: dict[str, str]) -> Path:
        for rel, code in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(code), encoding="utf-8")
        return tmp_path
    return _write
