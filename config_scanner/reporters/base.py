"""
Reporter interface
"""

from typing import Protocol

from config_scanner.core.scanner.models import UsageReport


class Reporter(Protocol):
    """Renders a finished usage report; called once per run."""

    def report(self, usage: UsageReport, target: str) -> None:
        ...
