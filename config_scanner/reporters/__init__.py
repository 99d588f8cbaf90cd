"""
Reporters Layer
"""

from config_scanner.reporters.base import Reporter
from config_scanner.reporters.rich_reporter import RichReporter

__all__ = [
    "Reporter",
    "RichReporter",
]
