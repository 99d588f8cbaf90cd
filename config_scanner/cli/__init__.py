"""
CLI Layer - command-line entry point
"""

from config_scanner.cli.app import app, scan

__all__ = [
    "app",
    "scan",
]
