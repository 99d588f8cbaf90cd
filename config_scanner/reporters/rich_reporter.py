"""
Rich terminal reporter

Prints the scanned root and the sorted list of configuration keys.
"""

from rich.console import Console
from rich.text import Text

from config_scanner.core.scanner.models import UsageReport


class RichReporter:
    """Rich terminal reporter"""

    def __init__(self, console: Console | None = None, clear: bool = True):
        self.console = console or Console()
        self.clear = clear

    def report(self, usage: UsageReport, target: str) -> None:
        if self.clear:
            self.console.clear()

        header = Text("🔎 Searching for every configuration used in the project: ")
        header.append(target, style="yellow")
        self.console.print(header)

        self.console.print()
        self.console.print("📌 Configurations found:", style="bold")
        keys = usage.sorted()
        if not keys:
            self.console.print("  []", style="dim", markup=False)
            return
        for key in keys:
            self.console.print(f"  - {key}", highlight=False, markup=False)
        self.console.print()
        self.console.print(f"[dim]{len(keys)} configuration keys[/dim]")
