import textwrap
from pathlib import Path

from config_scanner.core.project import SourceFile, parse_source


def parse_ts(code: str, name: str = "sample.ts") -> SourceFile:
    return parse_source(Path(name), textwrap.dedent(code).encode("utf-8"))
