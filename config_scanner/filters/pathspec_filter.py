"""Pathspec-based file filtering.

Excluded directories and file patterns are expressed as gitwildmatch
patterns, so a bare `node_modules/` also excludes nested copies.
"""

from pathlib import Path

import pathspec


# Source files handed to the scanner
SOURCE_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx")

# Build output, dependency caches and tooling metadata
DEFAULT_EXCLUDE_PATTERNS: list[str] = [
    "node_modules/",
    "dist/",
    "build/",
    "coverage/",
    ".next/",
    ".nuxt/",
    ".vscode/",
    ".git/",
    "*.js",
    "*.jsx",
]


class PathspecFilter:
    """File filter over a fixed list of exclude patterns."""

    def __init__(self, root: Path, patterns: list[str] | None = None):
        """
        Initialize the filter.

        Args:
            root: Scan root; paths are matched relative to it
            patterns: Exclude patterns (defaults to DEFAULT_EXCLUDE_PATTERNS)
        """
        self.root = root
        self._patterns = list(DEFAULT_EXCLUDE_PATTERNS if patterns is None else patterns)
        self._spec = pathspec.PathSpec.from_lines("gitwildmatch", self._patterns)

    def should_ignore(self, path: Path) -> bool:
        """Check if a file falls under an excluded pattern."""
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            if path.is_absolute():
                return False
            # Already relative to the root
            relative = path

        return self._spec.match_file(relative.as_posix())

    def filter_paths(self, paths: list[Path]) -> list[Path]:
        """Filter paths, returning those that should NOT be ignored."""
        return [p for p in paths if not self.should_ignore(p)]

    def get_patterns(self) -> list[str]:
        """Get the exclude patterns."""
        return list(self._patterns)
