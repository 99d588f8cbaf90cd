"""File filtering for the source tree provider."""

from config_scanner.filters.pathspec_filter import (
    PathspecFilter,
    DEFAULT_EXCLUDE_PATTERNS,
    SOURCE_EXTENSIONS,
)

__all__ = [
    "PathspecFilter",
    "DEFAULT_EXCLUDE_PATTERNS",
    "SOURCE_EXTENSIONS",
]
