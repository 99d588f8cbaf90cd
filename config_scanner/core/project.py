"""
Source tree provider

Discovers TypeScript sources under a root directory and parses them into
tree-sitter syntax trees before any scanning starts.
"""

import logging
from dataclasses import dataclass
from functools import cache
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Parser, Tree

from config_scanner.filters.pathspec_filter import PathspecFilter, SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


class ProjectLoadError(Exception):
    """Base error for project loading."""
    pass


class RootNotFoundError(ProjectLoadError):
    """Scan root is missing or not a directory."""
    pass


class SourceReadError(ProjectLoadError):
    """A source file could not be read or decoded."""
    pass


@dataclass
class SourceFile:
    """
    A parsed source file

    Attributes:
        path: file path on disk
        source: raw UTF-8 bytes the tree was parsed from
        tree: tree-sitter syntax tree
        language: grammar used (`typescript` or `tsx`)
    """
    path: Path
    source: bytes
    tree: Tree
    language: str

    @property
    def has_syntax_errors(self) -> bool:
        return self.tree.root_node.has_error


@cache
def _load_language(name: str) -> Language:
    if name == "tsx":
        return Language(tree_sitter_typescript.language_tsx())
    return Language(tree_sitter_typescript.language_typescript())


def language_for_path(path: Path) -> str:
    """Grammar name for a file; JSX syntax needs the TSX grammar."""
    return "tsx" if path.suffix.lower() == ".tsx" else "typescript"


def parse_source(path: Path, content: bytes) -> SourceFile:
    """Parse `content` with the grammar matching `path`'s extension."""
    language = language_for_path(path)
    parser = Parser(_load_language(language))
    source_file = SourceFile(
        path=path,
        source=content,
        tree=parser.parse(content),
        language=language,
    )
    if source_file.has_syntax_errors:
        logger.warning(f"Syntax errors in {path}, scanning the recovered tree")
    return source_file


def discover_source_files(root: Path, path_filter: PathspecFilter | None = None) -> list[Path]:
    """All source files under `root`, excluded paths removed, in sorted order."""
    if not root.is_dir():
        raise RootNotFoundError(f"Path does not exist or is not a directory: {root}")

    if path_filter is None:
        path_filter = PathspecFilter(root)

    candidates = [
        path for path in root.rglob("*")
        if path.suffix.lower() in SOURCE_EXTENSIONS and path.is_file()
    ]
    return sorted(path_filter.filter_paths(candidates))


def read_source_file(path: Path) -> SourceFile:
    """Read and parse one file; unreadable or non-UTF-8 files raise SourceReadError."""
    try:
        content = path.read_bytes()
        content.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Failed to read {path}: {e}") from e
    return parse_source(path, content)


def load_project(root: Path, path_filter: PathspecFilter | None = None) -> list[SourceFile]:
    """
    Load every source file under `root`

    Any unreadable file aborts the load; syntax errors only produce a warning.
    """
    paths = discover_source_files(root, path_filter)
    logger.debug(f"Discovered {len(paths)} source files under {root}")
    return [read_source_file(path) for path in paths]
