"""Path filter tests."""

from pathlib import Path

from config_scanner.filters import DEFAULT_EXCLUDE_PATTERNS, PathspecFilter


def test_default_patterns(tmp_path: Path):
    path_filter = PathspecFilter(tmp_path)
    assert path_filter.get_patterns() == DEFAULT_EXCLUDE_PATTERNS
    assert path_filter.should_ignore(tmp_path / "node_modules" / "x" / "index.ts")
    assert path_filter.should_ignore(tmp_path / "web" / ".next" / "page.tsx")
    assert path_filter.should_ignore(tmp_path / "src" / "legacy.js")
    assert not path_filter.should_ignore(tmp_path / "src" / "main.ts")


def test_relative_paths(tmp_path: Path):
    path_filter = PathspecFilter(tmp_path)
    assert path_filter.should_ignore(Path("dist/main.ts"))
    assert not path_filter.should_ignore(Path("src/distance.ts"))


def test_paths_outside_root_are_kept(tmp_path: Path):
    path_filter = PathspecFilter(tmp_path / "project")
    assert not path_filter.should_ignore(tmp_path / "elsewhere" / "dist" / "a.ts")


def test_custom_patterns(tmp_path: Path):
    path_filter = PathspecFilter(tmp_path, patterns=["generated/"])
    kept = path_filter.filter_paths([
        tmp_path / "generated" / "api.ts",
        tmp_path / "node_modules" / "dep.ts",
    ])
    assert kept == [tmp_path / "node_modules" / "dep.ts"]


def test_relative_root_inside_excluded_folder_name(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path_filter = PathspecFilter(Path("build/api"))
    assert not path_filter.should_ignore(Path("build/api/src/main.ts"))
    assert path_filter.should_ignore(Path("build/api/dist/main.ts"))
