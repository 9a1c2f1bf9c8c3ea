"""Tests for the file stores."""

from pathlib import Path

import pytest

from cluster_manifests.asset import (
    DiskFileFetcher,
    File,
    InMemoryFileFetcher,
    write_files,
)
from cluster_manifests.exceptions import FileFetchError


@pytest.fixture(name="asset_dir")
def asset_dir_fixture(tmp_path: Path) -> Path:
    """An asset directory with a few manifests."""
    write_files(
        tmp_path,
        [
            File(filename="manifests/b.yaml", data=b"b: 1\n"),
            File(filename="manifests/a.yaml", data=b"a: 1\n"),
            File(filename="manifests/c.yml", data=b"c: 1\n"),
            File(filename="manifests/D.YAML", data=b"d: 1\n"),
            File(filename="manifests/nested/e.yaml", data=b"e: 1\n"),
            File(filename="install-config.yaml", data=b"x: 1\n"),
        ],
    )
    return tmp_path


def test_write_files(asset_dir: Path) -> None:
    """Test files are written relative to the directory."""
    assert (asset_dir / "manifests" / "a.yaml").read_bytes() == b"a: 1\n"
    assert (asset_dir / "install-config.yaml").exists()


def test_fetch_by_name(asset_dir: Path) -> None:
    """Test fetching a single file."""
    fetcher = DiskFileFetcher(asset_dir)
    assert fetcher.fetch_by_name("install-config.yaml") == File(
        filename="install-config.yaml", data=b"x: 1\n"
    )
    assert fetcher.fetch_by_name("missing.yaml") is None
    assert fetcher.fetch_by_name("manifests") is None


def test_fetch_by_pattern(asset_dir: Path) -> None:
    """Test matching files in a directory, sorted by name."""
    fetcher = DiskFileFetcher(asset_dir)
    files = fetcher.fetch_by_pattern("manifests/*.yaml")
    assert [f.filename for f in files] == ["manifests/a.yaml", "manifests/b.yaml"]
    assert files[0].data == b"a: 1\n"


def test_fetch_by_pattern_case_sensitive(asset_dir: Path) -> None:
    """Test the match is case sensitive on every platform."""
    fetcher = DiskFileFetcher(asset_dir)
    files = fetcher.fetch_by_pattern("manifests/*.YAML")
    assert [f.filename for f in files] == ["manifests/D.YAML"]


def test_fetch_by_pattern_no_match(asset_dir: Path) -> None:
    """Test an empty result when nothing matches."""
    fetcher = DiskFileFetcher(asset_dir)
    assert fetcher.fetch_by_pattern("manifests/*.json") == []


def test_fetch_by_pattern_missing_directory(tmp_path: Path) -> None:
    """Test a missing directory is not an error."""
    fetcher = DiskFileFetcher(tmp_path / "does-not-exist")
    assert fetcher.fetch_by_pattern("manifests/*.yaml") == []


def test_fetch_by_pattern_io_error(tmp_path: Path) -> None:
    """Test a directory that can't be listed is reported."""
    (tmp_path / "manifests").write_text("not a directory")
    fetcher = DiskFileFetcher(tmp_path)
    with pytest.raises(FileFetchError, match="manifests/\\*.yaml"):
        fetcher.fetch_by_pattern("manifests/*.yaml")


def test_in_memory_fetcher() -> None:
    """Test the in-memory store behaves like the disk store."""
    fetcher = InMemoryFileFetcher(
        [
            File(filename="manifests/b.yaml", data=b"b"),
            File(filename="manifests/a.yaml", data=b"a"),
            File(filename="manifests/nested/c.yaml", data=b"c"),
            File(filename="other/d.yaml", data=b"d"),
        ]
    )
    assert [f.filename for f in fetcher.fetch_by_pattern("manifests/*.yaml")] == [
        "manifests/a.yaml",
        "manifests/b.yaml",
    ]
    assert fetcher.fetch_by_pattern("manifests/*.YAML") == []
    assert fetcher.fetch_by_name("other/d.yaml") == File(
        filename="other/d.yaml", data=b"d"
    )
    assert fetcher.fetch_by_name("other/e.yaml") is None
