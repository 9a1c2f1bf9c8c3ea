"""File store used to persist assets and load them back.

The store is the only I/O boundary of the asset graph. Patterns are relative
to the store root and matched case-sensitively against the final path
component only, e.g. `manifests/*.yaml`.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from fnmatch import fnmatchcase
import logging
from pathlib import Path, PurePosixPath

from cluster_manifests.exceptions import FileFetchError

from .asset import File

__all__ = [
    "FileFetcher",
    "DiskFileFetcher",
    "InMemoryFileFetcher",
    "write_files",
]

_LOGGER = logging.getLogger(__name__)


def _split_pattern(pattern: str) -> tuple[PurePosixPath, str]:
    path = PurePosixPath(pattern)
    return path.parent, path.name


class FileFetcher(ABC):
    """Abstract interface for fetching files from a previous run."""

    @abstractmethod
    def fetch_by_name(self, name: str) -> File | None:
        """Return the file with the given relative name, or None if absent."""

    @abstractmethod
    def fetch_by_pattern(self, pattern: str) -> list[File]:
        """Return all files matching the glob pattern, sorted by filename.

        An empty list is returned when nothing matches.

        Raises:
            FileFetchError: If the directory or a matching file can't be read.
        """


class DiskFileFetcher(FileFetcher):
    """Fetches files from a directory on disk."""

    def __init__(self, directory: Path) -> None:
        """Initialize DiskFileFetcher."""
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        """The root directory of the store."""
        return self._directory

    def fetch_by_name(self, name: str) -> File | None:
        """Return the file with the given relative name, or None if absent."""
        path = self._directory / name
        if not path.is_file():
            return None
        try:
            data = path.read_bytes()
        except OSError as err:
            raise FileFetchError(name, str(err)) from err
        return File(filename=name, data=data)

    def fetch_by_pattern(self, pattern: str) -> list[File]:
        """Return all files matching the glob pattern, sorted by filename."""
        parent, name_pattern = _split_pattern(pattern)
        directory = self._directory / parent
        if not directory.exists():
            _LOGGER.debug("Directory %s does not exist", directory)
            return []
        result = []
        try:
            entries = sorted(directory.iterdir())
            for entry in entries:
                if not fnmatchcase(entry.name, name_pattern) or not entry.is_file():
                    continue
                filename = str(parent / entry.name)
                result.append(File(filename=filename, data=entry.read_bytes()))
        except OSError as err:
            raise FileFetchError(pattern, str(err)) from err
        _LOGGER.debug("Fetched %d files matching %s", len(result), pattern)
        return result


class InMemoryFileFetcher(FileFetcher):
    """Fetches files from an in-memory set, e.g. the output of a previous run."""

    def __init__(self, files: Iterable[File] = ()) -> None:
        """Initialize InMemoryFileFetcher."""
        self._files: dict[str, File] = {f.filename: f for f in files}

    def fetch_by_name(self, name: str) -> File | None:
        """Return the file with the given relative name, or None if absent."""
        return self._files.get(name)

    def fetch_by_pattern(self, pattern: str) -> list[File]:
        """Return all files matching the glob pattern, sorted by filename."""
        parent, name_pattern = _split_pattern(pattern)
        result = []
        for filename in sorted(self._files):
            path = PurePosixPath(filename)
            if path.parent == parent and fnmatchcase(path.name, name_pattern):
                result.append(self._files[filename])
        return result


def write_files(directory: Path, files: Iterable[File]) -> None:
    """Write the files to disk relative to the directory."""
    for file in files:
        path = Path(directory) / file.filename
        _LOGGER.debug("Writing %s", path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(file.data)
