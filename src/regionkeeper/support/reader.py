"""Filesystem reader capability and its local implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from regionkeeper.errors import UnreadableFileError
from regionkeeper.support.filters import PathFilter


@runtime_checkable
class FileSystemReader(Protocol):
    def exists(self, path: str) -> bool:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def list_files(self, path: str, path_filter: PathFilter | None = None) -> list[str]:
        ...

    def read_file(self, path: str) -> str:
        ...

    def canonicalize(self, path: str) -> str:
        ...


class LocalFileSystemReader:
    """Read from the local disk.

    Files are decoded as UTF-8 without newline translation so ``\\r\\n``
    line endings survive a parse/merge round trip. Undecodable (binary)
    files raise ``UnreadableFileError``.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        return Path(path).is_dir()

    def list_files(self, path: str, path_filter: PathFilter | None = None) -> list[str]:
        """All files below ``path``, recursively, sorted."""
        files = []
        for p in sorted(Path(path).rglob("*")):
            if not p.is_file():
                continue
            if path_filter is not None and not path_filter.accept(str(p)):
                continue
            files.append(str(p))
        return files

    def read_file(self, path: str) -> str:
        try:
            with open(path, encoding=self.encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise UnreadableFileError(path, str(e)) from None

    def canonicalize(self, path: str) -> str:
        return str(Path(path).expanduser().resolve())


def write_file(path: Path | str, data: bytes) -> None:
    """Write ``data`` as-is, creating parent dirs."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
