"""Path filters — choose which files a parser (or a read pass) applies to."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import PurePath
from typing import Protocol, runtime_checkable


@runtime_checkable
class PathFilter(Protocol):
    def accept(self, path: str) -> bool:
        ...


class AcceptAll:
    def accept(self, path: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "AcceptAll()"


ACCEPT_ALL = AcceptAll()


class ExtensionFilter:
    """Accept paths ending with one of the given suffixes (``.java``, ``.xml``)."""

    def __init__(self, *extensions: str) -> None:
        if not extensions:
            raise ValueError("File extensions cannot be empty")
        self.extensions = tuple(extensions)

    def accept(self, path: str) -> bool:
        return str(path).endswith(self.extensions)

    def __repr__(self) -> str:
        return f"ExtensionFilter({', '.join(self.extensions)})"


class GlobFilter:
    """Accept paths whose file name or full path matches a glob pattern."""

    def __init__(self, *patterns: str) -> None:
        if not patterns:
            raise ValueError("Glob patterns cannot be empty")
        self.patterns = tuple(patterns)

    def accept(self, path: str) -> bool:
        name = PurePath(path).name
        return any(fnmatch(name, p) or fnmatch(str(path), p) for p in self.patterns)

    def __repr__(self) -> str:
        return f"GlobFilter({', '.join(self.patterns)})"
