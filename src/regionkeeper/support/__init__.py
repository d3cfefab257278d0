"""Support module — filesystem access, path filters and the builder."""

from regionkeeper.support.builder import SkippedRoot, SupportBuilder
from regionkeeper.support.filters import ACCEPT_ALL, ExtensionFilter, GlobFilter, PathFilter
from regionkeeper.support.merger import ProtectedRegionSupport
from regionkeeper.support.reader import FileSystemReader, LocalFileSystemReader

__all__ = [
    "SkippedRoot",
    "SupportBuilder",
    "ACCEPT_ALL",
    "ExtensionFilter",
    "GlobFilter",
    "PathFilter",
    "ProtectedRegionSupport",
    "FileSystemReader",
    "LocalFileSystemReader",
]
