"""Builder — register parsers, read previous output, build the support.

Lifecycle: CONFIGURING -> READING -> BUILT

Parsers can only be added while CONFIGURING. The first successful ``read``
locks the parser list. ``build`` freezes the region pool and hands it to a
``ProtectedRegionSupport``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from regionkeeper.errors import BuilderStateError, ReadRootNotADirectoryError, UnreadableFileError
from regionkeeper.log import get_logger
from regionkeeper.regions.parser import RegionParser
from regionkeeper.regions.pool import RegionPool
from regionkeeper.support.filters import ACCEPT_ALL, ExtensionFilter, PathFilter
from regionkeeper.support.merger import ProtectedRegionSupport
from regionkeeper.support.reader import FileSystemReader, LocalFileSystemReader

logger = get_logger("builder")

CONFIGURING = "CONFIGURING"
READING = "READING"
BUILT = "BUILT"

# Allowed operations per state
TRANSITIONS = {
    CONFIGURING: {"add_parser": CONFIGURING, "read": READING, "build": BUILT},
    READING: {"read": READING, "build": BUILT},
    BUILT: {},
}

MISSING = "missing"
VISITED = "already visited"


@dataclass
class SkippedRoot:
    path: str
    reason: str


class SupportBuilder:
    def __init__(self, reader: FileSystemReader | None = None) -> None:
        self.reader = reader or LocalFileSystemReader()
        self.parsers: list[tuple[PathFilter, RegionParser]] = []
        self.pool = RegionPool()
        self.state = CONFIGURING
        self.skipped: list[SkippedRoot] = []
        self._visited: list[PurePath] = []

    def _advance(self, operation: str) -> None:
        target = TRANSITIONS[self.state].get(operation)
        if target is None:
            raise BuilderStateError(f"'{operation}' is not allowed in state {self.state}")
        self.state = target

    def add_parser(self, parser: RegionParser, path_filter: PathFilter | None = None) -> SupportBuilder:
        if parser is None:
            raise ValueError("Parser cannot be None")
        self._advance("add_parser")
        self.parsers.append((path_filter or ACCEPT_ALL, parser))
        return self

    def add_parser_for_extensions(self, parser: RegionParser, *extensions: str) -> SupportBuilder:
        return self.add_parser(parser, ExtensionFilter(*extensions))

    def read(self, path: str, path_filter: PathFilter | None = None) -> SupportBuilder:
        """Collect the protected regions of every file below ``path``.

        Missing roots and roots inside an already read root are skipped.

        Raises:
            BuilderStateError: No parser registered, or already built.
            ReadRootNotADirectoryError: ``path`` exists but is a file.
            MalformedRegionError, DuplicateRegionIdError: From parsing/pooling.
        """
        if not self.parsers:
            raise BuilderStateError("Parsers have to be added before reading")
        if "read" not in TRANSITIONS[self.state]:
            raise BuilderStateError(f"'read' is not allowed in state {self.state}")

        path = str(path)
        if not self.reader.exists(path):
            logger.info("skipping missing path '%s'", path)
            self.skipped.append(SkippedRoot(path, MISSING))
            return self
        if not self.reader.is_directory(path):
            raise ReadRootNotADirectoryError(f"Not a directory: {path}")

        canonical = PurePath(self.reader.canonicalize(path))
        if self._is_visited(canonical):
            logger.warning("skipping already visited path '%s'", path)
            self.skipped.append(SkippedRoot(path, VISITED))
            return self

        self._read_files(path, path_filter)
        self._visited.append(canonical)
        self._advance("read")
        return self

    def _is_visited(self, canonical: PurePath) -> bool:
        return any(canonical == root or root in canonical.parents for root in self._visited)

    def _read_files(self, path: str, path_filter: PathFilter | None) -> None:
        files = self.reader.list_files(path, path_filter)
        logger.debug("reading %d files below %s", len(files), path)
        for file in files:
            parsers = [p for f, p in self.parsers if f.accept(file)]
            if not parsers:
                continue
            try:
                text = self.reader.read_file(file)
            except UnreadableFileError as e:
                logger.warning("skipping %s", e)
                continue
            for parser in parsers:
                added = self.pool.ingest(parser.parse(text), source=file)
                if added:
                    logger.debug("pooled %d regions from %s (%r)", added, file, parser)

    def build(self) -> ProtectedRegionSupport:
        self._advance("build")
        self.pool.freeze()
        return ProtectedRegionSupport(self.reader, self.parsers, self.pool)
