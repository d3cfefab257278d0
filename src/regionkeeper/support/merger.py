"""Protected region support — merge generated contents for one file."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from regionkeeper.log import get_logger
from regionkeeper.regions.document import Document, Segment
from regionkeeper.regions.merge import fill_in, merge
from regionkeeper.regions.parser import RegionParser
from regionkeeper.support.filters import PathFilter
from regionkeeper.support.reader import FileSystemReader

logger = get_logger("merger")


class ProtectedRegionSupport:
    """Apply every matching parser to a generated file, in registration order.

    Each parser parses the output of the previous one, so regions resolved
    by an earlier parser are never re-read as fresh markers.
    """

    def __init__(
        self,
        reader: FileSystemReader,
        parsers: Sequence[tuple[PathFilter, RegionParser]],
        pool: Mapping[str, Segment],
    ) -> None:
        self.reader = reader
        self.parsers = list(parsers)
        self.pool = pool

    def parsers_for(self, path: str) -> list[RegionParser]:
        return [parser for path_filter, parser in self.parsers if path_filter.accept(path)]

    def merge_protected_regions(self, path: str, contents: str) -> str:
        """Return ``contents`` with protected region bodies restored.

        Args:
            path: Target path of the generated file. Inverse parsers read
                the previous version from here.
            contents: Freshly generated text.
        """
        text = contents
        for parser in self.parsers_for(path):
            document = parser.parse(text)
            if parser.inverse:
                previous = self._read_previous(path, parser)
                if previous is not None:
                    document = fill_in(document, previous)
            else:
                document = merge(document, self.pool)
            text = document.text
        return text

    def _read_previous(self, path: str, parser: RegionParser) -> Document | None:
        if not self.reader.exists(path) or self.reader.is_directory(path):
            logger.debug("no previous file at %s for %r", path, parser)
            return None
        return parser.parse(self.reader.read_file(path))
