"""Exception hierarchy for region parsing, pooling and building."""

from __future__ import annotations


class RegionKeeperError(Exception):
    """Base class for all regionkeeper failures."""


class MalformedRegionError(RegionKeeperError, ValueError):
    """A protected region is opened, closed or nested incorrectly."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class DuplicateRegionIdError(RegionKeeperError):
    """The same region id was declared twice in the processed corpus."""

    def __init__(self, region_id: str, first_source: str | None, second_source: str | None) -> None:
        self.region_id = region_id
        self.first_source = first_source
        self.second_source = second_source
        where = ", ".join(str(s) for s in (first_source, second_source) if s) or "the same document"
        super().__init__(
            f"Duplicate protected region id: '{region_id}' ({where}). "
            "Protected region ids have to be globally unique."
        )


class ReadRootNotADirectoryError(RegionKeeperError, NotADirectoryError):
    """A read root exists but is not a directory."""


class BuilderStateError(RegionKeeperError, RuntimeError):
    """Operation not allowed in the current builder or pool state."""


class ConfigError(RegionKeeperError, ValueError):
    """The parser configuration file is invalid."""


class UnreadableFileError(RegionKeeperError, ValueError):
    """A file cannot be decoded as text."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path} as text: {reason}")
