"""Parsed documents: ordered plain and protected region segments."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Segment:
    """A contiguous span of a document.

    Plain segments have no id and no markers. Protected region segments
    carry the id, the body between the markers and the literal marker text.
    """

    content: str
    id: str | None = None
    start_marker: str = ""
    end_marker: str = ""
    start: int = 0
    end: int = 0

    @property
    def is_marked(self) -> bool:
        return self.id is not None

    @property
    def text(self) -> str:
        return self.start_marker + self.content + self.end_marker

    def with_content(self, content: str) -> Segment:
        return replace(self, content=content)


@dataclass(frozen=True)
class Document:
    segments: tuple[Segment, ...] = ()

    @classmethod
    def of(cls, segments: Iterable[Segment]) -> Document:
        """Build a document, assigning contiguous source offsets."""
        placed: list[Segment] = []
        offset = 0
        for segment in segments:
            length = len(segment.text)
            placed.append(replace(segment, start=offset, end=offset + length))
            offset += length
        return cls(tuple(placed))

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.segments)

    @property
    def regions(self) -> list[Segment]:
        return [s for s in self.segments if s.is_marked]

    @property
    def ids(self) -> list[str]:
        return [s.id for s in self.segments if s.id is not None]

    def get(self, region_id: str) -> Segment | None:
        for segment in self.segments:
            if segment.id == region_id:
                return segment
        return None

    def region_map(self) -> dict[str, Segment]:
        """Map region id → segment; the first region with an id wins."""
        result: dict[str, Segment] = {}
        for segment in self.regions:
            result.setdefault(segment.id, segment)
        return result

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)
