"""Region parser — split text into plain and protected region segments.

The scan is a single forward pass. Comments are recognized with a
``CommentLexicon``; each comment body is classified by a ``RegionOracle``.
Comments that are not markers stay part of the surrounding text untouched.

Only one region can be open at a time. Region rules:
- a start marker while another region is open is an error
- an end marker without an open region is an error
- an end marker naming a different id than the open region is an error
- reaching end of input with an open region is an error

Concatenating the text of all segments gives back the input exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

from regionkeeper.errors import MalformedRegionError
from regionkeeper.regions.document import Document, Segment
from regionkeeper.regions.lexicon import CommentLexicon, line_of
from regionkeeper.regions.oracle import DEFAULT_ORACLE, RegionOracle, get_oracle


@dataclass
class _OpenRegion:
    id: str
    marker: str
    offset: int
    content_start: int


class RegionParser:
    """Parser for one comment lexicon and one oracle.

    Args:
        lexicon: Comment syntaxes to scan for.
        oracle: Decides which comments are region markers.
        inverse: If True, the parsed document is filled in from the file
            already on disk instead of from the region pool.
        name: Label used in logs and CLI output.
    """

    def __init__(
        self,
        lexicon: CommentLexicon,
        oracle: RegionOracle | None = None,
        inverse: bool = False,
        name: str = "",
    ) -> None:
        if not lexicon:
            raise ValueError("Parser needs at least one comment syntax")
        self.lexicon = lexicon
        self.oracle = oracle or DEFAULT_ORACLE
        self.inverse = inverse
        self.name = name

    @classmethod
    def for_preset(
        cls,
        preset: str,
        oracle: RegionOracle | str | None = None,
        inverse: bool = False,
    ) -> RegionParser:
        if isinstance(oracle, str):
            oracle = get_oracle(oracle)
        return cls(CommentLexicon.preset(preset), oracle, inverse=inverse, name=preset)

    def parse(self, text: str) -> Document:
        segments: list[Segment] = []
        open_region: _OpenRegion | None = None
        plain_start = 0
        pos = 0
        length = len(text)

        while pos < length:
            comment = self.lexicon.match(text, pos)
            if comment is None:
                pos += 1
                continue

            body_start = pos + len(comment.start)
            body_end, stop = comment.scan(text, body_start)
            marker = self.oracle.classify(text[body_start:body_end])

            if marker is None:
                pos = stop
                continue

            if marker.is_start:
                if not marker.id:
                    raise MalformedRegionError("region start without id", line_of(text, pos))
                if open_region is not None:
                    raise MalformedRegionError(
                        f"region '{marker.id}' starts while region '{open_region.id}' is still open",
                        line_of(text, pos),
                    )
                if pos > plain_start:
                    segments.append(Segment(text[plain_start:pos]))
                open_region = _OpenRegion(marker.id, text[pos:stop], pos, stop)
            elif marker.is_end:
                if open_region is None:
                    raise MalformedRegionError(
                        f"end of region '{marker.id or '?'}' without a matching start",
                        line_of(text, pos),
                    )
                if marker.id is not None and marker.id != open_region.id:
                    raise MalformedRegionError(
                        f"end of region '{marker.id}' does not match open region '{open_region.id}'",
                        line_of(text, pos),
                    )
                segments.append(Segment(
                    content=text[open_region.content_start:pos],
                    id=open_region.id,
                    start_marker=open_region.marker,
                    end_marker=text[pos:stop],
                ))
                open_region = None
                plain_start = stop
            else:
                raise MalformedRegionError(f"unknown marker kind '{marker.kind}'", line_of(text, pos))
            pos = stop

        if open_region is not None:
            raise MalformedRegionError(
                f"unterminated protected region '{open_region.id}'",
                line_of(text, open_region.offset),
            )
        if plain_start < length:
            segments.append(Segment(text[plain_start:]))

        return Document.of(segments)

    def __repr__(self) -> str:
        flag = ", inverse" if self.inverse else ""
        return f"RegionParser({self.name or '?'}{flag})"
