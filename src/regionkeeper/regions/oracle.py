"""Region oracles — decide which comments are protected region markers.

The parser hands every comment body (the text between the comment tokens)
to an oracle. The oracle answers with a ``Marker`` or ``None`` when the
comment is an ordinary comment.

Built-in oracles:
    bracket    ``[[region:ID]]`` ... ``[[end]]`` (or ``[[end:ID]]``)
    protected  ``PROTECTED REGION ID(ID) START`` ... ``PROTECTED REGION END``
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

START = "start"
END = "end"


@dataclass(frozen=True)
class Marker:
    """Classification of a marker comment."""

    kind: str
    id: str | None = None

    @property
    def is_start(self) -> bool:
        return self.kind == START

    @property
    def is_end(self) -> bool:
        return self.kind == END


@runtime_checkable
class RegionOracle(Protocol):
    def classify(self, body: str) -> Marker | None:
        ...


class PatternOracle:
    """Oracle driven by two regular expressions.

    Both patterns are matched against the whole stripped comment body. The
    start pattern must define a named group ``id``; the end pattern may
    define one, in which case it has to match the id of the open region.
    """

    def __init__(self, start: str | re.Pattern[str], end: str | re.Pattern[str]) -> None:
        self.start = re.compile(start) if isinstance(start, str) else start
        self.end = re.compile(end) if isinstance(end, str) else end
        if "id" not in self.start.groupindex:
            raise ValueError("Start marker pattern needs a named group 'id'")

    def classify(self, body: str) -> Marker | None:
        stripped = body.strip()
        match = self.start.fullmatch(stripped)
        if match:
            return Marker(START, match.group("id"))
        match = self.end.fullmatch(stripped)
        if match:
            return Marker(END, match.groupdict().get("id"))
        return None

    def __repr__(self) -> str:
        return f"PatternOracle({self.start.pattern!r}, {self.end.pattern!r})"


_ID = r"(?P<id>[A-Za-z0-9_.:/\-]+)"

ORACLES: dict[str, PatternOracle] = {
    "bracket": PatternOracle(
        r"\[\[region:\s*" + _ID + r"\s*\]\]",
        r"\[\[end(?::\s*" + _ID + r")?\s*\]\]",
    ),
    "protected": PatternOracle(
        r"PROTECTED REGION ID\(\s*" + _ID + r"\s*\) START",
        r"PROTECTED REGION END",
    ),
}

DEFAULT_ORACLE = ORACLES["bracket"]


def get_oracle(name: str) -> PatternOracle:
    """Look up a built-in oracle by name."""
    oracle = ORACLES.get(name)
    if oracle is None:
        raise ValueError(f"Unknown oracle: {name}. Valid: {', '.join(ORACLES)}")
    return oracle
