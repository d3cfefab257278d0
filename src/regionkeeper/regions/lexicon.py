"""Comment lexicons — which comment syntaxes a parser recognizes.

A lexicon is an ordered list of comments. A comment with an end token is a
multi-line comment (``/* ... */``); a comment without one runs to the end of
the line (``// ...``) and includes the line terminator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_EOL_RE = re.compile(r"\r\n|\r|\n")


def line_of(text: str, pos: int) -> int:
    """1-based line number of offset ``pos``, counting every line terminator."""
    return len(_EOL_RE.findall(text, 0, pos)) + 1


# Named lexicons: preset name → list of (start, end) pairs. end None = single-line.
PRESETS: dict[str, list[tuple[str, str | None]]] = {
    "c-like": [("//", None), ("/*", "*/")],
    "xml":    [("<!--", "-->")],
    "hash":   [("#", None)],
    "sql":    [("--", None), ("/*", "*/")],
    "lua":    [("--[[", "]]"), ("--", None)],
    "css":    [("/*", "*/")],
    "php":    [("//", None), ("#", None), ("/*", "*/")],
}


@dataclass(frozen=True)
class Comment:
    """One comment syntax of a lexicon."""

    start: str
    end: str | None = None

    def __post_init__(self) -> None:
        if not self.start:
            raise ValueError("Comment start token cannot be empty")
        if self.end == "":
            raise ValueError("Comment end token cannot be empty (use None for single-line comments)")

    def scan(self, text: str, body_start: int) -> tuple[int, int]:
        """Find the end of a comment body starting at ``body_start``.

        Returns:
            (body_end, stop): the body is ``text[body_start:body_end]`` and the
            comment, terminator included, ends at ``stop``. A comment without
            terminator runs to the end of input.
        """
        if self.end is not None:
            idx = text.find(self.end, body_start)
            if idx < 0:
                return len(text), len(text)
            return idx, idx + len(self.end)
        match = _EOL_RE.search(text, body_start)
        if match is None:
            return len(text), len(text)
        return match.start(), match.end()


@dataclass
class CommentLexicon:
    """Ordered set of comment syntaxes."""

    comments: list[Comment] = field(default_factory=list)

    def add_comment(self, start: str, end: str | None = None) -> CommentLexicon:
        self.comments.append(Comment(start, end))
        return self

    def match(self, text: str, pos: int) -> Comment | None:
        """Return the comment starting at ``pos``.

        The longest start token wins; among equally long tokens the first
        registered one wins.
        """
        best: Comment | None = None
        for comment in self.comments:
            if text.startswith(comment.start, pos):
                if best is None or len(comment.start) > len(best.start):
                    best = comment
        return best

    @classmethod
    def preset(cls, name: str) -> CommentLexicon:
        """Build a lexicon from a named preset (see ``PRESETS``)."""
        try:
            pairs = PRESETS[name]
        except KeyError:
            raise ValueError(
                f"Unknown comment preset: {name}. Valid: {', '.join(PRESETS)}"
            ) from None
        return cls([Comment(start, end) for start, end in pairs])

    def __bool__(self) -> bool:
        return bool(self.comments)
