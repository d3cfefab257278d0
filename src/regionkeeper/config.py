"""Load parser configuration from regionkeeper.yaml.

Example:

    parsers:
      - name: java
        preset: c-like
        oracle: bracket
        extensions: [".java"]
      - name: xml
        comments:
          - {start: "<!--", end: "-->"}
        oracle:
          start: 'BEGIN (?P<id>\\w+)'
          end: 'END'
        globs: ["*.xml", "*.xsd"]
        inverse: true

Without a configuration file a single ``c-like`` parser with the
``bracket`` oracle is used for every file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from regionkeeper.errors import ConfigError
from regionkeeper.paths import config_path
from regionkeeper.regions.lexicon import Comment, CommentLexicon
from regionkeeper.regions.oracle import ORACLES, PatternOracle, RegionOracle
from regionkeeper.regions.parser import RegionParser
from regionkeeper.support.filters import ExtensionFilter, GlobFilter, PathFilter

DEFAULT_PARSERS: list[dict[str, Any]] = [
    {"name": "default", "preset": "c-like", "oracle": "bracket"},
]


@dataclass
class ParserEntry:
    """One configured parser with its optional path filter."""
    parser: RegionParser
    path_filter: PathFilter | None = None


def read_config(path: Path | str) -> dict:
    """Read and parse a configuration file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the YAML is malformed or not a mapping.
    """
    cfg_path = Path(path)
    with open(cfg_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{cfg_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} is not a YAML mapping")
    return data


def _build_lexicon(entry: dict, label: str) -> CommentLexicon:
    preset = entry.get("preset")
    comments = entry.get("comments")
    if preset and comments:
        raise ConfigError(f"{label}: use either 'preset' or 'comments', not both")
    if preset:
        try:
            return CommentLexicon.preset(str(preset))
        except ValueError as e:
            raise ConfigError(f"{label}: {e}") from e
    if not comments or not isinstance(comments, list):
        raise ConfigError(f"{label}: needs a 'preset' or a non-empty 'comments' list")

    lexicon = CommentLexicon()
    for c in comments:
        if isinstance(c, str):
            c = {"start": c}
        if not isinstance(c, dict):
            raise ConfigError(f"{label}: comment entries must be mappings")
        try:
            lexicon.comments.append(Comment(str(c.get("start") or ""), c.get("end")))
        except ValueError as e:
            raise ConfigError(f"{label}: {e}") from e
    return lexicon


def _build_oracle(raw: Any, label: str) -> RegionOracle:
    if raw is None:
        raw = "bracket"
    if isinstance(raw, str):
        oracle = ORACLES.get(raw)
        if oracle is None:
            raise ConfigError(f"{label}: unknown oracle '{raw}'. Valid: {', '.join(ORACLES)}")
        return oracle
    if isinstance(raw, dict) and "start" in raw and "end" in raw:
        try:
            return PatternOracle(raw["start"], raw["end"])
        except (re.error, ValueError) as e:
            raise ConfigError(f"{label}: invalid oracle pattern: {e}") from e
    raise ConfigError(f"{label}: oracle must be a name or a {{start, end}} mapping")


def _build_filter(entry: dict, label: str) -> PathFilter | None:
    extensions = entry.get("extensions") or []
    globs = entry.get("globs") or []
    if extensions and globs:
        raise ConfigError(f"{label}: use either 'extensions' or 'globs', not both")
    if extensions:
        return ExtensionFilter(*[str(e) for e in extensions])
    if globs:
        return GlobFilter(*[str(g) for g in globs])
    return None


def build_parsers(entries: list[dict[str, Any]]) -> list[ParserEntry]:
    """Turn raw parser entries into configured parsers, in order."""
    if not entries:
        raise ConfigError("'parsers' must be a non-empty list")

    result = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"parsers[{i}] is not a mapping")
        name = str(entry.get("name") or entry.get("preset") or f"parser-{i}")
        label = f"parser '{name}'"
        parser = RegionParser(
            _build_lexicon(entry, label),
            _build_oracle(entry.get("oracle"), label),
            inverse=bool(entry.get("inverse", False)),
            name=name,
        )
        result.append(ParserEntry(parser, _build_filter(entry, label)))
    return result


def load_parsers(path: Path | str | None = None) -> list[ParserEntry]:
    """Load configured parsers, falling back to the default parser.

    An explicitly given path must exist; the default location is optional.
    """
    cfg = config_path(path)
    if not cfg.is_file():
        if path:
            raise FileNotFoundError(f"Configuration file not found: {cfg}")
        return build_parsers(DEFAULT_PARSERS)

    data = read_config(cfg)
    entries = data.get("parsers")
    if not isinstance(entries, list):
        raise ConfigError(f"{cfg}: missing 'parsers' list")
    return build_parsers(entries)
