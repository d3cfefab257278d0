"""Tests for parser configuration loading."""

from pathlib import Path

import pytest

from regionkeeper.config import build_parsers, load_parsers, read_config
from regionkeeper.errors import ConfigError
from regionkeeper.paths import DEFAULT_CONFIG_NAME, config_path

FIXTURES = Path(__file__).parent / "fixtures"
CONFIG = FIXTURES / "regionkeeper.yaml"


class TestLoadParsers:
    def test_fixture_config(self):
        entries = load_parsers(CONFIG)
        assert [e.parser.name for e in entries] == ["java", "xml"]
        java, xml = entries
        assert not java.parser.inverse
        assert xml.parser.inverse
        assert java.path_filter.accept("A.java")
        assert not java.path_filter.accept("beans.xml")

    def test_default_without_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        entries = load_parsers()
        assert len(entries) == 1
        assert entries[0].parser.name == "default"
        assert entries[0].path_filter is None

    def test_explicit_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_parsers(tmp_path / "missing.yaml")

    def test_env_variable(self, monkeypatch):
        monkeypatch.setenv("REGIONKEEPER_CONFIG", str(CONFIG))
        assert len(load_parsers()) == 2

    def test_missing_parsers_list(self, tmp_path):
        cfg = tmp_path / "c.yaml"
        cfg.write_text("other: 1\n")
        with pytest.raises(ConfigError, match="parsers"):
            load_parsers(cfg)


class TestReadConfig:
    def test_not_a_mapping(self, tmp_path):
        cfg = tmp_path / "c.yaml"
        cfg.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="not a YAML mapping"):
            read_config(cfg)

    def test_malformed_yaml(self, tmp_path):
        cfg = tmp_path / "c.yaml"
        cfg.write_text("parsers: [unclosed\n")
        with pytest.raises(ConfigError):
            read_config(cfg)


class TestBuildParsers:
    def test_custom_comments_and_oracle(self):
        entries = build_parsers([{
            "name": "sql",
            "comments": [{"start": "--"}, {"start": "/*", "end": "*/"}],
            "oracle": {"start": r"BEGIN (?P<id>\w+)", "end": "END"},
            "globs": ["*.sql"],
        }])
        parser = entries[0].parser
        doc = parser.parse("-- BEGIN q\nselect 1;\n-- END\n")
        assert doc.get("q").content == "select 1;\n"
        assert entries[0].path_filter.accept("db/init.sql")

    def test_comment_shorthand(self):
        entries = build_parsers([{"comments": ["#"]}])
        assert entries[0].parser.lexicon.comments[0].start == "#"
        assert entries[0].parser.name == "parser-0"

    @pytest.mark.parametrize("entry", [
        {"preset": "cobol"},
        {"preset": "c-like", "comments": ["#"]},
        {"comments": []},
        {"comments": [{"start": ""}]},
        {"preset": "c-like", "oracle": "nope"},
        {"preset": "c-like", "oracle": {"start": "BEGIN", "end": "END"}},
        {"preset": "c-like", "oracle": {"start": "(?P<id>"}},
        {"preset": "c-like", "extensions": [".a"], "globs": ["*.b"]},
        "not-a-mapping",
    ])
    def test_invalid_entries(self, entry):
        with pytest.raises(ConfigError):
            build_parsers([entry])

    def test_empty_list(self):
        with pytest.raises(ConfigError):
            build_parsers([])


class TestPaths:
    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setenv("REGIONKEEPER_CONFIG", "/env.yaml")
        assert config_path("/explicit.yaml") == Path("/explicit.yaml")

    def test_env(self, monkeypatch):
        monkeypatch.setenv("REGIONKEEPER_CONFIG", "/env.yaml")
        assert config_path() == Path("/env.yaml")

    def test_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert config_path() == tmp_path / DEFAULT_CONFIG_NAME
