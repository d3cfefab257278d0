"""Shared test fixtures for regionkeeper."""

from pathlib import Path

import pytest

from regionkeeper.regions.parser import RegionParser

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def java_parser():
    return RegionParser.for_preset("c-like", oracle="bracket")


@pytest.fixture
def xml_parser():
    return RegionParser.for_preset("xml", oracle="protected")


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    monkeypatch.delenv("REGIONKEEPER_CONFIG", raising=False)
