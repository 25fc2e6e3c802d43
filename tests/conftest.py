"""Pytest configuration and shared fixtures for section settings tests."""

import sys
from pathlib import Path

import pytest


sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from section_settings.config import get_store_settings, reset_default_store
from section_settings.stores import InMemorySectionStore
from scenario import SCENARIO_FIELDS, SECTION_NAME


# ==================== Store Fixtures ====================


@pytest.fixture
def scenario_fields() -> dict[str, str]:
    """Fields of the log section scenario."""
    return dict(SCENARIO_FIELDS)


@pytest.fixture
def memory_store(scenario_fields) -> InMemorySectionStore:
    """In-memory store holding the log section scenario."""
    return InMemorySectionStore({SECTION_NAME: scenario_fields})


@pytest.fixture
def yaml_config_file(tmp_path) -> Path:
    """YAML file holding the log section scenario."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "logSection:\n"
        "  LogLevel: Info\n"
        "  Base.LogLevel: Warn\n"
        "  Base.Buggy.LogLevel: Debug\n"
        "  Base.Stable.LogLevel: Error\n"
        "  Timestamp: true\n"
        "emptySection:\n"
        "otherSection:\n"
        "  Retries: 3\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def xml_config_file(tmp_path) -> Path:
    """web.config style file holding the log section scenario."""
    path = tmp_path / "web.config"
    path.write_text(
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<configuration>\n"
        "  <configSections>\n"
        '    <section name="logSection" type="Sayer.Config.ConfigSection"/>\n'
        "  </configSections>\n"
        "  <logSection>\n"
        '    <field name="LogLevel" value="Info"/>\n'
        '    <field name="Base.LogLevel" value="Warn"/>\n'
        '    <field name="Base.Buggy.LogLevel" value="Debug"/>\n'
        '    <field name="Base.Stable.LogLevel" value="Error"/>\n'
        '    <field name="Timestamp" value="true"/>\n'
        "  </logSection>\n"
        "  <emptySection/>\n"
        "</configuration>\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def isolated_default_store(monkeypatch):
    """Keep the process-wide store and env settings out of each test."""
    for name in (
        "SECTION_SETTINGS_CONFIG_PATH",
        "SECTION_SETTINGS_STORE_FORMAT",
        "SECTION_SETTINGS_READ_ONLY",
        "SECTION_SETTINGS_CACHE_SECTIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_store_settings.cache_clear()
    reset_default_store()
    yield
    get_store_settings.cache_clear()
    reset_default_store()
