"""Tests for RealConfigStore against a temporary directory."""

import json
from pathlib import Path

from wrk.core.config import WrkConfig
from wrk.gateway.config_store.real import RealConfigStore


def test_missing_file_loads_as_none(tmp_path: Path) -> None:
    store = RealConfigStore(tmp_path / "wrk" / "config.json")

    assert store.exists() is False
    assert store.load() is None


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    store = RealConfigStore(tmp_path / "wrk" / "config.json")
    config = WrkConfig(workspace="~/workspace", ide="code", last_project_path="/w/a-work/b")

    store.save(config)

    assert store.exists() is True
    assert store.load() == config


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    config_path = tmp_path / "deep" / "nested" / "wrk" / "config.json"

    RealConfigStore(config_path).save(WrkConfig(workspace="/w"))

    assert config_path.is_file()


def test_save_writes_two_space_indented_json(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"

    RealConfigStore(config_path).save(WrkConfig(workspace="/w", ide="vim"))

    assert config_path.read_text(encoding="utf-8") == (
        '{\n  "workspace": "/w",\n  "ide": "vim"\n}\n'
    )


def test_save_replaces_previous_contents(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    store = RealConfigStore(config_path)

    store.save(WrkConfig(workspace="/w", last_project_path="/w/a-work/b"))
    store.save(WrkConfig(workspace="/w"))

    assert "lastProjectPath" not in json.loads(config_path.read_text(encoding="utf-8"))


def test_malformed_json_loads_as_none(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")

    assert RealConfigStore(config_path).load() is None


def test_invalid_fields_load_as_none(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text('{"ide": "code"}', encoding="utf-8")

    assert RealConfigStore(config_path).load() is None


def test_directory_in_place_of_file_loads_as_none(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.mkdir()

    store = RealConfigStore(config_path)

    assert store.exists() is False
    assert store.load() is None
