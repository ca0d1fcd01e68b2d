import json

import pytest
from pydantic import ValidationError

from shingles.config import Settings, load_settings


def test_defaults():
    s = Settings()
    assert s.window.size == 4
    assert s.window.step == 1
    assert s.window_2d.size == [3, 3]
    assert s.hasher.key_bytes == bytes(16)
    assert s.hasher.digest_size == 8


def test_from_env(monkeypatch):
    monkeypatch.setenv("SHINGLES_WINDOW__SIZE", "6")
    s = Settings.from_env()
    assert s.window.size == 6


def test_from_env_pairs(monkeypatch):
    monkeypatch.setenv("SHINGLES_WINDOW_2D__SIZE", "4,2")
    monkeypatch.setenv("SHINGLES_WINDOW_2D__STEP", "[2, 1]")
    s = Settings.from_env()
    assert s.window_2d.size == [4, 2]
    assert s.window_2d.step == [2, 1]


def test_invalid_values():
    with pytest.raises(ValidationError):
        Settings.model_validate({"window": {"size": 0}})
    with pytest.raises(ValidationError):
        Settings.model_validate({"window_2d": {"size": [1, 2, 3]}})
    with pytest.raises(ValidationError):
        Settings.model_validate({"window_2d": {"step": [1, 0]}})
    with pytest.raises(ValidationError):
        Settings.model_validate({"hasher": {"key": "not hex"}})


def test_load_settings_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"window": {"step": 2}, "hasher": {"key": "0a0b", "digest_size": 4}}))
    s = load_settings(p)
    assert s.window.step == 2
    assert s.hasher.key_bytes == b"\x0a\x0b"
    assert s.hasher.digest_size == 4


def test_load_settings_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("window_2d:\n  size: [5, 2]\nlogging:\n  level: DEBUG\n")
    s = load_settings(p)
    assert s.window_2d.size == [5, 2]
    assert s.logging.level == "DEBUG"


def test_load_settings_requires_mapping(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("[1, 2]")
    with pytest.raises(TypeError):
        load_settings(p)


def test_logging_level_is_validated():
    assert Settings.model_validate({"logging": {"level": "debug"}}).logging.level == "DEBUG"
    with pytest.raises(ValidationError):
        Settings.model_validate({"logging": {"level": "LOUD"}})
