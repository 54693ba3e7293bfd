# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from robots_scout.config import FetchConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("user_agent: Bot/2.0\nretry_times: 1", ".yaml", None),
        (json.dumps({"user_agent": "Bot/2.0", "retry_times": 1}), ".json", None),
        ("retry_times: -1", ".yaml", ValidationError),
        ("unknown_field: 1", ".yml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("{not json", ".json", ValueError),
        ("user_agent = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, FetchConfig)
        assert cfg.user_agent == "Bot/2.0"
        assert cfg.retry_times == 1
        assert cfg.timeout == 10.0


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("timeout: 2.5\n", encoding="utf-8")
    assert load_config(None).timeout == 2.5


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_config_is_frozen():
    cfg = FetchConfig()
    with pytest.raises(ValidationError):
        cfg.timeout = 1.0


def test_blank_user_agent_rejected():
    with pytest.raises(ValidationError):
        FetchConfig(user_agent="   ")
