from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from stundenplan.cli.main import open_session
from stundenplan.config import DashboardConfig, load_config


def write_config(root: Path, text: str) -> None:
    (root / "configs").mkdir()
    (root / "configs" / "dashboard.toml").write_text(text, encoding="utf-8")


def test_defaults_when_file_is_absent(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)
    assert cfg == DashboardConfig()
    assert cfg.tick_seconds == 1.0
    assert cfg.show_seconds is None
    assert cfg.base_url is None


def test_values_are_read(tmp_path: Path) -> None:
    write_config(
        tmp_path,
        "[dashboard]\ntick_seconds = 2\nshow_seconds = true\n\n"
        "[service]\nbase_url = \"http://localhost:3000/api\"\ntimeout = 5\n",
    )
    cfg = load_config(tmp_path)
    assert cfg.tick_seconds == 2.0
    assert cfg.show_seconds is True
    assert cfg.base_url == "http://localhost:3000/api"
    assert cfg.timeout == 5.0


def test_malformed_file_raises(tmp_path: Path) -> None:
    write_config(tmp_path, "[dashboard\n")
    with pytest.raises(tomllib.TOMLDecodeError):
        load_config(tmp_path)


def test_show_seconds_must_be_boolean(tmp_path: Path) -> None:
    write_config(tmp_path, "[dashboard]\nshow_seconds = \"no\"\n")
    with pytest.raises(ValueError, match="show_seconds"):
        load_config(tmp_path)


def test_show_seconds_overrides_user_setting() -> None:
    root = Path(__file__).resolve().parents[1]
    session, _ = open_session(root, config=DashboardConfig(show_seconds=True))
    assert session.settings.show_seconds is True
    session, _ = open_session(root, config=DashboardConfig())
    assert session.settings.show_seconds is False
