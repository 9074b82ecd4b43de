from datetime import datetime
from pathlib import Path

from typer.testing import CliRunner

from stundenplan.cli.main import app, build_dashboard, validate_data
from stundenplan.models import Lesson


def test_dashboard_during_lesson() -> None:
    root = Path(__file__).resolve().parents[1]
    text, snap = build_dashboard(root, datetime(2024, 1, 1, 8, 30))
    assert isinstance(snap.state, Lesson) and snap.state.subject_code == "D"
    assert "Deutsch" in text
    assert "35:00" in text
    assert "Lektionen: 8/8" in text


def test_dashboard_on_weekend() -> None:
    root = Path(__file__).resolve().parents[1]
    text, snap = build_dashboard(root, datetime(2024, 1, 6, 10, 0))
    assert "Wochenende" in text
    assert "Woche: 100%" in text
    assert snap.lessons.total == 0


def test_reference_data_validates() -> None:
    root = Path(__file__).resolve().parents[1]
    assert validate_data(root) == {}


def test_now_command() -> None:
    result = CliRunner().invoke(app, ["now", "--at", "2024-01-01T08:16:00"])
    assert result.exit_code == 0, result.output
    assert "Pause" in result.output
    assert "Nächste: Deutsch" in result.output


def test_now_rejects_bad_timestamp() -> None:
    result = CliRunner().invoke(app, ["now", "--at", "yesterday"])
    assert result.exit_code == 2


def test_watch_single_tick() -> None:
    result = CliRunner().invoke(app, ["watch", "--ticks", "1", "--log-level", "WARNING"])
    assert result.exit_code == 0, result.output
    assert "Tag:" in result.output
    assert "Woche:" in result.output


def test_validate_command() -> None:
    result = CliRunner().invoke(app, ["validate"])
    assert result.exit_code == 0, result.output
    assert "schedule data: ok" in result.output


def test_export_html_command() -> None:
    root = Path(__file__).resolve().parents[1]
    result = CliRunner().invoke(app, ["export-html"])
    assert result.exit_code == 0, result.output
    path = root / "outputs" / "ui" / "index.html"
    assert path.exists()
    assert "Mathematik" in path.read_text(encoding="utf-8")
