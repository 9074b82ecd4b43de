from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Tuple

import typer

from ..config import DashboardConfig, load_config
from ..data.client import SettingsClient
from ..data.loader import LoadedData, load_data, load_json
from ..models.settings import UserSettings
from ..render.html_ui import write_html_ui
from ..render.text_ui import render_dashboard
from ..scheduler.session import DashboardSession, Snapshot, run_ticker
from ..validate.checks import check_slots, check_week
from ..validate.report import format_validation_report, write_validation_report


logger = logging.getLogger(__name__)


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "dashboard.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def open_session(
    project_root: Path,
    *,
    config: DashboardConfig | None = None,
    base_url: str | None = None,
    token: str | None = None,
) -> Tuple[DashboardSession, LoadedData]:
    """Load static data and the user's settings, once per session."""
    config = config or load_config(project_root)
    loaded = load_data(project_root)
    base_url = base_url or config.base_url
    if base_url and token:
        with SettingsClient(base_url, token, timeout=config.timeout) as client:
            settings = client.fetch_settings(loaded.default_week, loaded.slots)
        logger.info(f"Loaded settings from {base_url}")
    else:
        settings = UserSettings(week=loaded.default_week)
    if config.show_seconds is not None:
        settings = replace(settings, show_seconds=config.show_seconds)
    return DashboardSession(settings, loaded.slots, loaded.subjects), loaded


def render_snapshot(session: DashboardSession, snap: Snapshot) -> str:
    return render_dashboard(
        snap,
        session.settings.week,
        session.slots,
        session.subjects,
        show_seconds=session.settings.show_seconds,
    )


def build_dashboard(
    project_root: Path,
    now: datetime | None = None,
    *,
    base_url: str | None = None,
    token: str | None = None,
) -> Tuple[str, Snapshot]:
    session, _ = open_session(project_root, base_url=base_url, token=token)
    snap = session.tick(now or datetime.now())
    return render_snapshot(session, snap), snap


def validate_data(project_root: Path) -> dict:
    data_dir = project_root / "data"
    slot_times = load_json(data_dir / "structure.json").get("slot_times", [])
    problems = dict(check_slots(slot_times))
    rows = load_json(data_dir / "week.json").get("week")
    for rule, msgs in check_week(rows, len(slot_times)).items():
        problems.setdefault(rule, []).extend(msgs)
    return problems


def _root() -> Path:
    return Path(__file__).resolve().parents[2]


app = typer.Typer(add_completion=False, help="School timetable dashboard")


@app.command("now")
def cli_now(
    at: str | None = typer.Option(None, help="ISO timestamp to evaluate instead of the clock"),
    base_url: str | None = typer.Option(None, help="Settings service base URL"),
    token: str | None = typer.Option(None, envvar="STUNDENPLAN_TOKEN", help="Bearer token"),
    log_level: str = typer.Option("WARNING", help="Log level"),
) -> None:
    root = _root()
    _setup_logging(root)
    logging.getLogger().setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    try:
        when = datetime.fromisoformat(at) if at else None
    except ValueError:
        raise typer.BadParameter(f"not an ISO timestamp: {at!r}", param_hint="--at")
    text, _ = build_dashboard(root, when, base_url=base_url, token=token)
    print(text)


@app.command("watch")
def cli_watch(
    ticks: int | None = typer.Option(None, help="Stop after this many ticks"),
    base_url: str | None = typer.Option(None, help="Settings service base URL"),
    token: str | None = typer.Option(None, envvar="STUNDENPLAN_TOKEN", help="Bearer token"),
    log_level: str = typer.Option("INFO", help="Log level"),
) -> None:
    root = _root()
    _setup_logging(root)
    logging.getLogger().setLevel(getattr(logging, log_level.upper(), logging.INFO))
    config = load_config(root)
    session, _ = open_session(root, config=config, base_url=base_url, token=token)

    def show(snap: Snapshot) -> None:
        typer.clear()
        print(render_snapshot(session, snap))

    try:
        run_ticker(session, show, interval=config.tick_seconds, max_ticks=ticks)
    except KeyboardInterrupt:
        logger.info("Stopped")


@app.command("validate")
def cli_validate() -> None:
    root = _root()
    problems = validate_data(root)
    write_validation_report(problems, root / "outputs")
    print(format_validation_report(problems))
    if problems:
        raise typer.Exit(code=1)


@app.command("export-html")
def cli_export_html() -> None:
    root = _root()
    loaded = load_data(root)
    path = write_html_ui(loaded.default_week, loaded.slots, loaded.subjects, loaded.days, root / "outputs")
    print(path)


if __name__ == "__main__":
    app()
