from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass
class DashboardConfig:
    tick_seconds: float = 1.0
    show_seconds: bool | None = None  # None defers to the user's settings
    base_url: str | None = None
    timeout: float = 12.0


def _project_root() -> Path:
    # stundenplan/config.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def load_config(project_root: Path | str | None = None) -> DashboardConfig:
    """Load configs/dashboard.toml if present, else defaults.

    Expected tables:
      [dashboard] tick_seconds, show_seconds
      [service]   base_url, timeout
    """
    base = DashboardConfig()
    root: Path = _project_root() if project_root is None else Path(project_root)
    cfg = root / "configs" / "dashboard.toml"
    if not cfg.exists():
        return base
    data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    dash = data.get("dashboard", {})
    show_seconds = dash.get("show_seconds", base.show_seconds)
    if show_seconds is not None and not isinstance(show_seconds, bool):
        raise ValueError(f"{cfg}: dashboard.show_seconds must be true or false, got {show_seconds!r}")
    service = data.get("service", {})
    return DashboardConfig(
        tick_seconds=float(dash.get("tick_seconds", base.tick_seconds)),
        show_seconds=show_seconds,
        base_url=service.get("base_url", base.base_url),
        timeout=float(service.get("timeout", base.timeout)),
    )
