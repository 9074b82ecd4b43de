from __future__ import annotations

from html import escape
from pathlib import Path
from typing import List

from ..data.subjects import SubjectDirectory
from ..models.period import SlotDefinition
from ..models.week import WeekTable


def build_html(week: WeekTable, slots: SlotDefinition, subjects: SubjectDirectory, days: List[str]) -> str:
    def cell_html(day: int, slot: int) -> str:
        code = week.code(day, slot)
        if not code:
            return "<td class='empty'></td>"
        return (
            f"<td class='subj-{escape(code)}'>"
            f"<div class='cell'><span class='subj'>{escape(code)}</span><br/>"
            f"<span class='name'>{escape(subjects.display_name(code))}</span></div>"
            f"</td>"
        )

    head_cells = "".join(
        f"<th>{s.index + 1}<br/><span class='time'>{s.start:%H:%M}–{s.end:%H:%M}</span></th>"
        for s in slots
    )
    rows_html = []
    for d, name in enumerate(days):
        row_cells = "".join(cell_html(d, s.index) for s in slots)
        rows_html.append(f"<tr><th class='day'>{escape(name)}</th>{row_cells}</tr>")

    style = """
    <style>
    body { font-family: system-ui, Arial, sans-serif; margin: 20px; color: #222; }
    .tt { border-collapse: collapse; width: 100%; table-layout: fixed; }
    .tt th, .tt td { border: 1px solid #ddd; padding: 6px; vertical-align: middle; text-align: center; }
    .tt thead th { background:#f7f7f7; font-weight:600; }
    .tt .day { background:#fafafa; width: 110px; text-align:left; padding-left:8px; }
    .tt .corner { background:#fff; width:110px; }
    .time { font-size: 11px; color:#666; }
    .cell { line-height: 1.2; }
    .subj { font-weight: 600; }
    .name { font-size: 12px; color:#444; }
    .empty { background:#fbfbfb; }
    </style>
    """

    return (
        "<html><head><meta charset='utf-8'><title>Stundenplan</title>" + style + "</head><body>"
        "<h1>Stundenplan</h1>"
        "<table class='tt'>"
        f"<thead><tr><th class='corner'></th>{head_cells}</tr></thead>"
        f"<tbody>{''.join(rows_html)}</tbody>"
        "</table>"
        "</body></html>"
    )


def write_html_ui(
    week: WeekTable, slots: SlotDefinition, subjects: SubjectDirectory, days: List[str], outputs_dir: Path
) -> Path:
    ui_dir = outputs_dir / "ui"
    ui_dir.mkdir(parents=True, exist_ok=True)
    out_path = ui_dir / "index.html"
    out_path.write_text(build_html(week, slots, subjects, days), encoding="utf-8")
    return out_path
