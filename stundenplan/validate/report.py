from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List


def write_validation_report(problems: Dict[str, List[str]], outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "validation.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump({"ok": not problems, "violations_by_rule": problems}, f, indent=2)
    return path


def format_validation_report(problems: Dict[str, List[str]]) -> str:
    if not problems:
        return "schedule data: ok"
    lines: list[str] = [f"schedule data: {sum(len(v) for v in problems.values())} problem(s)"]
    lines.append("violations_by_rule:")
    for rule, msgs in problems.items():
        lines.append(f"  - {rule}: {len(msgs)}")
        for msg in msgs:
            lines.append(f"      {msg}")
    return "\n".join(lines)
