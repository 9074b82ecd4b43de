from __future__ import annotations

from typing import Any, Dict, Mapping


class SubjectDirectory:
    def __init__(self, data: Mapping[str, Any]):
        names = data.get("names") or {}
        self.names: Dict[str, str] = {str(k): str(v) for k, v in names.items()}

    def __len__(self) -> int:
        return len(self.names)

    def display_name(self, code: str) -> str:
        # Unknown codes are shown as-is
        return self.names.get(code, code)
