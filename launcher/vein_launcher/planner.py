from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List

@dataclass
class PlannedWrite:
    file: str
    section: str
    key: str
    value: str
    env_var: str
    multi_value: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class Plan:
    ok: bool
    writes: List[PlannedWrite]
    notes: List[str]
    paths: Dict[str, str] = field(default_factory=dict)
    launch_cmd: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "writes": [w.to_dict() for w in self.writes],
            "notes": list(self.notes),
            "paths": dict(self.paths),
            "launch_cmd": list(self.launch_cmd),
        }
