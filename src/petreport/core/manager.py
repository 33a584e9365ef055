from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .codecs import manager_tool_to_string
from .models import EnvManager
from .paths import path_text


@dataclass(frozen=True)
class ManagerReport:
    executable: Path
    tool: str
    version: Optional[str] = None

    @classmethod
    def from_manager(cls, manager: EnvManager) -> ManagerReport:
        return cls(
            executable=Path(manager.executable),
            tool=manager_tool_to_string(manager.tool),
            version=manager.version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "executable": path_text(self.executable),
            "version": self.version,
            "tool": self.tool,
        }
