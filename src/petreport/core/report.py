from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional

from .codecs import architecture_to_string, category_to_string
from .manager import ManagerReport
from .models import PythonEnvironment
from .paths import path_text

_INDENT = "   "


def _line(label: str, value: str) -> str:
    return f"{_INDENT}{label:<12}: {value}"


def _copy_path(path: Optional[Path]) -> Optional[Path]:
    return None if path is None else Path(path)


@dataclass(frozen=True)
class EnvironmentReport:
    """Externally visible snapshot of a discovered environment."""

    category: str
    display_name: Optional[str] = None
    name: Optional[str] = None
    executable: Optional[Path] = None
    version: Optional[str] = None
    prefix: Optional[Path] = None
    manager: Optional[ManagerReport] = None
    project: Optional[Path] = None
    arch: Optional[str] = None
    symlinks: Optional[tuple[Path, ...]] = None

    @classmethod
    def from_environment(cls, env: PythonEnvironment) -> EnvironmentReport:
        return cls(
            display_name=env.display_name,
            name=env.name,
            executable=_copy_path(env.executable),
            category=category_to_string(env.category),
            version=env.version,
            prefix=_copy_path(env.prefix),
            manager=None if env.manager is None else ManagerReport.from_manager(env.manager),
            project=_copy_path(env.project),
            arch=None if env.arch is None else architecture_to_string(env.arch),
            symlinks=None if env.symlinks is None else tuple(Path(p) for p in env.symlinks),
        )

    def to_dict(self) -> dict[str, Any]:
        def p(v: Optional[Path]) -> Optional[str]:
            return None if v is None else path_text(v)

        return {
            "displayName": self.display_name,
            "name": self.name,
            "executable": p(self.executable),
            "category": self.category,
            "version": self.version,
            "prefix": p(self.prefix),
            "manager": None if self.manager is None else self.manager.to_dict(),
            "project": p(self.project),
            "arch": self.arch,
            "symlinks": None if self.symlinks is None else [path_text(s) for s in self.symlinks],
        }

    def lines(self) -> Iterator[str]:
        yield f"Environment ({self.category})"
        if self.display_name is not None:
            yield _line("Display-Name", self.display_name)
        if self.name is not None:
            yield _line("Name", self.name)
        if self.executable is not None:
            yield _line("Executable", path_text(self.executable))
        if self.version is not None:
            yield _line("Version", self.version)
        if self.prefix is not None:
            yield _line("Prefix", path_text(self.prefix))
        if self.project is not None:
            # TODO: decide whether Project should fall back to "" like the other
            # paths instead of passing undecodable text through to the sink.
            yield _line("Project", os.fspath(self.project))
        if self.arch is not None:
            yield _line("Architecture", self.arch)
        if self.manager is not None:
            yield _line("Manager", f"{self.manager.tool}, {path_text(self.manager.executable)}")

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self.lines())
