from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Optional


# Values are opaque on purpose; wire spellings live in petreport.core.codecs.
class PythonEnvironmentCategory(Enum):
    System = auto()
    Homebrew = auto()
    Conda = auto()
    Pyenv = auto()
    PyenvVirtualEnv = auto()
    WindowsStore = auto()
    WindowsRegistry = auto()
    Pipenv = auto()
    VirtualEnvWrapper = auto()
    Venv = auto()
    VirtualEnv = auto()
    Unknown = auto()


class Architecture(Enum):
    X64 = auto()
    X86 = auto()


class EnvManagerType(Enum):
    Conda = auto()
    Pyenv = auto()


@dataclass
class EnvManager:
    executable: Path
    tool: EnvManagerType
    version: Optional[str] = None


@dataclass
class PythonEnvironment:
    """A discovered Python installation, as owned by the discovery side.

    Mutable: locators fill it in incrementally. Take an EnvironmentReport
    snapshot before handing it to anything external.
    """

    display_name: Optional[str] = None
    name: Optional[str] = None
    executable: Optional[Path] = None
    category: PythonEnvironmentCategory = PythonEnvironmentCategory.Unknown
    version: Optional[str] = None
    prefix: Optional[Path] = None
    manager: Optional[EnvManager] = None
    project: Optional[Path] = None
    arch: Optional[Architecture] = None
    symlinks: Optional[list[Path]] = field(default=None)
