"""Wire tokens for the internal enumerations.

Tokens are spelled out by hand instead of being derived from enum names or
values, so renaming a variant can never rename what consumers see. Each table
is checked against its enum when this module is imported: a variant without a
token (or two variants sharing one) stops the import.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, TypeVar

from .models import Architecture, EnvManagerType, PythonEnvironmentCategory

CategoryToken = Literal[
    "system",
    "homebrew",
    "conda",
    "pyenv",
    "pyenv-virtualenv",
    "windows-store",
    "windows-registry",
    "pipenv",
    "virtualenvwrapper",
    "venv",
    "virtualenv",
    "unknown",
]
ArchToken = Literal["x64", "x86"]
ManagerToolToken = Literal["conda", "pyenv"]

E = TypeVar("E", bound=Enum)


def _frozen(enum_cls: type[E], table: dict[E, str]) -> Mapping[E, str]:
    missing = [v.name for v in enum_cls if v not in table]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} has no wire token for: {', '.join(missing)}")
    tokens = list(table.values())
    dupes = sorted({t for t in tokens if tokens.count(t) > 1})
    if dupes:
        raise RuntimeError(f"{enum_cls.__name__} reuses wire tokens: {', '.join(dupes)}")
    return MappingProxyType(table)


CATEGORY_TOKENS: Mapping[PythonEnvironmentCategory, str] = _frozen(
    PythonEnvironmentCategory,
    {
        PythonEnvironmentCategory.System: "system",
        PythonEnvironmentCategory.Homebrew: "homebrew",
        PythonEnvironmentCategory.Conda: "conda",
        PythonEnvironmentCategory.Pyenv: "pyenv",
        PythonEnvironmentCategory.PyenvVirtualEnv: "pyenv-virtualenv",
        PythonEnvironmentCategory.WindowsStore: "windows-store",
        PythonEnvironmentCategory.WindowsRegistry: "windows-registry",
        PythonEnvironmentCategory.Pipenv: "pipenv",
        PythonEnvironmentCategory.VirtualEnvWrapper: "virtualenvwrapper",
        PythonEnvironmentCategory.Venv: "venv",
        PythonEnvironmentCategory.VirtualEnv: "virtualenv",
        PythonEnvironmentCategory.Unknown: "unknown",
    },
)

ARCH_TOKENS: Mapping[Architecture, str] = _frozen(
    Architecture,
    {
        Architecture.X64: "x64",
        Architecture.X86: "x86",
    },
)

MANAGER_TOOL_TOKENS: Mapping[EnvManagerType, str] = _frozen(
    EnvManagerType,
    {
        EnvManagerType.Conda: "conda",
        EnvManagerType.Pyenv: "pyenv",
    },
)


def category_to_string(category: PythonEnvironmentCategory) -> CategoryToken:
    return CATEGORY_TOKENS[category]  # type: ignore[return-value]


def architecture_to_string(arch: Architecture) -> ArchToken:
    return ARCH_TOKENS[arch]  # type: ignore[return-value]


def manager_tool_to_string(tool: EnvManagerType) -> ManagerToolToken:
    return MANAGER_TOOL_TOKENS[tool]  # type: ignore[return-value]
