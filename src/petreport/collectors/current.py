from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path
from typing import Optional

from petreport.core.models import Architecture, PythonEnvironment, PythonEnvironmentCategory

log = logging.getLogger(__name__)

_X86_MACHINES = ("x86_64", "amd64", "x64", "i386", "i686", "x86")


def _arch() -> Optional[Architecture]:
    machine = platform.machine().lower()
    if machine not in _X86_MACHINES:
        return None
    return Architecture.X64 if sys.maxsize > 2**32 else Architecture.X86


def _category(prefix: Path) -> PythonEnvironmentCategory:
    try:
        if (prefix / "conda-meta").is_dir():
            return PythonEnvironmentCategory.Conda
        if (prefix / "pyvenv.cfg").is_file():
            return PythonEnvironmentCategory.Venv
    except OSError as e:
        log.debug("could not inspect %s: %s", prefix, e)
    return PythonEnvironmentCategory.Unknown


def describe_current_interpreter() -> PythonEnvironment:
    """Describe the running interpreter. Best effort, no subprocesses."""
    prefix = Path(sys.prefix)
    executable = Path(sys.executable) if sys.executable else None
    v = sys.version_info
    return PythonEnvironment(
        executable=executable,
        category=_category(prefix),
        version=f"{v.major}.{v.minor}.{v.micro}",
        prefix=prefix,
        arch=_arch(),
        symlinks=[executable] if executable else None,
    )
