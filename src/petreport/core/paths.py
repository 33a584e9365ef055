from __future__ import annotations

import os
from pathlib import Path


def path_text(path: Path) -> str:
    """Return ``path`` as text, or "" when it holds undecodable bytes."""
    text = os.fspath(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return text
