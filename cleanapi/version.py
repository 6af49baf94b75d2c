"""Application version loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union


def load_version(path: Union[str, os.PathLike]) -> str:
    """Read the version string from *path*, without surrounding whitespace."""
    return Path(path).read_text(encoding="utf-8").strip()