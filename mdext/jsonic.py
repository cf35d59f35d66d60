from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

from .diagnostics import Diagnostic


def _default(obj: Any) -> Any:
    if isinstance(obj, Diagnostic):
        return obj.to_dict()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return obj.as_posix()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any) -> str:
    """
    Compact JSON for CLI answers (ensure_ascii=False).
    Diagnostics, enums and paths are serialized as plain values.
    """
    return json.dumps(obj, ensure_ascii=False, default=_default)
