from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from ..errors import ConfigError


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ConfigError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


@dataclass
class ExternalCfg:
    """
    mdext.yaml:
      base_dir:  where relative include paths resolve (relative to the config file)
      timeout:   remote fetch timeout, seconds
      max_depth: nesting limit for .qmd files that include other files
    """
    base_dir: Optional[Path] = None
    timeout: float = 10.0
    max_depth: int = 8

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]], *, origin: Optional[Path] = None) -> ExternalCfg:
        if not d:
            return ExternalCfg()
        if not isinstance(d, dict):
            raise ConfigError("mdext.yaml must contain a mapping at the top level")
        _assert_only_keys(d, ["base_dir", "timeout", "max_depth"], ctx="mdext.yaml")

        base_dir: Optional[Path] = None
        raw_base = d.get("base_dir")
        if raw_base is not None:
            if not isinstance(raw_base, str) or not raw_base:
                raise ConfigError("base_dir must be a non-empty string")
            base_dir = Path(raw_base).expanduser()
            if not base_dir.is_absolute() and origin is not None:
                base_dir = origin / base_dir

        try:
            timeout = float(d.get("timeout", 10.0))
        except (TypeError, ValueError):
            raise ConfigError(f"timeout must be a number, got: {d.get('timeout')!r}") from None
        if timeout <= 0:
            raise ConfigError("timeout must be positive")

        max_depth = d.get("max_depth", 8)
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
            raise ConfigError(f"max_depth must be a non-negative integer, got: {max_depth!r}")

        return ExternalCfg(base_dir=base_dir, timeout=timeout, max_depth=max_depth)
