from __future__ import annotations

from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import ExternalCfg
from .paths import cfg_path
from ..errors import ConfigError

_yaml = YAML(typ="safe")


def load_config(root: Path, path: Optional[Path] = None) -> ExternalCfg:
    """
    Read mdext.yaml (explicit ``path`` or ``root``/mdext.yaml).

    A missing default file means defaults; a missing explicit file,
    malformed YAML or unknown keys raise ConfigError.
    """
    target = path.resolve() if path is not None else cfg_path(root)
    if not target.is_file():
        if path is not None:
            raise ConfigError(f"Config file not found: {target}")
        return ExternalCfg()
    try:
        raw = _yaml.load(target.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Failed to read {target}: {e}") from e
    return ExternalCfg.from_dict(raw, origin=target.parent)
