from __future__ import annotations

from .load import load_config
from .model import ExternalCfg
from .paths import CFG_FILE, cfg_path

__all__ = ["load_config", "ExternalCfg", "CFG_FILE", "cfg_path"]
