from pathlib import Path

import pytest

from mdext.config import ExternalCfg, load_config
from mdext.errors import ConfigError
from tests.infrastructure import write


def test_defaults_when_file_missing(tmp_path: Path):
    cfg = load_config(tmp_path)
    assert cfg == ExternalCfg()
    assert (cfg.timeout, cfg.max_depth, cfg.base_dir) == (10.0, 8, None)


def test_values_are_read(tmp_path: Path):
    write(tmp_path / "mdext.yaml", "base_dir: docs\ntimeout: 2.5\nmax_depth: 3\n")
    cfg = load_config(tmp_path)
    assert cfg.base_dir == tmp_path.resolve() / "docs"
    assert cfg.timeout == 2.5
    assert cfg.max_depth == 3


def test_explicit_path(tmp_path: Path):
    p = write(tmp_path / "conf" / "custom.yaml", "max_depth: 0\n")
    assert load_config(tmp_path, p).max_depth == 0
    with pytest.raises(ConfigError):
        load_config(tmp_path, tmp_path / "absent.yaml")


def test_empty_file_gives_defaults(tmp_path: Path):
    write(tmp_path / "mdext.yaml", "")
    assert load_config(tmp_path) == ExternalCfg()


@pytest.mark.parametrize("text", [
    "unknown: 1\n",
    "timeout: fast\n",
    "timeout: -1\n",
    "max_depth: -2\n",
    "max_depth: true\n",
    "base_dir: ''\n",
    "- a\n- b\n",
    "key: [unclosed\n",
])
def test_invalid_config(tmp_path: Path, text: str):
    write(tmp_path / "mdext.yaml", text)
    with pytest.raises(ConfigError):
        load_config(tmp_path)
