from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import ExternalCfg, load_config
from .diagnostics import Diagnostics
from .directive import DirectiveExpander
from .errors import MdExtUserError
from .fetch import ResourceFetcher
from .include import Includer
from .jsonic import dumps as jdumps
from .markdown.render import render_markdown
from .validation import is_supported
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mdext",
        description="Embed sections and divs of external Markdown documents",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared arguments for render/include
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--base-dir",
            type=Path,
            help="directory relative include paths resolve against",
        )
        sp.add_argument(
            "--config",
            type=Path,
            help="path to mdext.yaml (default: ./mdext.yaml if present)",
        )
        sp.add_argument(
            "--verbose",
            action="store_true",
            help="debug logging on stderr",
        )

    sp_render = sub.add_parser("render", help="Expand external directives in a host document")
    sp_render.add_argument("host", type=Path, help="host Markdown/Quarto document")
    sp_render.add_argument("-o", "--output", type=Path, help="write here instead of stdout")
    sp_render.add_argument(
        "--strict",
        action="store_true",
        help="exit with code 1 when any inclusion failed with an error",
    )
    add_common(sp_render)

    sp_include = sub.add_parser("include", help="Print one external fragment as Markdown")
    sp_include.add_argument("uri", help="path or URL, optionally with #identifier")
    sp_include.add_argument(
        "--shift",
        metavar="N",
        help="shift heading levels by N (negative promotes)",
    )
    sp_include.add_argument(
        "--json",
        action="store_true",
        help="print the result with its diagnostics as JSON",
    )
    add_common(sp_include)

    sp_check = sub.add_parser("check", help="Report which paths are includable (JSON)")
    sp_check.add_argument("paths", nargs="+", help="paths or URLs to check")

    return p


def _setup_logging(verbose: bool) -> None:
    log = logging.getLogger("mdext")
    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not log.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)
    log.propagate = False


def _load_cfg(ns: argparse.Namespace) -> ExternalCfg:
    return load_config(Path.cwd(), getattr(ns, "config", None))


def _base_dir(ns: argparse.Namespace, cfg: ExternalCfg, fallback: Path) -> Path:
    if getattr(ns, "base_dir", None) is not None:
        return ns.base_dir
    if cfg.base_dir is not None:
        return cfg.base_dir
    return fallback


def _cmd_render(ns: argparse.Namespace) -> int:
    cfg = _load_cfg(ns)
    host: Path = ns.host
    try:
        text = host.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MdExtUserError(f"Cannot read host document {host}: {e}") from e

    fetcher = ResourceFetcher(_base_dir(ns, cfg, host.resolve().parent), timeout=cfg.timeout)
    expander = DirectiveExpander(Includer(fetch=fetcher), max_depth=cfg.max_depth)
    diags = Diagnostics()
    out = expander.expand(text, diags)

    if ns.output is not None:
        ns.output.parent.mkdir(parents=True, exist_ok=True)
        ns.output.write_text(out, encoding="utf-8")
    else:
        sys.stdout.write(out)
    return 1 if ns.strict and diags.has_errors() else 0


def _cmd_include(ns: argparse.Namespace) -> int:
    cfg = _load_cfg(ns)
    fetcher = ResourceFetcher(_base_dir(ns, cfg, Path.cwd()), timeout=cfg.timeout)
    result = Includer(fetch=fetcher).include(ns.uri, ns.shift)
    if ns.json:
        sys.stdout.write(jdumps({
            "uri": result.uri,
            "identifier": result.identifier,
            "shift": result.shift,
            "ok": result.ok,
            "markdown": render_markdown(result.blocks),
            "diagnostics": list(result.diagnostics),
        }))
    else:
        sys.stdout.write(render_markdown(result.blocks))
    return 1 if result.diagnostics.has_errors() else 0


def _cmd_check(ns: argparse.Namespace) -> int:
    sys.stdout.write(jdumps({p: is_supported(p) for p in ns.paths}))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(getattr(ns, "verbose", False)))

    try:
        if ns.cmd == "render":
            return _cmd_render(ns)
        if ns.cmd == "include":
            return _cmd_include(ns)
        if ns.cmd == "check":
            return _cmd_check(ns)
    except MdExtUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
