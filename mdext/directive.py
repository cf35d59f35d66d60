"""
Host document expansion.

A directive is a shortcode that is the only content of its line and is
surrounded by blank lines:

    {{< external path/to/file.md#section-id shift-heading-level-by=1 >}}

Directive lines inside fenced code blocks are left alone.
"""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .diagnostics import Diagnostics
from .errors import IncludeDepthExceeded
from .include import Includer
from .markdown.parser import scan_fenced
from .markdown.render import render_blocks
from .markdown.shortcodes import match_shortcode_line
from .validation import is_qmd

logger = logging.getLogger(__name__)

DIRECTIVE_NAME = "external"
# lookup order: the canonical key wins over the alias
SHIFT_KEYS = ("shift-heading-level-by", "shift")
DEFAULT_MAX_DEPTH = 8


@dataclass(frozen=True)
class Directive:
    uri: str
    shift: Optional[str] = None
    ignored: Tuple[str, ...] = ()    # unrecognised arguments, as written


def parse_directive(line: str) -> Optional[Directive]:
    """``{{< external uri[#id] [key=value …] >}}`` → Directive, anything else → None."""
    sc = match_shortcode_line(line)
    if sc is None or sc[0] != DIRECTIVE_NAME:
        return None
    try:
        args = shlex.split(sc[1])
    except ValueError as e:
        logger.debug("Malformed directive arguments %r: %s", sc[1], e)
        return None

    positional: List[str] = []
    kwargs: dict = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if sep:
            kwargs[key] = value
        else:
            positional.append(arg)

    # the first key present wins, even with an empty value (no shift)
    shift: Optional[str] = None
    for key in SHIFT_KEYS:
        if key in kwargs:
            shift = kwargs[key]
            break

    ignored = list(positional[1:])
    ignored.extend(f"{k}={v}" for k, v in kwargs.items() if k not in SHIFT_KEYS)
    return Directive(uri=positional[0] if positional else "", shift=shift, ignored=tuple(ignored))


def _is_blank(lines: List[str], i: int) -> bool:
    return i < 0 or i >= len(lines) or not lines[i].strip()


class DirectiveExpander:
    """
    Replaces directive lines in a host document with the rendered Markdown
    of the referenced fragments. Nested directives in included .qmd content
    are expanded too, up to ``max_depth`` levels.
    """

    def __init__(self, includer: Includer, *, max_depth: int = DEFAULT_MAX_DEPTH):
        self.includer = includer
        self.max_depth = max_depth

    def expand(self, text: str, diagnostics: Optional[Diagnostics] = None, *, _depth: int = 0) -> str:
        diags = diagnostics if diagnostics is not None else Diagnostics()
        lines = text.splitlines()
        fenced = scan_fenced(lines)

        out: List[str] = []
        for i, line in enumerate(lines):
            if any(a <= i < b for a, b in fenced):
                out.append(line)
                continue
            directive = parse_directive(line)
            if directive is None or not (_is_blank(lines, i - 1) and _is_blank(lines, i + 1)):
                out.append(line)
                continue
            replacement = self._expand_one(directive, diags, _depth)
            if replacement:
                out.append(replacement)

        result = "\n".join(out)
        if text.endswith("\n") and result:
            result += "\n"
        return result

    def _expand_one(self, directive: Directive, diags: Diagnostics, depth: int) -> str:
        if directive.ignored:
            diags.warn(
                self.includer.component,
                f"Ignoring unsupported argument(s) {', '.join(directive.ignored)} "
                f"for '{directive.uri}'.",
                kind="ignored-argument",
            )
        result = self.includer.include(directive.uri, directive.shift, diagnostics=diags)
        if not result.ok:
            return ""
        rendered = render_blocks(result.blocks)
        if not is_qmd(result.uri) or not any(parse_directive(ln) for ln in rendered.splitlines()):
            return rendered
        if depth + 1 > self.max_depth:
            err = IncludeDepthExceeded(result.uri, self.max_depth)
            diags.error(self.includer.component, str(err), kind=err.kind)
            return ""
        return self.expand(rendered, diags, _depth=depth + 1)


def expand(text: str, includer: Includer, diagnostics: Optional[Diagnostics] = None,
           *, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Shortcut for DirectiveExpander(includer, max_depth=…).expand(text, diagnostics)."""
    return DirectiveExpander(includer, max_depth=max_depth).expand(text, diagnostics)


__all__ = ["Directive", "DirectiveExpander", "parse_directive", "expand", "SHIFT_KEYS"]
