from __future__ import annotations

import re
from typing import Optional, Tuple

# {{< name args >}}: lazy, may span lines, needs whitespace before the closer
_SHORTCODE = re.compile(r"(\{\{<.*?[ \t]>\}\})", re.DOTALL)

_SHORTCODE_LINE = re.compile(r"^\{\{<\s*(?P<name>[\w\-]+)(?P<args>.*?)\s*>\}\}$")


def escape_shortcodes(text: str) -> str:
    """
    Wrap every ``{{< … >}}`` in an extra brace pair (``{{{< … >}}}``) so the
    generic Markdown reader keeps it as literal text instead of running it.
    """
    return _SHORTCODE.sub(r"{\1}", text)


def match_shortcode_line(line: str) -> Optional[Tuple[str, str]]:
    """A line that is exactly one shortcode → (name, raw args); otherwise None."""
    m = _SHORTCODE_LINE.match(line.strip())
    if not m:
        return None
    return m.group("name"), m.group("args").strip()


__all__ = ["escape_shortcodes", "match_shortcode_line"]
