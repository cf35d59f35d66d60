"""
Inclusion orchestrator.

    ParseURI → Validate → Fetch → Parse → {LocateFragment} → Shift → Done

Validate, Fetch and LocateFragment may end the request early; the fragment
is then left out (empty result) and a diagnostic explains why. Nothing is
cached: every request fetches and parses again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from .diagnostics import Diagnostics, Severity
from .errors import FetchFailed, FragmentNotFound, InclusionError, InvalidShiftValue, UnsupportedFormat
from .fetch import Fetch
from .markdown.frontmatter import strip_frontmatter
from .markdown.model import Block, Document
from .markdown.normalize import shift_headers
from .markdown.parser import parse_markdown, parse_qmd
from .markdown.selectors import find_container, find_section
from .markdown.shortcodes import escape_shortcodes
from .validation import is_qmd, is_supported

COMPONENT = "external"

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")

# Parse collaborator: raw text → Document
Parse = Callable[[str], Document]


def split_uri(uri: str) -> Tuple[str, Optional[str]]:
    """``path.md#intro`` → (``path.md``, ``intro``); the identifier is taken verbatim."""
    target, sep, identifier = uri.partition("#")
    return (target, identifier) if sep else (uri, None)


def parse_shift(value: Union[str, int, None]) -> Optional[int]:
    """
    None/"" → None; otherwise a plain decimal integer (sign and surrounding
    blanks allowed). Raises InvalidShiftValue for anything else, including
    a blank-only value.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value)
    if text == "":
        return None
    if not _INTEGER.fullmatch(text):
        raise InvalidShiftValue(text)
    return int(text)


@dataclass
class InclusionResult:
    blocks: List[Block]
    diagnostics: Diagnostics
    uri: str
    identifier: Optional[str] = None
    failure: Optional[InclusionError] = None
    shift: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class Includer:
    """
    Resolves ``uri[#identifier]`` into a block list.

    The collaborators are injected so tests (and embedders) can swap them:
      fetch          – URI → text | None
      parse_qmd      – reader for .qmd documents
      parse_markdown – reader for .md/.markdown (shortcodes pre-escaped)
    """
    fetch: Fetch
    parse_qmd: Parse = field(default=parse_qmd)
    parse_markdown: Parse = field(default=parse_markdown)
    component: str = COMPONENT

    def include(
        self,
        uri: str,
        shift: Union[str, int, None] = None,
        *,
        diagnostics: Optional[Diagnostics] = None,
    ) -> InclusionResult:
        diags = diagnostics if diagnostics is not None else Diagnostics()
        target, identifier = split_uri(uri)

        delta: Optional[int] = None
        try:
            delta = parse_shift(shift)
        except InvalidShiftValue as e:
            # not fatal: the content is included unshifted
            self._report(diags, e)

        try:
            blocks = self._resolve(target, identifier, delta)
        except InclusionError as e:
            self._report(diags, e)
            return InclusionResult(blocks=[], diagnostics=diags, uri=target,
                                   identifier=identifier, failure=e, shift=delta)
        return InclusionResult(blocks=blocks, diagnostics=diags, uri=target,
                               identifier=identifier, shift=delta)

    # --- pipeline -------------------------------------------------------
    def _resolve(self, uri: str, identifier: Optional[str], delta: Optional[int]) -> List[Block]:
        if not is_supported(uri):
            raise UnsupportedFormat(uri)

        contents = self.fetch(uri)
        if contents is None:
            raise FetchFailed(uri)
        if isinstance(contents, bytes):
            contents = contents.decode("utf-8", errors="replace")

        if identifier is not None:
            contents = strip_frontmatter(contents)
        doc = self._parse(uri, contents)

        if identifier is None:
            return list(shift_headers(doc, delta))

        fragment = find_section(doc, identifier, True)
        if fragment is None:
            fragment = find_container(doc, identifier, False)
        if fragment is None:
            raise FragmentNotFound(uri, identifier)
        return list(shift_headers(fragment, delta))

    def _parse(self, uri: str, text: str) -> Document:
        if is_qmd(uri):
            return self.parse_qmd(text)
        return self.parse_markdown(escape_shortcodes(text))

    def _report(self, diags: Diagnostics, err: InclusionError) -> None:
        if err.severity is Severity.WARNING:
            diags.warn(self.component, str(err), kind=err.kind)
        else:
            diags.error(self.component, str(err), kind=err.kind)


__all__ = ["COMPONENT", "Includer", "InclusionResult", "split_uri", "parse_shift"]
