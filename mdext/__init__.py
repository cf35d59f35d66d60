"""Embed sections and divs of external Markdown documents into a host document."""

from __future__ import annotations

from .diagnostics import Diagnostic, Diagnostics, Severity
from .include import Includer, InclusionResult
from .validation import is_supported

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "Includer",
    "InclusionResult",
    "is_supported",
]
