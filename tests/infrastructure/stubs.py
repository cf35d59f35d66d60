"""
Collaborator stubs for Includer tests.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from mdext.include import Includer


class StubFetch:
    """In-memory Fetch: returns the registered text, None for unknown URIs; records calls."""

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self.files = dict(files or {})
        self.calls: List[str] = []

    def __call__(self, uri: str) -> Optional[str]:
        self.calls.append(uri)
        return self.files.get(uri)


def make_includer(files: Optional[Dict[str, str]] = None, **kwargs) -> tuple[Includer, StubFetch]:
    fetch = StubFetch(files)
    return Includer(fetch=fetch, **kwargs), fetch
