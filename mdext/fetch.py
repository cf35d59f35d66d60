from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union
from urllib.parse import unquote, urlparse

import httpx

from .version import user_agent

logger = logging.getLogger(__name__)

# Fetch collaborator: URI → text, or None when the resource is unavailable.
Fetch = Callable[[str], Optional[Union[str, bytes]]]

_REMOTE_SCHEMES = ("http://", "https://")


class ResourceFetcher:
    """
    Default Fetch implementation.

    Resolves:
      • http(s) URLs via httpx (redirects followed)
      • file:// URLs and plain paths; relative paths against base_dir

    Any failure (missing file, non-2xx status, transport error, bad encoding)
    is reported as None; the caller decides how to surface it.
    """

    def __init__(self, base_dir: Optional[Path] = None, *, timeout: float = 10.0,
                 client: Optional[httpx.Client] = None):
        self.base_dir = (base_dir or Path.cwd()).resolve()
        self.timeout = timeout
        self._client = client

    def __call__(self, uri: str) -> Optional[str]:
        if uri.lower().startswith(_REMOTE_SCHEMES):
            return self._fetch_remote(uri)
        return self._read_local(uri)

    def resolve_path(self, uri: str) -> Path:
        if uri.lower().startswith("file://"):
            return Path(unquote(urlparse(uri).path))
        p = Path(uri).expanduser()
        return p if p.is_absolute() else self.base_dir / p

    def _read_local(self, uri: str) -> Optional[str]:
        path = self.resolve_path(uri)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            return None

    def _fetch_remote(self, uri: str) -> Optional[str]:
        headers = {"User-Agent": user_agent()}
        try:
            if self._client is not None:
                resp = self._client.get(uri, headers=headers)
            else:
                with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                    resp = client.get(uri, headers=headers)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.debug("Failed to fetch %s: %s", uri, e)
            return None
        return resp.text


__all__ = ["Fetch", "ResourceFetcher"]
