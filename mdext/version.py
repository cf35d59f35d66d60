from __future__ import annotations

from importlib import metadata

DIST_NAME = "markdown-external"


def tool_version() -> str:
    """Installed version; "0.0.0" when running from a source checkout."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def user_agent() -> str:
    """User-Agent sent with remote fetches."""
    return f"mdext/{tool_version()}"


__all__ = ["DIST_NAME", "tool_version", "user_agent"]
