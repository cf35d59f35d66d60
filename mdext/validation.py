from __future__ import annotations

SUPPORTED_EXTENSIONS = (".md", ".markdown", ".qmd")
QMD_EXTENSION = ".qmd"


def is_supported(path: str) -> bool:
    """Case-insensitive extension allow-list check; "" is not supported."""
    if not path:
        return False
    return path.lower().endswith(SUPPORTED_EXTENSIONS)


def is_qmd(path: str) -> bool:
    """Quarto documents get the Quarto-flavoured reader."""
    return bool(path) and path.lower().endswith(QMD_EXTENSION)


__all__ = ["SUPPORTED_EXTENSIONS", "is_supported", "is_qmd"]
