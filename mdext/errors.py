"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from MdExtUserError.

Programming errors and bugs should NOT inherit from MdExtUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations

from .diagnostics import Severity


class MdExtUserError(Exception):
    """
    Base class for all user-facing errors in markdown-external.

    These errors indicate problems that the user can fix:
    configuration issues, unsupported files, missing identifiers, etc.
    """
    pass


class ConfigError(MdExtUserError):
    """Invalid or unreadable mdext.yaml."""
    pass


class InclusionError(MdExtUserError):
    """
    A single inclusion request could not be satisfied.

    Never escapes the Includer: it is converted into a diagnostic
    with the class-level severity and the fragment is left out.
    """
    severity: Severity = Severity.ERROR
    kind: str = "inclusion"


class UnsupportedFormat(InclusionError):
    severity = Severity.WARNING
    kind = "unsupported-format"

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(
            "Only markdown files (.md, .markdown, .qmd) are supported. "
            f"The file '{uri}' will not be included."
        )


class FetchFailed(InclusionError):
    kind = "fetch-failed"

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(
            f"Could not open file '{uri}'. "
            "Please check that the file path is correct and the file is accessible."
        )


class FragmentNotFound(InclusionError):
    kind = "fragment-not-found"

    def __init__(self, uri: str, identifier: str):
        self.uri = uri
        self.identifier = identifier
        super().__init__(
            f"Section or div '#{identifier}' not found in '{uri}'. "
            "Please check that the identifier matches a header or div in the file."
        )


class InvalidShiftValue(InclusionError):
    severity = Severity.WARNING
    kind = "invalid-shift"

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid shift-heading-level-by value '{value}'. "
            "Expected an integer. Headings will not be shifted."
        )


class IncludeDepthExceeded(InclusionError):
    kind = "depth-exceeded"

    def __init__(self, uri: str, max_depth: int):
        self.uri = uri
        self.max_depth = max_depth
        super().__init__(
            f"Nested inclusion of '{uri}' exceeds the maximum depth of {max_depth}. "
            "Check for files that include each other."
        )


__all__ = [
    "MdExtUserError",
    "ConfigError",
    "InclusionError",
    "UnsupportedFormat",
    "FetchFailed",
    "FragmentNotFound",
    "InvalidShiftValue",
    "IncludeDepthExceeded",
]
