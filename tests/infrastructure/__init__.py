"""
Unified test infrastructure for markdown-external.

Modules:
- file_utils: Utilities for creating files and directories
- doc_builders: Short constructors for block trees
- stubs: Fetch/parse collaborators for orchestrator tests
- cli_utils: Running the CLI in a subprocess
"""

from .file_utils import write
from .doc_builders import h, p, div, hr, other
from .stubs import StubFetch, make_includer
from .cli_utils import run_cli, jload

__all__ = [
    # File utilities
    "write",
    # Document builders
    "h", "p", "div", "hr", "other",
    # Collaborator stubs
    "StubFetch", "make_includer",
    # CLI
    "run_cli", "jload",
]
