import textwrap
from pathlib import Path

import pytest

from mdext.diagnostics import Diagnostics
from tests.infrastructure.file_utils import write


@pytest.fixture
def diags() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Minimal project: a host document and the files it includes."""
    root = tmp_path
    write(
        root / "docs" / "guide.md",
        textwrap.dedent("""
        ---
        title: Guide
        ---

        # Guide {#guide}

        Intro text.

        ## Install {#install}

        Run the installer.

        ### Linux

        Use the package manager.

        ## Usage {#usage}

        Call it.

        ::: {#tip .callout-tip}
        ## Tip

        Shortcodes like {{< meta title >}} stay literal.
        :::
        """).lstrip(),
    )
    write(
        root / "host.md",
        textwrap.dedent("""
        # Host

        Before.

        {{< external docs/guide.md#install shift=1 >}}

        After.
        """).lstrip(),
    )
    return root
