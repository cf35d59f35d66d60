from pathlib import Path

from tests.infrastructure import jload, run_cli, write


def test_render_host_document(tmpproj: Path):
    cp = run_cli(tmpproj, "render", "host.md")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == (
        "# Host\n\n"
        "Before.\n\n"
        "### Install\n\n"
        "Run the installer.\n\n"
        "#### Linux\n\n"
        "Use the package manager.\n\n"
        "After.\n"
    )


def test_render_to_file(tmpproj: Path):
    cp = run_cli(tmpproj, "render", "host.md", "-o", "out/host.md")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == ""
    assert "### Install" in (tmpproj / "out" / "host.md").read_text(encoding="utf-8")


def test_render_strict_fails_on_missing_fragment(tmpproj: Path):
    write(tmpproj / "bad.md", "Intro\n\n{{< external docs/guide.md#nope >}}\n")
    cp = run_cli(tmpproj, "render", "bad.md")
    assert cp.returncode == 0
    assert "'#nope' not found" in cp.stderr

    cp = run_cli(tmpproj, "render", "bad.md", "--strict")
    assert cp.returncode == 1
    assert cp.stdout == "Intro\n\n"


def test_include_container(tmpproj: Path):
    cp = run_cli(tmpproj, "include", "docs/guide.md#tip")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == "## Tip\n\nShortcodes like {{{< meta title >}}} stay literal.\n"


def test_include_with_negative_shift(tmpproj: Path):
    cp = run_cli(tmpproj, "include", "docs/guide.md#install", "--shift", "-2")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout.startswith("**Install**\n\nRun the installer.\n\n# Linux\n")


def test_include_unsupported_is_a_warning(tmpproj: Path):
    cp = run_cli(tmpproj, "include", "notes.txt#intro")
    assert cp.returncode == 0
    assert cp.stdout == ""
    assert "[WARNING] [external] Only markdown files" in cp.stderr


def test_base_dir_from_config(tmpproj: Path):
    write(tmpproj / "mdext.yaml", "base_dir: docs\n")
    cp = run_cli(tmpproj, "include", "guide.md#usage")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout.startswith("## Usage\n\nCall it.\n\n::: {#tip .callout-tip}\n")


def test_invalid_config_is_a_user_error(tmpproj: Path):
    write(tmpproj / "mdext.yaml", "bogus: 1\n")
    cp = run_cli(tmpproj, "include", "docs/guide.md")
    assert cp.returncode == 2
    assert "unknown key(s): bogus" in cp.stderr


def test_check(tmp_path: Path):
    cp = run_cli(tmp_path, "check", "a.md", "b.txt", "c.QMD")
    assert cp.returncode == 0
    assert jload(cp.stdout) == {"a.md": True, "b.txt": False, "c.QMD": True}


def test_include_json(tmpproj: Path):
    cp = run_cli(tmpproj, "include", "docs/guide.md#nope", "--shift", "x", "--json")
    assert cp.returncode == 1
    data = jload(cp.stdout)
    assert data["uri"] == "docs/guide.md"
    assert data["identifier"] == "nope"
    assert data["shift"] is None
    assert data["ok"] is False
    assert data["markdown"] == ""
    assert [(d["severity"], d["kind"]) for d in data["diagnostics"]] == [
        ("warning", "invalid-shift"),
        ("error", "fragment-not-found"),
    ]
