"""Tests for the doxygen invocation."""

from __future__ import annotations

from pathlib import Path

from conandoc.doxygen.renderer import DEFAULT_TEMPLATES_DIR
from conandoc.doxygen.runner import DoxygenRunner, find_layout
from conandoc.process import ProcessRunner


def test_generate_passes_doxyfile_and_layout(tmp_path: Path) -> None:
    calls: list[tuple[list[str], bool]] = []

    def runner(args, *, capture=False, cwd=None):  # type: ignore[no-untyped-def]
        calls.append((list(args), capture))
        return 0, b""

    layout = tmp_path / "Layout.xml"
    doxyfile = tmp_path / ".doxy" / "DoxyFile"
    result = DoxygenRunner(ProcessRunner(runner=runner), layout=layout).generate(doxyfile)

    assert result.ok
    assert calls == [(["doxygen", str(doxyfile), "-l", str(layout)], False)]


def test_generate_returns_failure_status_untouched(tmp_path: Path) -> None:
    def runner(args, *, capture=False, cwd=None):  # type: ignore[no-untyped-def]
        return 2, b""

    result = DoxygenRunner(ProcessRunner(runner=runner), executable="doxygen-1.9").generate(
        tmp_path / "DoxyFile"
    )

    assert result.returncode == 2
    assert result.args[0] == "doxygen-1.9"


def test_default_layout_ships_with_package() -> None:
    layout = find_layout()

    assert layout == DEFAULT_TEMPLATES_DIR / "Layout.xml"
    assert layout.is_file()


def test_user_layout_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "Layout.xml").write_text("<doxygenlayout/>", encoding="utf-8")

    assert find_layout(tmp_path) == tmp_path / "Layout.xml"


def test_user_directory_without_layout_falls_back(tmp_path: Path) -> None:
    assert find_layout(tmp_path) == DEFAULT_TEMPLATES_DIR / "Layout.xml"
