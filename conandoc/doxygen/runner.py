"""Invokes doxygen against a rendered DoxyFile."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger
from ..process import ProcessResult, ProcessRunner
from .renderer import LAYOUT_FILE, template_search_path


def find_layout(templates_dir: Path | None = None) -> Path:
    """Return the first ``Layout.xml`` on the template search path."""
    candidates = template_search_path(templates_dir)
    for directory in candidates:
        candidate = directory / LAYOUT_FILE
        if candidate.is_file():
            return candidate
    return candidates[-1] / LAYOUT_FILE


class DoxygenRunner:
    """Runs ``doxygen <DoxyFile> -l <Layout.xml>`` with output suppressed.

    The exit status is returned untouched; interpreting it is left to the caller.
    """

    def __init__(
        self,
        process: ProcessRunner | None = None,
        *,
        executable: str = "doxygen",
        layout: Path | None = None,
    ) -> None:
        self.process = process or ProcessRunner()
        self.executable = executable
        self.layout = layout or find_layout()
        self.logger = get_logger("doxygen.runner")

    def generate(self, doxyfile: Path) -> ProcessResult:
        self.logger.debug("Generating docs from %s with layout %s", doxyfile, self.layout)
        return self.process.run([self.executable, str(doxyfile), "-l", str(self.layout)])


__all__ = ["DoxygenRunner", "find_layout"]
