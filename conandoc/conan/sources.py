"""Dependency source folder discovery via ``conan info``."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any, List

from ..errors import SourceLocationError
from ..logging import get_logger
from ..process import ProcessRunner


class SourceLocator:
    """Collects the package folder of every node in the dependency graph.

    By default the JSON report is read from the last non-empty line of
    stdout, since Conan prints diagnostics ahead of it. With ``json_file``
    enabled the report is written by Conan to a temporary file instead.
    """

    def __init__(
        self,
        process: ProcessRunner | None = None,
        *,
        executable: str = "conan",
        json_file: bool = False,
    ) -> None:
        self.process = process or ProcessRunner()
        self.executable = executable
        self.json_file = json_file
        self.logger = get_logger("conan.sources")

    def locate(self, reference: str) -> List[str]:
        payload = self._read_json_file(reference) if self.json_file else self._read_stdout(reference)
        folders = extract_source_folders(payload, reference)
        self.logger.debug("Located %d source folder(s) for %s", len(folders), reference)
        return folders

    def _read_stdout(self, reference: str) -> str:
        result = self.process.run(
            [self.executable, "info", reference, "--paths", "--json"],
            capture=True,
        )
        try:
            text = result.text()
        except UnicodeDecodeError as exc:
            raise SourceLocationError("conan info returned non-text output") from exc
        return select_json_line(text)

    def _read_json_file(self, reference: str) -> str:
        with tempfile.TemporaryDirectory(prefix="conandoc-") as tmp:
            report = Path(tmp) / "info.json"
            self.process.run([self.executable, "info", reference, "--paths", "--json", str(report)])
            try:
                return report.read_text(encoding="utf-8")
            except FileNotFoundError as exc:
                raise SourceLocationError(f"conan info did not write a report for {reference}") from exc
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceLocationError(f"Unable to read conan info report: {exc}") from exc


def select_json_line(text: str) -> str:
    """Return the last non-empty line of mixed diagnostic and JSON output."""
    for line in reversed(text.splitlines()):
        if line.strip():
            return line.strip()
    raise SourceLocationError("conan info produced no output")


def extract_source_folders(payload: str, reference: str) -> List[str]:
    """Pull ``package_folder`` entries from a ``conan info`` JSON array.

    Order follows Conan's report and duplicates are kept. Entries without a
    string ``package_folder`` are skipped. ``<reference>/sources`` is always
    appended last.
    """
    try:
        nodes: Any = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise SourceLocationError(f"Failed to parse conan info output: {exc}") from exc
    if not isinstance(nodes, list):
        raise SourceLocationError("conan info output is not a JSON array")

    folders: List[str] = []
    for node in nodes:
        if not isinstance(node, dict):
            continue
        folder = node.get("package_folder")
        if isinstance(folder, str):
            folders.append(folder)
    folders.append(f"{reference}/sources")
    return folders


__all__ = ["SourceLocator", "extract_source_folders", "select_json_line"]
