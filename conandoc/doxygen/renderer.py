"""Renders the DoxyFile consumed by doxygen."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError

from ..errors import RenderError, TemplateError
from ..logging import get_logger
from ..models import PackageMetadata

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")
DOXYFILE_TEMPLATE = "DoxyFile.j2"
LAYOUT_FILE = "Layout.xml"


def doxyfile_path(output: str) -> Path:
    """Location of the rendered DoxyFile below an output directory."""
    return Path(output) / ".doxy" / "DoxyFile"


def template_search_path(templates_dir: Path | None) -> List[Path]:
    """User template directory first, then the packaged defaults."""
    directories: List[Path] = []
    if templates_dir:
        directories.append(templates_dir)
    directories.append(DEFAULT_TEMPLATES_DIR)
    # ensure uniqueness preserving order
    seen: set[str] = set()
    ordered: List[Path] = []
    for directory in directories:
        key = str(directory)
        if key not in seen:
            ordered.append(directory)
            seen.add(key)
    return ordered


class ConfigRenderer:
    """Fills the DoxyFile template with package name, version, sources and output."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("doxygen.renderer")

    def render(self, metadata: PackageMetadata, sources: Sequence[str], output: str) -> Path:
        target = doxyfile_path(output)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RenderError(f"Unable to create {target.parent}: {exc}") from exc

        text = self.render_text(self.build_context(metadata, sources, output))
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise RenderError(f"Unable to write {target}: {exc}") from exc
        self.logger.debug("Wrote %s", target)
        return target

    @staticmethod
    def build_context(
        metadata: PackageMetadata, sources: Sequence[str], output: str
    ) -> Dict[str, str]:
        # Paths containing spaces are not quoted; doxygen splits INPUT on whitespace.
        return {
            "name": metadata.name,
            "version": metadata.version,
            "sources": " ".join(sources),
            "output": output,
        }

    def render_text(self, context: Dict[str, str]) -> str:
        try:
            template = self._env.get_template(DOXYFILE_TEMPLATE)
            return template.render(**context)
        except JinjaTemplateError as exc:
            raise TemplateError(f"Unable to render {DOXYFILE_TEMPLATE}: {exc}") from exc

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        loader = FileSystemLoader([str(path) for path in template_search_path(templates_dir)])
        return Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )


__all__ = [
    "ConfigRenderer",
    "DEFAULT_TEMPLATES_DIR",
    "DOXYFILE_TEMPLATE",
    "LAYOUT_FILE",
    "doxyfile_path",
    "template_search_path",
]
