"""DoxyFile rendering and doxygen invocation."""

from .renderer import ConfigRenderer, doxyfile_path
from .runner import DoxygenRunner, find_layout

__all__ = ["ConfigRenderer", "DoxygenRunner", "doxyfile_path", "find_layout"]
