"""Adapters around the Conan command line."""

from .inspector import MetadataInspector, parse_requires
from .installer import DependencyInstaller
from .sources import SourceLocator, extract_source_folders, select_json_line

__all__ = [
    "DependencyInstaller",
    "MetadataInspector",
    "SourceLocator",
    "extract_source_folders",
    "parse_requires",
    "select_json_line",
]
