"""Core data models passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .errors import OpenWarning


@dataclass(frozen=True)
class PackageMetadata:
    """Name, version and declared requirements reported by ``conan inspect``."""

    name: str
    version: str
    requires: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PipelineRequest:
    """User input for a single documentation run."""

    reference: str
    out: Optional[str] = None
    open_viewer: bool = False


@dataclass(frozen=True)
class PipelineOutcome:
    """Result of a documentation run that reached the generator."""

    returncode: int
    entry_page: Path
    output: str
    doxyfile: Path
    metadata: PackageMetadata
    sources: Tuple[str, ...]
    opened: Optional[bool] = None
    warnings: Tuple[OpenWarning, ...] = field(default_factory=tuple)
