"""Output directory resolution."""

from __future__ import annotations

import os
from typing import Optional, Union

from .errors import PathEncodingError
from .models import PackageMetadata

PathLike = Union[str, "os.PathLike[str]"]


def default_output(reference: str, metadata: PackageMetadata) -> str:
    return f"{reference}/build/docs/{metadata.name}_{metadata.version}"


def resolve_output(
    reference: str,
    metadata: PackageMetadata,
    override: Optional[PathLike] = None,
) -> str:
    """Return the docs destination, preferring a user override verbatim."""
    output = os.fspath(override) if override is not None else default_output(reference, metadata)
    try:
        output.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathEncodingError(f"Output path {output!r} cannot be represented as text") from exc
    return output


def entry_page(output: str) -> str:
    """Path of the generated HTML entry page below an output directory."""
    return f"{output}/html/index.html"


__all__ = ["default_output", "entry_page", "resolve_output"]
