"""Opens generated documentation in the default system viewer."""

from __future__ import annotations

import webbrowser
from pathlib import Path

from .errors import ViewerError


def open_in_viewer(path: Path) -> None:
    """Open a local file with the system's default handler."""
    try:
        opened = webbrowser.open(path.as_uri())
    except webbrowser.Error as exc:
        raise ViewerError(str(exc)) from exc
    if not opened:
        raise ViewerError("no usable browser was found")


__all__ = ["open_in_viewer"]
