"""Per-stage progress reporting with a live spinner and elapsed time."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.text import Text


def format_elapsed(seconds: float) -> str:
    """Render a duration as ``HH:MM:SS``."""
    total = max(int(seconds), 0)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class StageHandle:
    """Handed to the body of a stage so it can set its success message."""

    def __init__(self, message: str) -> None:
        self.message = message
        self.result_message: Optional[str] = None

    def succeed(self, message: str) -> None:
        self.result_message = message


class StageReporter:
    """Shows one spinner per stage and leaves a single summary line behind.

    The spinner's refresh thread is stopped before the summary line is
    printed, whether the stage body returned or raised.
    """

    def __init__(self, console: Console | None = None, *, refresh_per_second: float = 20) -> None:
        self.console = console or Console()
        self.refresh_per_second = refresh_per_second

    @contextmanager
    def stage(self, message: str) -> Iterator[StageHandle]:
        handle = StageHandle(message)
        progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
            refresh_per_second=self.refresh_per_second,
        )
        started = time.monotonic()
        try:
            progress.start()
            try:
                progress.add_task(f"[yellow]{escape(message)}[/yellow]", total=None)
                yield handle
            finally:
                progress.stop()
        except Exception as exc:
            self._finish(f"Error: {exc}", "red", started)
            raise
        self._finish(handle.result_message or message, "green", started)

    def info(self, message: str) -> None:
        self.console.print(Text(message))

    def success(self, message: str) -> None:
        self.console.print(Text(message, style="green"))

    def warning(self, message: str) -> None:
        self.console.print(Text(message, style="yellow"))

    def error(self, message: str) -> None:
        self.console.print(Text(message, style="red"))

    def _finish(self, message: str, style: str, started: float) -> None:
        elapsed = format_elapsed(time.monotonic() - started)
        self.console.print(Text.assemble((message, style), (f" [{elapsed}]", "dim")))


__all__ = ["StageHandle", "StageReporter", "format_elapsed"]
