"""Thin wrapper around external process invocation."""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

from .errors import LaunchError
from .logging import get_logger

RawRunner = Callable[..., Tuple[int, bytes]]


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured stdout of a finished command."""

    args: Tuple[str, ...]
    returncode: int
    stdout: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def text(self) -> str:
        """Decode captured stdout as UTF-8, raising ``UnicodeDecodeError`` on bad bytes."""
        return self.stdout.decode("utf-8")


class ProcessRunner:
    """Runs one external command at a time and waits for it to finish.

    Child stdout is captured only when requested; stderr is always discarded so
    the terminal shows nothing but progress output. Commands are attempted once
    and never time out.
    """

    def __init__(self, runner: RawRunner | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("process")

    def run(
        self,
        args: Iterable[str],
        *,
        capture: bool = False,
        cwd: Optional[Path] = None,
    ) -> ProcessResult:
        argv = tuple(str(arg) for arg in args)
        self.logger.debug("Running %s", shlex.join(argv))
        try:
            returncode, stdout = self._runner(list(argv), capture=capture, cwd=cwd)
        except FileNotFoundError as exc:
            raise LaunchError(
                f"Unable to locate '{argv[0]}'. Ensure it is installed and available in PATH."
            ) from exc
        except OSError as exc:
            raise LaunchError(f"Unable to launch '{argv[0]}': {exc}") from exc
        self.logger.debug("%s exited with status %d", argv[0], returncode)
        return ProcessResult(args=argv, returncode=returncode, stdout=stdout if capture else b"")

    @staticmethod
    def _default_runner(
        args: list[str],
        *,
        capture: bool = False,
        cwd: Optional[Path] = None,
    ) -> Tuple[int, bytes]:
        completed = subprocess.run(
            args,
            cwd=str(cwd) if cwd is not None else None,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE if capture else subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        return completed.returncode, completed.stdout or b""


__all__ = ["ProcessResult", "ProcessRunner"]
