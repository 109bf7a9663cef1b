"""Dependency installation via ``conan install``."""

from __future__ import annotations

from typing import Sequence

from ..errors import InstallError
from ..logging import get_logger
from ..process import ProcessRunner


class DependencyInstaller:
    """Materialises a package's dependencies into ``<ref>/.conan``."""

    def __init__(
        self,
        process: ProcessRunner | None = None,
        *,
        command: Sequence[str] = ("cdt", "conan"),
        profile: str = "default",
        strict: bool = True,
    ) -> None:
        self.process = process or ProcessRunner()
        self.command = list(command)
        self.profile = profile
        self.strict = strict
        self.logger = get_logger("conan.installer")

    @staticmethod
    def install_folder(reference: str) -> str:
        return f"{reference}/.conan"

    def install(self, reference: str) -> str:
        folder = self.install_folder(reference)
        result = self.process.run(
            [*self.command, "install", reference, "-pr", self.profile, "-if", folder]
        )
        if not result.ok:
            message = f"conan install for {reference} exited with status {result.returncode}"
            if self.strict:
                raise InstallError(
                    message,
                    hint="Re-run the install command by hand to see the Conan output.",
                )
            self.logger.warning("%s; continuing because strict_install is disabled", message)
        return folder


__all__ = ["DependencyInstaller"]
