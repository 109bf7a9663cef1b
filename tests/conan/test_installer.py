"""Tests for the dependency install step."""

from __future__ import annotations

import pytest

from conandoc.conan.installer import DependencyInstaller
from conandoc.errors import InstallError
from conandoc.process import ProcessRunner
from tests._fixtures.fake_toolchain import FakeToolchain


def test_install_runs_with_default_profile(toolchain: FakeToolchain, process: ProcessRunner) -> None:
    folder = DependencyInstaller(process).install("pkg")

    assert folder == "pkg/.conan"
    assert toolchain.calls == [
        ["cdt", "conan", "install", "pkg", "-pr", "default", "-if", "pkg/.conan"],
    ]
    assert toolchain.capture_flags == [False]


def test_install_uses_configured_command_and_profile() -> None:
    calls: list[list[str]] = []

    def runner(args, *, capture=False, cwd=None):  # type: ignore[no-untyped-def]
        calls.append(list(args))
        return 0, b""

    DependencyInstaller(ProcessRunner(runner=runner), command=["conan"], profile="gcc12").install("pkg")

    assert calls == [["conan", "install", "pkg", "-pr", "gcc12", "-if", "pkg/.conan"]]


def test_install_failure_is_fatal_by_default() -> None:
    toolchain = FakeToolchain(install_status=1)

    with pytest.raises(InstallError, match="exited with status 1") as excinfo:
        DependencyInstaller(ProcessRunner(runner=toolchain)).install("pkg")

    assert excinfo.value.hint


def test_install_failure_is_tolerated_when_not_strict() -> None:
    toolchain = FakeToolchain(install_status=6)

    folder = DependencyInstaller(ProcessRunner(runner=toolchain), strict=False).install("pkg")

    assert folder == "pkg/.conan"
