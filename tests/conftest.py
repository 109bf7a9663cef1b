from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from conandoc.process import ProcessRunner
from conandoc.progress import StageReporter
from tests._fixtures.fake_toolchain import FakeToolchain


@pytest.fixture
def toolchain() -> FakeToolchain:
    """Provide a scripted conan/doxygen toolchain with default answers."""
    return FakeToolchain()


@pytest.fixture
def process(toolchain: FakeToolchain) -> ProcessRunner:
    return ProcessRunner(runner=toolchain)


@pytest.fixture
def console() -> Console:
    """Console that records output instead of writing to the terminal."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def reporter(console: Console) -> StageReporter:
    return StageReporter(console)


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """A package checkout the pipeline can write docs into."""
    root = tmp_path / "pkg"
    (root / "sources").mkdir(parents=True)
    return root
