"""Tests for output directory resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from conandoc.errors import PathEncodingError
from conandoc.models import PackageMetadata
from conandoc.output import entry_page, resolve_output

METADATA = PackageMetadata(name="foo", version="1.2")


def test_default_output_is_derived_from_name_and_version() -> None:
    assert resolve_output("pkg", METADATA) == "pkg/build/docs/foo_1.2"


def test_override_is_used_verbatim() -> None:
    assert resolve_output("pkg", METADATA, "/custom") == "/custom"
    assert resolve_output("pkg", PackageMetadata(name="bar", version="9"), "/custom") == "/custom"


def test_override_accepts_path_objects(tmp_path: Path) -> None:
    target = tmp_path / "docs"

    assert resolve_output("pkg", METADATA, target) == str(target)
    assert not target.exists()


def test_unrepresentable_output_is_rejected() -> None:
    with pytest.raises(PathEncodingError):
        resolve_output("pkg", METADATA, "/docs/\udcff")


def test_entry_page_sits_under_html() -> None:
    assert entry_page("pkg/build/docs/foo_1.2") == "pkg/build/docs/foo_1.2/html/index.html"
