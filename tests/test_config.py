"""Tests for conandoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from conandoc.config import ConanDocConfig, load_config
from conandoc.errors import ConfigError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path, environ={})

    assert isinstance(config, ConanDocConfig)
    assert config.root == tmp_path.resolve()
    assert config.conan.executable == "conan"
    assert config.conan.install_command == ["cdt", "conan"]
    assert config.conan.profile == "default"
    assert config.conan.strict_install is True
    assert config.conan.info_json_file is False
    assert config.doxygen.executable == "doxygen"
    assert config.doxygen.templates_dir is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".conandoc.yml"
    config_file.write_text(
        """
conan:
  executable: /opt/conan/bin/conan
  install_command: [conan]
  profile: gcc12-release
  strict_install: false
  info_json_file: yes
doxygen:
  executable: doxygen-1.9
  templates_dir: docs/templates
""",
        encoding="utf-8",
    )

    config = load_config(config_file, environ={})

    assert config.conan.executable == "/opt/conan/bin/conan"
    assert config.conan.install_command == ["conan"]
    assert config.conan.profile == "gcc12-release"
    assert config.conan.strict_install is False
    assert config.conan.info_json_file is True
    assert config.doxygen.executable == "doxygen-1.9"
    assert config.doxygen.templates_dir == tmp_path.resolve() / "docs" / "templates"


def test_install_command_accepts_a_string(tmp_path: Path) -> None:
    (tmp_path / ".conandoc.yml").write_text("conan:\n  install_command: cdt conan\n", encoding="utf-8")

    config = load_config(tmp_path, environ={})

    assert config.conan.install_command == ["cdt", "conan"]


def test_environment_overrides_file_values(tmp_path: Path) -> None:
    (tmp_path / ".conandoc.yml").write_text("conan:\n  profile: clang\n", encoding="utf-8")

    config = load_config(
        tmp_path,
        environ={
            "CONANDOC_CONAN": "conan1",
            "CONANDOC_DOXYGEN": "/usr/local/bin/doxygen",
            "CONANDOC_PROFILE": "msvc",
        },
    )

    assert config.conan.executable == "conan1"
    assert config.doxygen.executable == "/usr/local/bin/doxygen"
    assert config.conan.profile == "msvc"


def test_empty_config_file_gives_defaults(tmp_path: Path) -> None:
    (tmp_path / ".conandoc.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path, environ={}).conan.profile == "default"


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".conandoc.yml").write_text("- conan\n- doxygen\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path, environ={})


def test_malformed_yaml_is_rejected(tmp_path: Path) -> None:
    (tmp_path / ".conandoc.yml").write_text("conan: [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path, environ={})
