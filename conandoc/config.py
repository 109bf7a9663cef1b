"""Configuration loading for conandoc (.conandoc.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".conandoc.yml"

ENV_CONAN_KEY = "CONANDOC_CONAN"
ENV_DOXYGEN_KEY = "CONANDOC_DOXYGEN"
ENV_PROFILE_KEY = "CONANDOC_PROFILE"


@dataclass
class ConanConfig:
    """Settings for the Conan commands the pipeline runs."""

    executable: str = "conan"
    install_command: List[str] = field(default_factory=lambda: ["cdt", "conan"])
    profile: str = "default"
    strict_install: bool = True
    info_json_file: bool = False


@dataclass
class DoxygenConfig:
    """Settings for rendering the DoxyFile and invoking doxygen."""

    executable: str = "doxygen"
    templates_dir: Optional[Path] = None


@dataclass
class ConanDocConfig:
    """Represents the settings defined in .conandoc.yml."""

    root: Path
    conan: ConanConfig = field(default_factory=ConanConfig)
    doxygen: DoxygenConfig = field(default_factory=DoxygenConfig)


def load_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ConanDocConfig:
    """Load configuration from disk and apply environment overrides."""
    config_file = _resolve_config_path(config_path or Path.cwd())
    root = config_file.parent.resolve()
    env = os.environ if environ is None else environ

    config = ConanDocConfig(root=root)
    if config_file.exists():
        data = _read_config(config_file)
        if not isinstance(data, dict):
            raise ConfigError(f"{config_file.name} must contain a mapping at the root")
        _apply_conan(config.conan, _as_dict(data.get("conan")))
        _apply_doxygen(config.doxygen, _as_dict(data.get("doxygen")), root)

    _apply_env(config, env)
    return config


def _apply_conan(conan: ConanConfig, data: Dict[str, Any]) -> None:
    if not data:
        return
    conan.executable = _as_str(data.get("executable")) or conan.executable
    install_command = _as_str_list(data.get("install_command"))
    if install_command:
        conan.install_command = install_command
    conan.profile = _as_str(data.get("profile")) or conan.profile
    strict = _as_bool(data.get("strict_install"))
    if strict is not None:
        conan.strict_install = strict
    json_file = _as_bool(data.get("info_json_file"))
    if json_file is not None:
        conan.info_json_file = json_file


def _apply_doxygen(doxygen: DoxygenConfig, data: Dict[str, Any], root: Path) -> None:
    if not data:
        return
    doxygen.executable = _as_str(data.get("executable")) or doxygen.executable
    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        doxygen.templates_dir = (root / templates_dir).expanduser()


def _apply_env(config: ConanDocConfig, env: Mapping[str, str]) -> None:
    conan = env.get(ENV_CONAN_KEY, "").strip()
    if conan:
        config.conan.executable = conan
    doxygen = env.get(ENV_DOXYGEN_KEY, "").strip()
    if doxygen:
        config.doxygen.executable = doxygen
    profile = env.get(ENV_PROFILE_KEY, "").strip()
    if profile:
        config.conan.profile = profile


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConanConfig",
    "ConanDocConfig",
    "DoxygenConfig",
    "load_config",
]
