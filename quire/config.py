"""Configuration handling for Quire."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .util import deep_merge, env_first

CONFIG_FILENAME = ".quirerc.yml"

ASSET_DIR = Path(__file__).resolve().parent / "assets"
STARTER_REPO_URL = "https://github.com/quire-site/quire-starter.git"

DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "INFO",
    "init": {
        "starter_repo": STARTER_REPO_URL,
        "asset_dir": None,
    },
}


class ConfigError(Exception):
    """Raised when configuration could not be loaded or parsed."""


@dataclass(frozen=True)
class InitOptions:
    """Per-invocation switches for ``quire init``."""

    clone: bool = True
    install: bool = True


@dataclass(frozen=True)
class QuireConfig:
    """Starter template locations and logging level shared by every command."""

    starter_repo: str = STARTER_REPO_URL
    asset_dir: Path = ASSET_DIR
    log_level: str = DEFAULT_CONFIG["log_level"]
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuireConfig":
        """Construct from a dictionary, applying defaults for missing keys."""
        merged = deep_merge(DEFAULT_CONFIG, data)
        init = merged.get("init") or {}
        if not isinstance(init, dict):
            raise ConfigError("The 'init' section must be a mapping.")
        asset_dir = init.get("asset_dir")
        return cls(
            starter_repo=str(init.get("starter_repo") or STARTER_REPO_URL),
            asset_dir=Path(asset_dir).expanduser() if asset_dir else ASSET_DIR,
            log_level=str(merged.get("log_level") or "INFO"),
            raw=merged,
        )


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> QuireConfig:
    """Load configuration from a file, applying defaults and environment overrides."""
    config_path = path or default_config_path()
    payload: dict[str, Any] = {}
    if config_path.exists():
        try:
            with config_path.open("r", encoding="utf-8") as handle:
                payload = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}") from exc

        if not isinstance(payload, dict):
            raise ConfigError("Configuration root must be a mapping.")

    overrides: dict[str, Any] = {}
    starter_repo = env_first("QUIRE_STARTER_REPO")
    if starter_repo:
        overrides["init"] = {"starter_repo": starter_repo}
    log_level = env_first("QUIRE_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level

    return QuireConfig.from_dict(deep_merge(payload, overrides))
