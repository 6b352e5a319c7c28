"""Tests for quire.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from quire.config import (
    ASSET_DIR,
    STARTER_REPO_URL,
    ConfigError,
    InitOptions,
    QuireConfig,
    load_config,
)


def test_init_options_default_to_clone_and_install() -> None:
    options = InitOptions()
    assert options.clone is True
    assert options.install is True


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.yml")
    assert cfg.starter_repo == STARTER_REPO_URL
    assert cfg.asset_dir == ASSET_DIR
    assert cfg.log_level == "INFO"


def test_bundled_assets_exist() -> None:
    assert (ASSET_DIR / "_config.yml").is_file()
    assert (ASSET_DIR / "package.json").is_file()
    assert not (ASSET_DIR / ".git").exists()


def test_reads_home_config(isolated_home: Path) -> None:
    (isolated_home / ".quirerc.yml").write_text(
        "log_level: DEBUG\ninit:\n  starter_repo: https://example.com/mine.git\n  asset_dir: ~/starter\n"
    )
    cfg = load_config()
    assert cfg.log_level == "DEBUG"
    assert cfg.starter_repo == "https://example.com/mine.git"
    assert cfg.asset_dir == isolated_home / "starter"


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "quire.yml"
    path.write_text("log_level: WARNING\ninit:\n  starter_repo: https://example.com/file.git\n")
    monkeypatch.setenv("QUIRE_STARTER_REPO", "https://example.com/env.git")
    monkeypatch.setenv("QUIRE_LOG_LEVEL", "ERROR")

    cfg = load_config(path)
    assert cfg.starter_repo == "https://example.com/env.git"
    assert cfg.log_level == "ERROR"


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "quire.yml"
    path.write_text("init: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "quire.yml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_init_section_must_be_mapping() -> None:
    with pytest.raises(ConfigError):
        QuireConfig.from_dict({"init": "nope"})
