"""Shared fixtures: isolate HOME and the quire logger between tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point HOME at a temp dir outside tmp_path so ~/.quirerc.yml never leaks into tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("QUIRE_STARTER_REPO", raising=False)
    monkeypatch.delenv("QUIRE_LOG_LEVEL", raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_quire_logger():
    yield
    logger = logging.getLogger("quire")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
