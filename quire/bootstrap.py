"""Project bootstrap: populate a new site directory from the starter template."""

from __future__ import annotations

import os
import shutil
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from pathlib import Path

import click

from .config import InitOptions, QuireConfig
from .logging import get_logger
from .packages import install_dependencies
from .util import tildify
from .vcs import Git, GitError

logger = get_logger("init")


class InitError(RuntimeError):
    """Raised when the target directory cannot be initialized."""


class SourceStrategy(str, Enum):
    CLONE = "clone"
    COPY = "copy"


def resolve_target(destination: str | os.PathLike[str] | None, base_dir: Path) -> Path:
    """
    Resolve the directory to initialize and make sure it is usable.

    Args:
        destination: Optional path, relative paths are taken from ``base_dir``
        base_dir: Directory ``quire init`` was invoked from

    Returns:
        Absolute target path

    Raises:
        InitError: If the target exists and is not an empty directory
    """
    base = Path(os.path.abspath(base_dir))
    target = Path(os.path.abspath(base / destination)) if destination else base

    if target.exists():
        if not target.is_dir() or any(target.iterdir()):
            logger.critical(
                "%s not empty, please run `quire init` on an empty folder "
                "and then copy your files into it",
                click.style(tildify(target), fg="magenta"),
            )
            raise InitError(f"target not empty: {target}")
    return target


def copy_assets(asset_dir: Path, target: Path) -> None:
    """Copy the bundled starter tree, hidden files included, into ``target``."""
    shutil.copytree(asset_dir, target, dirs_exist_ok=True)


def acquire_source(target: Path, options: InitOptions, config: QuireConfig) -> SourceStrategy:
    """Populate ``target`` by cloning the starter repo or copying the bundled assets."""
    if options.clone:
        logger.info("Cloning quire-starter %s", config.starter_repo)
        try:
            Git().clone(config.starter_repo, target)
            return SourceStrategy.CLONE
        except GitError as exc:
            logger.debug("git clone error: %s", exc)
            logger.warning("git clone failed. Copying data instead")
    else:
        logger.info("Copying quire-starter from %s", tildify(config.asset_dir))

    copy_assets(config.asset_dir, target)
    return SourceStrategy.COPY


def remove_git_dir(target: Path) -> None:
    """
    Remove ``.git`` from ``target`` and from every nested subdirectory.

    A missing ``.git`` is not an error; subdirectories are scanned either way.
    """
    git_dir = target / ".git"
    try:
        if git_dir.is_dir() and not git_dir.is_symlink():
            shutil.rmtree(git_dir)
        else:
            # gitdir pointer files (submodule checkouts) or dangling entries
            git_dir.unlink()
    except FileNotFoundError:
        pass

    subdirs = [entry for entry in target.iterdir() if entry.is_dir() and not entry.is_symlink()]
    for subdir in subdirs:
        remove_git_dir(subdir)


def remove_git_modules(target: Path) -> None:
    """Remove the ``.gitmodules`` manifest from ``target`` if present."""
    try:
        (target / ".gitmodules").unlink()
    except FileNotFoundError:
        return


def strip_metadata(target: Path) -> None:
    """Drop version-control metadata so the new site starts without history."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [
            pool.submit(remove_git_dir, target),
            pool.submit(remove_git_modules, target),
        ]
        for future in futures:
            future.result()


def init_project(
    destination: str | os.PathLike[str] | None = None,
    *,
    base_dir: Path | None = None,
    options: InitOptions | None = None,
    config: QuireConfig | None = None,
) -> Path:
    """
    Initialize a new site directory.

    Args:
        destination: Target folder, defaults to ``base_dir``
        base_dir: Directory relative destinations are resolved against
            (defaults to the current directory)
        options: Clone/install switches
        config: Starter repository and asset locations

    Returns:
        The initialized target directory

    Raises:
        InitError: If the target directory is not empty
        OSError: If metadata cleanup fails for a reason other than a missing file
    """
    options = options or InitOptions()
    config = config or QuireConfig()
    target = resolve_target(destination, Path(base_dir or Path.cwd()))

    strategy = acquire_source(target, options, config)
    logger.debug("Populated %s using %s", target, strategy.value)

    strip_metadata(target)

    if options.install:
        install_dependencies(target)
    return target
