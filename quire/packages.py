"""Package manager detection and dependency installation."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .logging import get_logger
from .process import SpawnError, command_exists, spawn

logger = get_logger("packages")

# Only Yarn classic (1.x) understands the install flags below.
YARN_SUPPORTED_MAJOR = "1"


class PackageManager(Enum):
    YARN = ("yarn", ("install", "--production", "--ignore-optional", "--silent"))
    PNPM = ("pnpm", ("install", "--prod", "--no-optional", "--silent"))
    NPM = ("npm", ("install", "--only=production", "--optional=false", "--silent"))

    def __init__(self, command: str, install_args: tuple[str, ...]) -> None:
        self.command = command
        self.install_args = install_args


def detect_package_manager() -> PackageManager:
    """Pick the first available manager in priority order: yarn, pnpm, npm."""
    if command_exists(PackageManager.YARN.command):
        return PackageManager.YARN
    if command_exists(PackageManager.PNPM.command):
        return PackageManager.PNPM
    return PackageManager.NPM


def resolve_package_manager(target: Path) -> PackageManager:
    """
    Detect the package manager to use inside ``target``.

    Yarn releases after 1.x reject the production install flags, so any
    other reported version falls back to npm.

    Raises:
        SpawnError: If the yarn version query fails
    """
    manager = detect_package_manager()
    if manager is PackageManager.YARN:
        version = spawn(manager.command, ["--version"], cwd=target).strip()
        if not version.startswith(YARN_SUPPORTED_MAJOR):
            logger.debug("yarn %s is not supported, using npm", version)
            return PackageManager.NPM
    return manager


def install_dependencies(target: Path) -> bool:
    """Install production dependencies in ``target``; return False on failure."""
    logger.info("Install dependencies")
    try:
        manager = resolve_package_manager(target)
        spawn(manager.command, manager.install_args, cwd=target, inherit=True)
    except SpawnError as exc:
        logger.debug("Dependency installation failed: %s", exc)
        logger.warning(
            "Failed to install dependencies. Please run 'npm install' in \"%s\" folder.",
            target,
        )
        return False
    logger.info("Start blogging with Quire!")
    return True
