"""Thin wrapper around external process execution."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from .logging import get_logger

logger = get_logger("process")


class SpawnError(RuntimeError):
    """Raised when an external command is missing or exits with a non-zero status."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def command_exists(name: str) -> bool:
    """Return True if ``name`` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def spawn(
    command: str,
    args: Sequence[str] = (),
    *,
    cwd: Path | None = None,
    inherit: bool = False,
) -> str:
    """
    Run ``command`` with ``args`` and return its standard output.

    Args:
        command: Executable name or path
        args: Command arguments
        cwd: Working directory for the child process
        inherit: If True, pass the standard streams through to the terminal
            and return an empty string

    Returns:
        Captured stdout (empty when ``inherit`` is set)

    Raises:
        SpawnError: If the executable cannot be started or exits non-zero
    """
    argv = [command, *args]
    logger.debug("Running %s", " ".join(argv))
    try:
        if inherit:
            result = subprocess.run(argv, cwd=cwd, check=False)
        else:
            result = subprocess.run(
                argv,
                cwd=cwd,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
    except OSError as exc:
        raise SpawnError(f"{command}: {exc.strerror or exc}") from exc

    if result.returncode != 0:
        stderr = (result.stderr or "").strip() if not inherit else ""
        raise SpawnError(
            stderr or f"{' '.join(argv)} exited with status {result.returncode}",
            returncode=result.returncode,
            stderr=stderr,
        )
    return "" if inherit else result.stdout
