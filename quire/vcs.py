"""Version control helpers built on top of git."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .process import SpawnError, spawn


class GitError(SpawnError):
    """Raised when a git command cannot run or exits with a non-zero status."""


class Git:
    """
    Lightweight wrapper around the git commands ``quire`` needs.
    
    Commands run through :func:`quire.process.spawn` relative to the worktree.
    """

    def __init__(self, worktree: Path | None = None) -> None:
        self.worktree = Path(worktree or Path.cwd())

    def run(self, args: Sequence[str], *, inherit: bool = False) -> str:
        """
        Run a git command, raising GitError on failure.
        
        Args:
            args: Git command arguments (without 'git' prefix)
            inherit: Pass standard streams through to the terminal
            
        Returns:
            Captured stdout (empty when streams are inherited)
        """
        try:
            return spawn("git", args, cwd=self.worktree, inherit=inherit)
        except SpawnError as exc:
            raise GitError(str(exc), returncode=exc.returncode, stderr=exc.stderr) from exc

    def clone(
        self,
        url: str,
        target: Path,
        *,
        depth: int | None = 1,
        recurse_submodules: bool = True,
        quiet: bool = True,
    ) -> None:
        """Clone ``url`` into ``target`` with git's own progress on the terminal."""
        args = ["clone"]
        if recurse_submodules:
            args.append("--recurse-submodules")
        if depth:
            args.append(f"--depth={depth}")
        if quiet:
            args.append("--quiet")
        args.extend([url, str(target)])
        self.run(args, inherit=True)
