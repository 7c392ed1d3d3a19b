"""Local branch operations."""

import logging
from pathlib import Path

from code_freeze.services.git._run import _run_git


def create_branch(
    branch_name: str,
    base: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Create branch_name from base and switch to it (git checkout -b).

    Raises:
        GitRunnerError: If the branch exists already or base is unknown.
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["checkout", "-b", branch_name, base], cwd=cwd, log=log)
    if log:
        log.info("Created branch %s from %s", branch_name, base)


def current_branch(repo_dir: Path | None = None, log: logging.Logger | None = None) -> str:
    """Return the name of the checked out branch."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    return _run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd, log=log).strip()
