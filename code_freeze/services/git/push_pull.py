"""Push to remote (origin)."""

import logging
from pathlib import Path

from code_freeze.services.git._run import _run_git


def push_branch(
    branch_name: str,
    repo_dir: Path | None = None,
    remote: str = "origin",
    log: logging.Logger | None = None,
    timeout: int | None = None,
) -> None:
    """Push the given branch to remote."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["push", remote, branch_name], cwd=cwd, log=log, timeout=timeout)
    if log:
        log.info("Pushed branch %s to %s", branch_name, remote)
