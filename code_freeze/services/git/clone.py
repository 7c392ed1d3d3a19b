"""Clone a remote repository into a fresh temporary directory."""

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from code_freeze.services.git._run import _run_git


def clone_repo(
    remote_url: str,
    dest: Path | None = None,
    log: logging.Logger | None = None,
    timeout: int | None = None,
) -> Path:
    """Clone remote_url and return the path of the working copy.

    Args:
        remote_url: Clone URL, possibly with embedded credentials.
        dest: Empty or missing target directory; a new temporary
            directory is created when None.
        log: Optional logger.
        timeout: Optional timeout in seconds for the clone.

    Returns:
        Path to the clone root.

    Raises:
        GitRunnerError: If authentication fails or the remote is unreachable.
    """
    if dest is not None:
        target = Path(dest)
        target.parent.mkdir(parents=True, exist_ok=True)
        _run_git(["clone", remote_url, str(target)], cwd=target.parent, log=log, timeout=timeout)
    else:
        target = Path(tempfile.mkdtemp(prefix="code-freeze-"))
        try:
            _run_git(["clone", remote_url, str(target)], cwd=target.parent, log=log, timeout=timeout)
        except BaseException:
            shutil.rmtree(target, ignore_errors=True)
            raise
    if log:
        log.info("Cloned repository into %s", target)
    return target


def remove_clone(repo_dir: Path, log: logging.Logger | None = None) -> None:
    """Delete a working copy created by clone_repo."""
    shutil.rmtree(repo_dir, ignore_errors=True)
    if log:
        log.info("Removed temporary clone %s", repo_dir)


@contextmanager
def temporary_clone(
    remote_url: str,
    cleanup: bool = True,
    log: logging.Logger | None = None,
    timeout: int | None = None,
) -> Iterator[Path]:
    """Clone for the duration of a with-block; remove it afterwards when cleanup is set."""
    repo_dir = clone_repo(remote_url, log=log, timeout=timeout)
    try:
        yield repo_dir
    finally:
        if cleanup:
            remove_clone(repo_dir, log=log)
