"""Stage and commit changes with a configured identity."""

import logging
from pathlib import Path

from code_freeze.services.git._run import _run_git


def add_paths(
    paths: list[Path | str],
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Stage the given paths (git add).

    Raises:
        GitRunnerError: If a path does not exist ("pathspec did not match").
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["add", "--"] + [str(p) for p in paths], cwd=cwd, log=log)


def commit(
    commit_message: str,
    author_name: str,
    author_email: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Commit staged changes as author_name <author_email>.

    Nothing staged raises GitRunnerError ("nothing to commit").
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(
        [
            "-c",
            f"user.name={author_name}",
            "-c",
            f"user.email={author_email}",
            "commit",
            "-m",
            commit_message,
        ],
        cwd=cwd,
        log=log,
    )
    if log:
        log.info("Committed: %s", commit_message)
