"""Git operations: clone, branches, commits, push."""

from code_freeze.services.git._run import GitRunnerError, normalize_git_error, redact_credentials
from code_freeze.services.git.branches import create_branch, current_branch
from code_freeze.services.git.clone import clone_repo, remove_clone, temporary_clone
from code_freeze.services.git.commits import add_paths, commit
from code_freeze.services.git.push_pull import push_branch

__all__ = [
    "GitRunnerError",
    "add_paths",
    "clone_repo",
    "commit",
    "create_branch",
    "current_branch",
    "normalize_git_error",
    "push_branch",
    "redact_credentials",
    "remove_clone",
    "temporary_clone",
]
