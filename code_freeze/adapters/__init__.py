"""Git platform adapters."""

from code_freeze.adapters.base import GitPlatformAdapter, GitPlatformError
from code_freeze.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
