"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod

from code_freeze.models import PR, PullRequestPayload


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitPlatformAdapter(ABC):
    """Abstract interface for Git hosting platforms."""

    @abstractmethod
    def create_pr(self, payload: PullRequestPayload) -> PR:
        """Create a pull request."""
        ...
