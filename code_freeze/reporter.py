"""Progress lines around each step of a command.

A task is opened with start_task and closed with end_task; notices and
errors may be emitted at any point. Everything goes to the
``code_freeze.progress`` logger so level and format follow logging config.
"""

import logging
import time


class ProgressReporter:
    """Emit start/end/notice/error lines for a sequence of tasks."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logging.getLogger("code_freeze.progress")
        self._task: str | None = None
        self._started_at = 0.0

    @property
    def current_task(self) -> str | None:
        return self._task

    def start_task(self, message: str) -> None:
        """Open a task; an unfinished previous task is closed first."""
        if self._task is not None:
            self.end_task()
        self._task = message
        self._started_at = time.monotonic()
        self._log.info("%s...", message)

    def end_task(self) -> None:
        """Close the current task and log its duration."""
        if self._task is None:
            return
        elapsed = time.monotonic() - self._started_at
        self._log.info("%s: done (%.1fs)", self._task, elapsed)
        self._task = None

    def notice(self, message: str) -> None:
        self._log.info(message)

    def warn(self, message: str) -> None:
        self._log.warning(message)

    def error(self, message: str) -> None:
        """Log a user-facing error; does not raise."""
        self._log.error(message)
