"""
Random walk session functionality: synchronous walks and background walk control.
"""

import logging
from typing import Optional

from ..walk import RandomWalker, WalkResult, WalkState
from ..errors import WalkInProgressError
from ..observability import timed

logger = logging.getLogger(__name__)


class WalkMixin:
    """
    Walk mixin owning at most one RandomWalker at a time.

    A new walk may only start once the previous one has finished; to restart
    a running walk, cancel_walk(), wait_walk(), then start again.

    Requires CoreMixin to be present in the class hierarchy.
    """

    _walker: Optional[RandomWalker] = None

    def _new_walker(self, delay: float) -> RandomWalker:
        if self._walker is not None and self._walker.is_running:
            raise WalkInProgressError(
                "A random walk is already running; cancel it first",
                log_path=self._walker.log_path,
            )
        self._walker = RandomWalker(
            self.graph,
            rng=self.rng,
            log_path=self.config.walk_log_path,
            delay=delay,
            encoding=self.config.walk_log_encoding,
            metrics=self._metrics,
        )
        return self._walker

    @timed("random_walks")
    def random_walks(self, walk_delay: bool = False) -> str:
        """
        Run a random walk on the calling thread.

        Args:
            walk_delay: Pause config.walk_delay_seconds between steps

        Returns:
            The visited words joined by " -> ", or the interrupted form if
            another thread called cancel_walk(), or a diagnostic string
        """
        delay = self.config.walk_delay_seconds if walk_delay else 0.0
        return self._new_walker(delay).walk().message

    def start_walk(self, walk_delay: bool = True) -> RandomWalker:
        """
        Start a random walk on a background thread.

        Args:
            walk_delay: Pause config.walk_delay_seconds between steps

        Returns:
            The running RandomWalker

        Raises:
            WalkInProgressError: If a walk is already running
        """
        delay = self.config.walk_delay_seconds if walk_delay else 0.0
        walker = self._new_walker(delay)
        walker.start()
        return walker

    def cancel_walk(self) -> bool:
        """
        Ask the running walk to stop.

        Returns:
            True if a walk was running and has been signalled
        """
        if self._walker is None:
            return False
        cancelled = self._walker.cancel()
        if cancelled:
            self._metrics.record_count("walks_cancelled")
        return cancelled

    def wait_walk(self, timeout: Optional[float] = None) -> Optional[WalkResult]:
        """
        Wait for the background walk to finish.

        Args:
            timeout: Seconds to wait (defaults to config.walk_join_timeout)

        Returns:
            The finished walk's result, or None if no walk was started or it
            is still running after the timeout
        """
        if self._walker is None:
            return None
        if timeout is None:
            timeout = self.config.walk_join_timeout
        return self._walker.join(timeout)

    @property
    def walk_state(self) -> WalkState:
        """State of the current (or last) walk."""
        if self._walker is None:
            return WalkState.IDLE
        return self._walker.state
