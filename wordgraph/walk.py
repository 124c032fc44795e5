"""
Random Walk Module
==================

Edge-non-repeating random walk over the word graph.

The walk starts at a uniformly chosen word and keeps following a uniformly
chosen successor until it reaches a word without successors or is about to
reuse an edge it has already taken. Every visited word is appended to the
walk log as it happens, followed by a terminator line:

    [END-NO NEIGHBORS]   the last word has no successors
    [END-CYCLE]          the next edge was already used
    [INTERRUPTED]        the walk was cancelled

A walk can run on the calling thread (walk()) or on a background thread
(start() / cancel() / join()). Cancellation is cooperative: a flag checked
at the top of every step, which also wakes the optional pause between steps.

Example:
    walker = RandomWalker(graph, rng=random.Random(7), delay=0.3)
    walker.start()
    ...
    walker.cancel()
    result = walker.join()
    print(result.message)
"""

import logging
import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, TextIO

from .graph import WordGraph
from .errors import WalkInProgressError
from .observability import MetricsCollector
from .constants import (
    PATH_SEPARATOR,
    WALK_EDGE_SEPARATOR,
    WALK_END_NO_NEIGHBORS,
    WALK_END_CYCLE,
    WALK_INTERRUPTED,
    MSG_EMPTY_GRAPH_WALK,
    MSG_WALK_INTERRUPTED,
    MSG_LOG_WRITE_FAILED,
    MSG_INTERRUPT_MARK_FAILED,
)

logger = logging.getLogger(__name__)


class WalkState(Enum):
    """Lifecycle of a RandomWalker."""
    IDLE = "idle"                                        # Never run (or empty graph)
    RUNNING = "running"                                  # Walk in progress
    TERMINATED_NO_NEIGHBORS = "terminated_no_neighbors"  # Reached a dangling word
    TERMINATED_CYCLE = "terminated_cycle"                # Next edge already used
    CANCELLED = "cancelled"                              # Stopped by cancel()
    FAILED = "failed"                                    # Walk log could not be written

    @property
    def finished(self) -> bool:
        return self not in (WalkState.IDLE, WalkState.RUNNING)


@dataclass
class WalkResult:
    """
    Outcome of one walk.

    Attributes:
        state: Terminal state of the walk
        path: Visited words in order
        message: The walk's string result: the joined path, the interrupted
            form, or a diagnostic when the log failed
    """
    state: WalkState
    path: List[str] = field(default_factory=list)
    message: str = ""

    def __str__(self) -> str:
        return self.message


class RandomWalker:
    """
    Random walk over a WordGraph with a cancellable background mode.

    Attributes:
        walk_path: Words visited by the current (or last) walk
        visited_edges: Edge keys "u->v" taken by the current (or last) walk
        log_path: File the walk appends to
    """

    def __init__(
        self,
        graph: WordGraph,
        rng: Optional[random.Random] = None,
        log_path: str = "walk_log.txt",
        delay: float = 0.0,
        encoding: str = "utf-8",
        metrics: Optional[MetricsCollector] = None
    ):
        """
        Initialize the walker.

        Args:
            graph: The word graph to walk (read only)
            rng: Random generator for the start word and each step
            log_path: Walk log file, opened in append mode per walk
            delay: Seconds to pause between steps (0 for no pause)
            encoding: Walk log encoding
            metrics: Collector that receives each finished walk's state and
                step count (recorded from whichever thread ran the walk)

        Raises:
            ValueError: If delay is negative
        """
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")

        self._graph = graph
        self._rng = rng or random.Random()
        self.log_path = log_path
        self.delay = delay
        self.encoding = encoding
        self._metrics = metrics

        self.walk_path: List[str] = []
        self.visited_edges: Set[str] = set()

        self._state = WalkState.IDLE
        self._result: Optional[WalkResult] = None
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> WalkState:
        """Get the current walk state."""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is WalkState.RUNNING

    @property
    def result(self) -> Optional[WalkResult]:
        """Result of the last finished walk, or None."""
        return self._result

    @property
    def path(self) -> List[str]:
        """Snapshot of the words visited so far."""
        return list(self.walk_path)

    def walk(self) -> WalkResult:
        """
        Run a walk on the calling thread.

        Another thread may still stop it with cancel().

        Returns:
            WalkResult for the finished walk

        Raises:
            WalkInProgressError: If a walk is already running
        """
        if self._graph.is_empty():
            return WalkResult(WalkState.IDLE, [], MSG_EMPTY_GRAPH_WALK)
        self._begin()
        return self._execute()

    def start(self) -> bool:
        """
        Run a walk on a background thread.

        Returns:
            True if a walk was started, False if the graph is empty (the
            empty-graph result is then available from result)

        Raises:
            WalkInProgressError: If a walk is already running
        """
        if self._graph.is_empty():
            self._result = WalkResult(WalkState.IDLE, [], MSG_EMPTY_GRAPH_WALK)
            return False

        self._begin()
        self._thread = threading.Thread(
            target=self._execute,
            daemon=True,
            name="random-walk",
        )
        self._thread.start()
        return True

    def cancel(self) -> bool:
        """
        Ask a running walk to stop.

        Returns:
            True if a walk was running and has been signalled, False otherwise
        """
        if self._state is not WalkState.RUNNING:
            return False
        self._stop.set()
        logger.info("Random walk cancellation requested")
        return True

    def join(self, timeout: Optional[float] = None) -> Optional[WalkResult]:
        """
        Wait for a background walk to finish.

        Args:
            timeout: Seconds to wait, or None to wait indefinitely

        Returns:
            The WalkResult, or None if the walk is still running after timeout
        """
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
            if thread.is_alive():
                return None
        return self._result

    def _begin(self) -> None:
        """Move to RUNNING and reset per-walk state."""
        with self._lock:
            if self._state is WalkState.RUNNING:
                raise WalkInProgressError(
                    "A random walk is already running; cancel it first",
                    log_path=self.log_path,
                )
            self._state = WalkState.RUNNING
            self._result = None
            self._stop.clear()
            self.walk_path = []
            self.visited_edges = set()
        logger.info(f"Random walk started (log: {self.log_path})")

    def _execute(self) -> WalkResult:
        result = WalkResult(WalkState.FAILED, [], "")
        try:
            result = self._walk_logged()
            return result
        finally:
            with self._lock:
                self._result = result
                self._state = result.state
            if self._metrics is not None:
                self._metrics.record_walk(result.state.value, len(result.path))
            logger.info(f"Random walk finished: {result.state.value}, "
                        f"{len(result.path)} words")

    def _open_log(self) -> TextIO:
        return open(self.log_path, 'a', encoding=self.encoding)

    def _walk_logged(self) -> WalkResult:
        """Run the walk with the log open; log failures become diagnostics."""
        try:
            with self._open_log() as sink:
                state = self._walk_steps(sink)
                if state is WalkState.CANCELLED:
                    try:
                        sink.write(WALK_INTERRUPTED)
                        sink.flush()
                    except OSError as exc:
                        logger.warning(f"Could not write interrupt marker to {self.log_path}: {exc}")
                        return WalkResult(state, self.path, f"{MSG_INTERRUPT_MARK_FAILED}{exc}")
        except OSError as exc:
            logger.warning(f"Could not write walk log {self.log_path}: {exc}")
            return WalkResult(WalkState.FAILED, self.path, f"{MSG_LOG_WRITE_FAILED}{exc}")

        joined = PATH_SEPARATOR.join(self.walk_path)
        if state is WalkState.CANCELLED:
            return WalkResult(state, self.path, f"{MSG_WALK_INTERRUPTED}{joined}")
        return WalkResult(state, self.path, joined)

    def _walk_steps(self, sink: TextIO) -> WalkState:
        """
        The walk loop.

        The current word is recorded before its next edge is checked, so a
        walk ending on a cycle finishes on the word whose outgoing edge was
        already used; the repeated target is not appended.
        """
        current = self._rng.choice(self._graph.words)

        while True:
            if self._stop.is_set():
                return WalkState.CANCELLED

            self.walk_path.append(current)
            sink.write(current + " ")
            sink.flush()

            neighbors = sorted(self._graph.successors(current))
            if not neighbors:
                sink.write(WALK_END_NO_NEIGHBORS)
                sink.flush()
                return WalkState.TERMINATED_NO_NEIGHBORS

            following = self._rng.choice(neighbors)
            edge = f"{current}{WALK_EDGE_SEPARATOR}{following}"
            if edge in self.visited_edges:
                sink.write(WALK_END_CYCLE)
                sink.flush()
                return WalkState.TERMINATED_CYCLE

            self.visited_edges.add(edge)
            current = following

            if self.delay > 0:
                # Returns early when cancel() is called
                self._stop.wait(self.delay)
