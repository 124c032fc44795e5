"""
Core session functionality: initialization, graph building, metrics.

This module contains the base mixin that all other session mixins depend on.
"""

import logging
import random
from typing import Any, Dict, Optional

from ..tokenizer import Tokenizer
from ..graph import WordGraph, build_graph
from ..config import WordGraphConfig
from ..observability import MetricsCollector, timed

logger = logging.getLogger(__name__)


class CoreMixin:
    """
    Core mixin owning the graph, configuration, random generator and metrics.

    The graph is replaced as a whole by build(); analyses only read it.
    """

    def __init__(
        self,
        config: Optional[WordGraphConfig] = None,
        rng: Optional[random.Random] = None,
        tokenizer: Optional[Tokenizer] = None,
        enable_metrics: bool = False
    ):
        """
        Initialize an empty session.

        Args:
            config: Optional configuration. Defaults to WordGraphConfig().
            rng: Optional random generator. Defaults to
                random.Random(config.random_seed).
            tokenizer: Optional custom tokenizer.
            enable_metrics: Enable timing and count metrics.
        """
        self.config = config or WordGraphConfig()
        self.rng = rng or random.Random(self.config.random_seed)
        self.tokenizer = tokenizer or Tokenizer()
        self._graph = build_graph([])
        self._built = False
        # Derived results cached per graph
        self._pagerank_cache: Dict[bool, Dict[str, float]] = {}
        self._metrics = MetricsCollector(enabled=enable_metrics)

    @classmethod
    def from_text(cls, text: str, **kwargs) -> 'CoreMixin':
        """Create a session and build its graph from text in one step."""
        session = cls(**kwargs)
        session.build(text)
        return session

    @timed("build")
    def build(self, text: str) -> WordGraph:
        """
        Build (or rebuild) the graph from text.

        The previous graph and everything derived from it are discarded.

        Args:
            text: Corpus text

        Returns:
            The new WordGraph
        """
        graph = build_graph(self.tokenizer.tokenize(text))
        self._graph = graph
        self._pagerank_cache = {}
        self._built = True
        logger.info(f"Session graph rebuilt: {len(graph)} words")
        return graph

    @property
    def graph(self) -> WordGraph:
        """The current graph (empty until build() is called)."""
        return self._graph

    @property
    def is_built(self) -> bool:
        return self._built

    def _normalize(self, word: str) -> str:
        """Query words are matched the way corpus words are stored."""
        return self.tokenizer.normalize(word)

    def get_metrics(self) -> Dict[str, Dict[str, Any]]:
        """
        Get all collected metrics.

        Returns:
            Dict mapping operation names to their statistics
            (count, total_ms, avg_ms, min_ms, max_ms)
        """
        return self._metrics.get_all_stats()

    def get_metrics_summary(self) -> str:
        """Get a human-readable summary of all metrics."""
        return self._metrics.get_summary()

    def reset_metrics(self) -> None:
        """Clear all collected metrics."""
        self._metrics.reset()
