"""
Ranking session functionality: PageRank.
"""

import logging
from typing import Dict

from ..analysis import compute_pagerank
from ..observability import timed

logger = logging.getLogger(__name__)


class ComputeMixin:
    """
    Compute mixin providing PageRank.

    The rank table for each seeding mode is computed once per graph and
    reused until the next build().

    Requires CoreMixin to be present in the class hierarchy.
    """

    @timed("page_rank_table")
    def page_rank_table(self, use_idf: bool = False) -> Dict[str, float]:
        """
        Get the PageRank of every word.

        Args:
            use_idf: Seed with IDF weights instead of uniformly

        Returns:
            Copy of the word -> rank table
        """
        if use_idf not in self._pagerank_cache:
            self._pagerank_cache[use_idf] = compute_pagerank(
                self.graph,
                use_idf=use_idf,
                epsilon=self.config.idf_epsilon,
            )
            logger.debug(f"Computed PageRank for {len(self.graph)} words (idf={use_idf})")
        return dict(self._pagerank_cache[use_idf])

    def cal_page_rank(self, word: str, use_idf: bool = False) -> float:
        """
        Get the PageRank of one word.

        Returns:
            The word's rank, or 0.0 if the word is not in the graph
        """
        return self.page_rank_table(use_idf).get(self._normalize(word), 0.0)
