"""
Query session functionality: bridge words, text generation, shortest paths.
"""

import logging
from typing import Optional, Set

from ..analysis import (
    find_bridge_words,
    query_bridge_words,
    generate_new_text,
    compute_shortest_paths,
)
from ..observability import timed
from ..results import ShortestPathReport

logger = logging.getLogger(__name__)


class QueryMixin:
    """
    Query mixin providing the string-returning analyses.

    None of these raise for missing words; they answer in-band.

    Requires CoreMixin to be present in the class hierarchy.
    """

    def bridges(self, word1: str, word2: str) -> Set[str]:
        """
        Get the bridge words from word1 to word2.

        Returns:
            Set of bridge words (empty when either word is missing)
        """
        return find_bridge_words(self.graph, self._normalize(word1), self._normalize(word2))

    @timed("query_bridge_words")
    def query_bridge_words(self, word1: str, word2: str) -> str:
        """
        Describe the bridge words from word1 to word2.

        Example:
            >>> session = Session.from_text("a b c")
            >>> session.query_bridge_words("a", "c")
            'The bridge words from "a" to "c" is: "b".'
        """
        word1, word2 = self._normalize(word1), self._normalize(word2)
        logger.debug(f"query_bridge_words({word1!r}, {word2!r})")
        return query_bridge_words(self.graph, word1, word2)

    @timed("generate_new_text")
    def generate_new_text(self, text: str) -> str:
        """
        Insert a random bridge word between each adjacent pair of input words.

        Uses the session's random generator, so a seeded session reproduces
        its choices.
        """
        return generate_new_text(self.graph, text, rng=self.rng, tokenizer=self.tokenizer)

    @timed("shortest_path_report")
    def shortest_path_report(self, word1: str, word2: Optional[str] = None) -> ShortestPathReport:
        """
        Find all shortest paths from word1 (to word2, or to every other word).

        Returns:
            ShortestPathReport with the structured paths and the text
        """
        word1 = self._normalize(word1)
        if word2 is not None:
            word2 = self._normalize(word2)
        logger.debug(f"shortest_path_report({word1!r}, {word2!r})")
        return compute_shortest_paths(self.graph, word1, word2)

    def calc_shortest_path(self, word1: str, word2: Optional[str] = None) -> str:
        """
        Formatted text of all shortest paths from word1.

        Example:
            >>> session = Session.from_text("a b c")
            >>> print(session.calc_shortest_path("a", "c"))
            从 a 到 c 的所有最短路径:
            a -> b -> c (距离: 2)
        """
        return self.shortest_path_report(word1, word2).text
