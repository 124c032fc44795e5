"""
Graph Module
============

The weighted directed word adjacency graph.

Every word of the corpus is a vertex. An edge u -> v exists when v directly
follows u somewhere in the text, and its weight counts how many times that
happens. Words that are never followed by another word (typically the last
word of the text) are still vertices, just without outgoing edges.

The graph is built once from a token sequence and is read-only afterwards;
a rebuild produces a new WordGraph.
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, int] = MappingProxyType({})


class WordGraph:
    """
    Read-only word adjacency graph plus word frequency counts.

    Attributes:
        total_tokens: Number of token positions in the source text
            (equals the sum of all word counts)

    Example:
        >>> graph = build_graph(["a", "b", "a", "b", "c"])
        >>> graph.weight("a", "b")
        2
        >>> sorted(graph.successors("b"))
        ['a', 'c']
        >>> graph.is_dangling("c")
        True
    """

    def __init__(self, edges: Dict[str, Dict[str, int]], word_counts: Dict[str, int]):
        """
        Wrap already-built adjacency and count maps.

        Use build_graph() or WordGraph.from_text() rather than calling this
        directly; the maps are taken over, not copied.

        Args:
            edges: source word -> {target word: weight}; every word is a key
            word_counts: word -> occurrence count
        """
        self._edges = edges
        self._views = {word: MappingProxyType(targets) for word, targets in edges.items()}
        self._word_counts = word_counts
        self.total_tokens = sum(word_counts.values())

    @classmethod
    def from_text(cls, text: str, tokenizer: Optional[Tokenizer] = None) -> 'WordGraph':
        """Tokenize text and build its graph."""
        tokenizer = tokenizer or Tokenizer()
        return build_graph(tokenizer.tokenize(text))

    def __contains__(self, word: object) -> bool:
        return word in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[str]:
        return iter(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordGraph):
            return NotImplemented
        return self._edges == other._edges and self._word_counts == other._word_counts

    def __repr__(self) -> str:
        return (f"WordGraph(words={len(self)}, edges={self.edge_count}, "
                f"tokens={self.total_tokens})")

    @property
    def words(self) -> List[str]:
        """All vertices, in first-appearance order."""
        return list(self._edges)

    @property
    def edge_count(self) -> int:
        """Number of distinct directed edges."""
        return sum(len(targets) for targets in self._edges.values())

    @property
    def word_counts(self) -> Mapping[str, int]:
        """Read-only view of word -> occurrence count."""
        return MappingProxyType(self._word_counts)

    def is_empty(self) -> bool:
        return not self._edges

    def successors(self, word: str) -> Mapping[str, int]:
        """
        Get the outgoing edges of a word.

        Args:
            word: Source word

        Returns:
            Read-only mapping of target word -> weight (empty if the word is
            dangling or not in the graph)
        """
        return self._views.get(word, _EMPTY)

    def weight(self, source: str, target: str) -> int:
        """Weight of source -> target, or 0 when there is no such edge."""
        return self._edges.get(source, {}).get(target, 0)

    def has_edge(self, source: str, target: str) -> bool:
        return target in self._edges.get(source, ())

    def out_degree(self, word: str) -> int:
        """Number of distinct successors (edge weights are not counted)."""
        return len(self._edges.get(word, ()))

    def is_dangling(self, word: str) -> bool:
        return word in self._edges and not self._edges[word]

    def word_count(self, word: str) -> int:
        """Occurrences of a word in the source text (0 if absent)."""
        return self._word_counts.get(word, 0)

    def edges(self) -> Iterator[tuple]:
        """Iterate (source, target, weight) triples."""
        for source, targets in self._edges.items():
            for target, weight in targets.items():
                yield source, target, weight

    def adjacency(self) -> Dict[str, Dict[str, int]]:
        """Deep copy of the adjacency map, safe for callers to modify."""
        return {word: dict(targets) for word, targets in self._edges.items()}


def build_graph(tokens: Iterable[str]) -> WordGraph:
    """
    Build the adjacency graph and word counts from a token sequence.

    Each token is counted and registered as a vertex; each adjacent pair
    (t[i], t[i+1]) adds 1 to the weight of that edge.

    Args:
        tokens: Lowercase, non-empty words in text order

    Returns:
        The built WordGraph
    """
    edges: Dict[str, Dict[str, int]] = {}
    counts: Counter = Counter()
    previous: Optional[str] = None

    for token in tokens:
        counts[token] += 1
        edges.setdefault(token, {})
        if previous is not None:
            targets = edges[previous]
            targets[token] = targets.get(token, 0) + 1
        previous = token

    graph = WordGraph(edges, dict(counts))
    logger.info(f"Built word graph: {len(graph)} words, {graph.edge_count} edges, "
                f"{graph.total_tokens} tokens")
    return graph
