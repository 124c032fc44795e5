"""
Bridge word lookup.

Contains:
- find_bridge_words: Set of words b with w1 -> b and b -> w2
- format_bridge_words: Human-readable sentence for a bridge set
- query_bridge_words: Lookup plus formatting, with the missing-word check
"""

from typing import Iterable, Set

from ..graph import WordGraph
from ..constants import (
    MSG_BRIDGE_MISSING_WORD,
    MSG_BRIDGE_NONE,
    MSG_BRIDGE_ONE,
    MSG_BRIDGE_MANY,
)


def find_bridge_words(graph: WordGraph, word1: str, word2: str) -> Set[str]:
    """
    Find every bridge word from word1 to word2.

    Args:
        graph: The word graph
        word1: Start word
        word2: End word

    Returns:
        Set of words b such that word1 -> b and b -> word2 are both edges.
        Empty when there is none or when word1 is not in the graph.

    Example:
        >>> graph = build_graph("a b c".split())
        >>> find_bridge_words(graph, "a", "c")
        {'b'}
    """
    return {
        bridge for bridge in graph.successors(word1)
        if graph.has_edge(bridge, word2)
    }


def _quote_list(words: Iterable[str]) -> str:
    """'"x"' / '"x" and "y"' / '"x", "y" and "z"'."""
    quoted = [f'"{word}"' for word in words]
    if len(quoted) <= 1:
        return ''.join(quoted)
    return ', '.join(quoted[:-1]) + ' and ' + quoted[-1]


def format_bridge_words(word1: str, word2: str, bridges: Set[str]) -> str:
    """
    Format a bridge set as a sentence.

    Bridges are listed in sorted order.
    """
    if not bridges:
        return MSG_BRIDGE_NONE.format(w1=word1, w2=word2)
    template = MSG_BRIDGE_ONE if len(bridges) == 1 else MSG_BRIDGE_MANY
    return template.format(w1=word1, w2=word2, bridges=_quote_list(sorted(bridges)))


def query_bridge_words(graph: WordGraph, word1: str, word2: str) -> str:
    """
    Look up bridge words and describe the result.

    Returns:
        One of:
        - 'No "w1" or "w2" in the graph!' when either word is missing
        - 'No bridge words from "w1" to "w2"!' when there are none
        - 'The bridge words from "w1" to "w2" is: "b".'
        - 'The bridge words from "w1" to "w2" are: "b1", "b2" and "b3".'
    """
    if word1 not in graph or word2 not in graph:
        return MSG_BRIDGE_MISSING_WORD.format(w1=word1, w2=word2)
    return format_bridge_words(word1, word2, find_bridge_words(graph, word1, word2))
