"""
Bridge-augmented text generation.

Rewrites a piece of text by inserting one bridge word between every pair
of adjacent words that has at least one bridge in the graph.
"""

import random
from typing import List, Optional

from ..graph import WordGraph
from ..tokenizer import Tokenizer
from ..constants import MSG_NO_WORDS_IN_INPUT
from .bridges import find_bridge_words


def generate_new_text(
    graph: WordGraph,
    text: str,
    rng: Optional[random.Random] = None,
    tokenizer: Optional[Tokenizer] = None
) -> str:
    """
    Insert a randomly chosen bridge word between adjacent words.

    Lookup uses the lowercase words, output keeps each input word's original
    case, and inserted bridges are lowercase. Separators in the input collapse
    to single spaces.

    Args:
        graph: The word graph
        text: Raw input text
        rng: Random generator for choosing among several bridges
        tokenizer: Tokenizer to split the input with

    Returns:
        The rewritten text, or MSG_NO_WORDS_IN_INPUT when the input holds no words

    Example:
        >>> graph = WordGraph.from_text("quick fox jumps over lazy dog")
        >>> generate_new_text(graph, "Quick jumps")
        'Quick fox jumps'
    """
    tokenizer = tokenizer or Tokenizer()
    rng = rng or random.Random()

    words, original = tokenizer.tokenize_pair(text)
    if not words:
        return MSG_NO_WORDS_IN_INPUT

    parts: List[str] = []
    for i in range(len(words) - 1):
        current, following = words[i], words[i + 1]
        parts.append(original[i])
        if current in graph and following in graph:
            bridges = find_bridge_words(graph, current, following)
            if bridges:
                # sorted so a seeded rng repeats its choices
                parts.append(rng.choice(sorted(bridges)))
    parts.append(original[-1])

    return ' '.join(parts)
