"""
PageRank over the word graph.

Contains:
- uniform_seed: 1/N starting distribution
- idf_seed: Starting distribution proportional to each word's IDF
- compute_pagerank: PageRank table for a WordGraph
- _pagerank_core: Pure algorithm for unit testing

The ranking runs a fixed number of power-iteration sweeps (no convergence
test) and ignores edge weights: a word passes its rank in equal shares to
its distinct successors. Rank held by dangling words (no successors) is
spread evenly over all words on the next sweep, damped like every other
contribution so each sweep keeps the total at 1. The ranks therefore differ
from variants that add the dangling share undamped (D / N), whose totals
drift above 1.
"""

import logging
import math
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from ..graph import WordGraph
from ..constants import PAGERANK_DAMPING, PAGERANK_ITERATIONS

logger = logging.getLogger(__name__)


def uniform_seed(nodes: Iterable[str]) -> Dict[str, float]:
    """Give every node 1/N."""
    nodes = list(nodes)
    if not nodes:
        return {}
    share = 1.0 / len(nodes)
    return {node: share for node in nodes}


def idf_seed(
    word_counts: Mapping[str, int],
    total_tokens: int,
    epsilon: float = 1e-12
) -> Dict[str, float]:
    """
    Seed each word in proportion to its IDF.

    idf(w) = ln(total_tokens / (count(w) + 1)) and the seeds are idf(w) / Z
    with Z the sum of all idf values.

    A word whose count + 1 exceeds total_tokens gets a negative idf; this is
    kept as is. If |Z| < epsilon (for example a corpus of one word, or
    negative and positive idf values cancelling out) the uniform seed is
    returned instead.

    Args:
        word_counts: word -> occurrence count
        total_tokens: Total token positions in the corpus
        epsilon: Smallest usable |Z|

    Returns:
        Dictionary mapping word -> seed weight (sums to 1)

    Example:
        >>> seed = idf_seed({"the": 8, "fox": 1, "dog": 1}, total_tokens=10)
        >>> seed["fox"] > seed["the"]
        True
    """
    if not word_counts:
        return {}
    if total_tokens <= 0:
        return uniform_seed(word_counts)

    idf = {
        word: math.log(total_tokens / (count + 1))
        for word, count in word_counts.items()
    }
    z = sum(idf.values())
    if abs(z) < epsilon:
        logger.debug(f"IDF seed sum {z!r} is too close to zero; using uniform seed")
        return uniform_seed(word_counts)
    return {word: value / z for word, value in idf.items()}


def _pagerank_core(
    graph: Mapping[str, Iterable[str]],
    initial: Optional[Mapping[str, float]] = None,
    damping: float = PAGERANK_DAMPING,
    iterations: int = PAGERANK_ITERATIONS,
    on_sweep: Optional[Callable[[int, Dict[str, float]], None]] = None
) -> Dict[str, float]:
    """
    Pure PageRank power iteration with dangling-node redistribution.

    This core function takes primitive types and can be unit tested without
    needing a WordGraph.

    Each sweep computes, for every node v:

        r'(v) = d * D / N + (1 - d) / N + d * sum(r(u) / outdeg(u) for u -> v)

    where D is the total rank currently held by dangling nodes and outdeg
    counts distinct successors. Total rank is preserved by every sweep.

    Args:
        graph: Map of node -> successors. Successors must be nodes of the
            graph; repeats and weights are ignored.
        initial: Starting rank per node (defaults to uniform)
        damping: Damping factor, must be in (0, 1)
        iterations: Exact number of sweeps to run
        on_sweep: Optional callback(sweep_number, ranks) after each sweep

    Returns:
        Dictionary mapping node -> rank

    Raises:
        ValueError: If damping is not in range (0, 1) or iterations < 0

    Example:
        >>> ranks = _pagerank_core({"a": ["b"], "b": ["a", "c"], "c": ["a"]})
        >>> ranks["a"] > ranks["c"]
        True
    """
    # O(iterations * (nodes + edges))
    if not (0 < damping < 1):
        raise ValueError(f"damping must be between 0 and 1, got {damping}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    nodes = list(graph.keys())
    n = len(nodes)
    if n == 0:
        return {}

    ranks = dict(initial) if initial is not None else uniform_seed(nodes)

    # Build incoming links and distinct out-degrees
    incoming: Dict[str, List[str]] = {node: [] for node in nodes}
    out_degree: Dict[str, int] = {}
    for source, successors in graph.items():
        distinct = set(successors)
        out_degree[source] = len(distinct)
        for target in distinct:
            incoming[target].append(source)
    dangling = [node for node in nodes if out_degree[node] == 0]

    teleport = (1 - damping) / n
    for sweep in range(1, iterations + 1):
        dangling_share = damping * sum(ranks.get(node, 0.0) for node in dangling) / n
        new_ranks = {}
        for node in nodes:
            incoming_sum = 0.0
            for source in incoming[node]:
                incoming_sum += ranks.get(source, 0.0) / out_degree[source]
            new_ranks[node] = dangling_share + teleport + damping * incoming_sum
        ranks = new_ranks
        if on_sweep is not None:
            on_sweep(sweep, ranks)

    return ranks


def compute_pagerank(
    graph: WordGraph,
    use_idf: bool = False,
    epsilon: float = 1e-12,
    on_sweep: Optional[Callable[[int, Dict[str, float]], None]] = None
) -> Dict[str, float]:
    """
    Compute PageRank for every word of the graph.

    Uses the fixed damping (0.85) and sweep count (10).

    Args:
        graph: The word graph
        use_idf: Seed with IDF weights instead of the uniform distribution
        epsilon: Passed to idf_seed as the zero-sum guard
        on_sweep: Optional callback(sweep_number, ranks) after each sweep

    Returns:
        Dictionary mapping word -> rank (empty for an empty graph)
    """
    if graph.is_empty():
        return {}

    if use_idf:
        initial = idf_seed(graph.word_counts, graph.total_tokens, epsilon)
    else:
        initial = uniform_seed(graph)

    adjacency = {word: graph.successors(word).keys() for word in graph}
    return _pagerank_core(
        adjacency,
        initial=initial,
        damping=PAGERANK_DAMPING,
        iterations=PAGERANK_ITERATIONS,
        on_sweep=on_sweep,
    )
