"""
Analysis Module
===============

Read-only analyses over a built WordGraph.

Contains implementations of:
- Bridge word lookup and bridge-augmented text generation
- All-shortest-paths search (Dijkstra with tie collection)
- PageRank with uniform or IDF seeding
"""

from .bridges import (
    find_bridge_words,
    format_bridge_words,
    query_bridge_words,
)

from .augment import (
    generate_new_text,
)

from .paths import (
    compute_shortest_paths,
    enumerate_paths,
    format_shortest_paths,
    _dijkstra_core,
)

from .pagerank import (
    compute_pagerank,
    idf_seed,
    uniform_seed,
    _pagerank_core,
)

__all__ = [
    # Bridge words
    'find_bridge_words',
    'format_bridge_words',
    'query_bridge_words',
    'generate_new_text',

    # Shortest paths
    'compute_shortest_paths',
    'enumerate_paths',
    'format_shortest_paths',
    '_dijkstra_core',

    # PageRank
    'compute_pagerank',
    'idf_seed',
    'uniform_seed',
    '_pagerank_core',
]
