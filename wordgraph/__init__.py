"""
Word Graph Text Analysis Package
================================

Builds a weighted directed word adjacency graph from a text corpus and
analyses it: bridge words, bridge-augmented text generation, all shortest
paths, PageRank and cancellable random walks.

Example:
    from wordgraph import Session

    session = Session.from_text("the quick fox jumps over the lazy dog")
    print(session.query_bridge_words("quick", "jumps"))
    print(session.generate_new_text("quick jumps over lazy dog"))
    print(session.calc_shortest_path("the", "dog"))
    print(session.cal_page_rank("the", use_idf=True))
    print(session.random_walks())
"""

from .tokenizer import Tokenizer
from .graph import WordGraph, build_graph
from .config import WordGraphConfig, get_default_config
from .session import Session
from .results import ShortestPath, ShortestPathReport
from .walk import RandomWalker, WalkResult, WalkState
from .errors import WordGraphError, WalkInProgressError
from .observability import MetricsCollector

__version__ = "1.0.0"
__all__ = [
    "Session",
    "WordGraph",
    "build_graph",
    "Tokenizer",
    "WordGraphConfig",
    "get_default_config",
    "ShortestPath",
    "ShortestPathReport",
    "RandomWalker",
    "WalkResult",
    "WalkState",
    "WordGraphError",
    "WalkInProgressError",
    "MetricsCollector",
]
