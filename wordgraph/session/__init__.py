"""
Word graph Session - one build-and-analyze lifetime over a corpus.

This package composes the Session class from focused mixins:
- core.py: Initialization, graph building, metrics
- query_api.py: Bridge words, text generation, shortest paths
- compute.py: PageRank
- walk_api.py: Random walks and background walk control
- persistence_api.py: JSON and DOT export
"""

from .core import CoreMixin
from .query_api import QueryMixin
from .compute import ComputeMixin
from .walk_api import WalkMixin
from .persistence_api import PersistenceMixin


class Session(
    CoreMixin,
    QueryMixin,
    ComputeMixin,
    WalkMixin,
    PersistenceMixin
):
    """
    Word adjacency graph session.

    This class provides a complete API for:
    - Building the graph from a text corpus
    - Bridge word lookup and bridge-augmented text generation
    - All shortest paths (single source or point to point)
    - PageRank with uniform or IDF seeding
    - Cancellable random walks logged to walk_log.txt
    - JSON / DOT export for external visualization

    Example:
        >>> from wordgraph import Session
        >>> session = Session.from_text("a b c", config=WordGraphConfig(random_seed=1))
        >>> session.query_bridge_words("a", "c")
        'The bridge words from "a" to "c" is: "b".'
        >>> session.cal_page_rank("c") > session.cal_page_rank("a")
        True

    The session is composed from focused mixins:
    - CoreMixin: Initialization, build, metrics
    - QueryMixin: Bridge words, text generation, shortest paths
    - ComputeMixin: PageRank
    - WalkMixin: Random walks
    - PersistenceMixin: Export
    """
    pass


__all__ = ['Session']
