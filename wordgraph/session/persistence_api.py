"""
Export session functionality: JSON and DOT output for visualization collaborators.
"""

from typing import Any, Dict, Optional

from ..export import PathsLike, export_graph, to_dot


class PersistenceMixin:
    """
    Export mixin.

    The graph itself is never persisted; these exports are one-way hand-offs
    to external renderers.

    Requires CoreMixin and ComputeMixin to be present in the class hierarchy.
    """

    def export_graph(
        self,
        filepath: Optional[str] = None,
        include_pagerank: bool = False,
        verbose: bool = True
    ) -> Dict[str, Any]:
        """
        Export nodes and weighted edges (optionally with uniform PageRank).

        Args:
            filepath: Optional JSON output path
            include_pagerank: Attach each word's PageRank to its node
            verbose: Log a summary when writing to disk

        Returns:
            The exported graph data
        """
        ranks = self.page_rank_table() if include_pagerank else None
        return export_graph(self.graph, filepath, ranks=ranks, verbose=verbose)

    def to_dot(self, highlight: Optional[PathsLike] = None) -> str:
        """
        Graphviz DOT source for the graph.

        Args:
            highlight: Paths to emphasise, typically a ShortestPathReport

        Example:
            >>> report = session.shortest_path_report("quick", "dog")
            >>> dot_source = session.to_dot(highlight=report)
        """
        return to_dot(self.graph, highlight=highlight)
