"""
Graph export for external visualization.

Produces data a renderer can consume; nothing here draws images.

Contains:
- export_graph: JSON-friendly node/edge dictionary, optionally written to disk
- to_dot: Graphviz DOT source, optionally highlighting shortest paths
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Set, Tuple, Union

from .graph import WordGraph
from .results import ShortestPath, ShortestPathReport

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOR = "red"

PathsLike = Union[ShortestPathReport, Iterable[Union[ShortestPath, Sequence[str]]]]


def export_graph(
    graph: WordGraph,
    filepath: Optional[str] = None,
    ranks: Optional[Dict[str, float]] = None,
    verbose: bool = True
) -> Dict[str, Any]:
    """
    Export the graph as nodes and edges.

    Args:
        graph: The word graph
        filepath: Optional output JSON path
        ranks: Optional word -> PageRank to attach to each node
        verbose: Log a summary when writing to disk

    Returns:
        Dictionary with 'nodes', 'edges' and 'metadata'
    """
    nodes = []
    for word in graph:
        node = {
            'id': word,
            'count': graph.word_count(word),
            'out_degree': graph.out_degree(word),
        }
        if ranks is not None:
            node['pagerank'] = ranks.get(word, 0.0)
        nodes.append(node)

    edges = [
        {'source': source, 'target': target, 'weight': weight}
        for source, target, weight in graph.edges()
    ]

    data = {
        'nodes': nodes,
        'edges': edges,
        'metadata': {
            'node_count': len(nodes),
            'edge_count': len(edges),
            'total_tokens': graph.total_tokens,
        }
    }

    if filepath is not None:
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        if verbose:
            logger.info(f"Graph exported to {filepath}")
            logger.info(f"  - {len(nodes)} nodes, {len(edges)} edges")

    return data


def _highlighted_edges(highlight: Optional[PathsLike]) -> Set[Tuple[str, str]]:
    if highlight is None:
        return set()
    if isinstance(highlight, ShortestPathReport):
        highlight = highlight.paths

    edges: Set[Tuple[str, str]] = set()
    for item in highlight:
        path = item.path if isinstance(item, ShortestPath) else tuple(item)
        edges.update(zip(path, path[1:]))
    return edges


def to_dot(graph: WordGraph, highlight: Optional[PathsLike] = None, name: str = "wordgraph") -> str:
    """
    Render the graph as Graphviz DOT source.

    Edges are labelled with their weight. Edges lying on any highlighted path
    are drawn in HIGHLIGHT_COLOR and bold, as are the words they connect.

    Args:
        graph: The word graph
        highlight: A ShortestPathReport, or an iterable of ShortestPath objects
            or word sequences
        name: Graph name in the DOT header

    Returns:
        DOT source text
    """
    marked = _highlighted_edges(highlight)
    marked_nodes = {word for edge in marked for word in edge}

    lines = [f'digraph "{name}" {{']
    for word in graph:
        if word in marked_nodes:
            lines.append(f'  "{word}" [shape=ellipse, color={HIGHLIGHT_COLOR}, style=bold];')
        else:
            lines.append(f'  "{word}" [shape=ellipse];')
    for source, target, weight in graph.edges():
        if (source, target) in marked:
            lines.append(f'  "{source}" -> "{target}" '
                         f'[label="{weight}", color={HIGHLIGHT_COLOR}, penwidth=2];')
        else:
            lines.append(f'  "{source}" -> "{target}" [label="{weight}"];')
    lines.append('}')
    return '\n'.join(lines)
