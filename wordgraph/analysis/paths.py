"""
All-shortest-paths search over the word graph.

Contains:
- _dijkstra_core: Dijkstra that keeps every tied predecessor
- enumerate_paths: Expand a predecessor map into every shortest path
- compute_shortest_paths: Single-source or point-to-point query with report
- format_shortest_paths: Render a report's text

Edge weights are the adjacency counts, so a "shortest" path is the one
whose consecutive word pairs are rarest in the source text.
"""

import heapq
import logging
from typing import Dict, List, Mapping, Optional, Tuple

from ..graph import WordGraph
from ..results import ShortestPath, ShortestPathReport
from ..constants import (
    PATH_SEPARATOR,
    MSG_PATH_SOURCE_MISSING,
    MSG_PATH_TARGET_MISSING,
    MSG_PATH_HEADER,
    MSG_PATH_LINE,
    MSG_PATH_NONE_FROM_SOURCE,
    MSG_PATH_NONE_TO_TARGET,
)

logger = logging.getLogger(__name__)

INFINITY = float('inf')


def _dijkstra_core(
    adjacency: Mapping[str, Mapping[str, int]],
    source: str
) -> Tuple[Dict[str, float], Dict[str, List[str]]]:
    """
    Dijkstra's algorithm collecting all minimum-weight predecessors.

    This core function takes primitive types and can be unit tested without
    needing a WordGraph.

    Relaxing edge (u, v) with candidate distance d:
    - d < dist[v]: dist[v] = d and prev[v] = [u]
    - d == dist[v]: u is appended to prev[v]
    - otherwise the edge is ignored

    The priority queue has no decrease-key, so improved vertices are pushed
    again and stale entries are skipped when popped.

    Args:
        adjacency: Map of node -> {successor: positive integer weight}
        source: Start node (must be a key of adjacency)

    Returns:
        Tuple of (dist, prev). dist maps every node to its distance from
        source (INFINITY if unreached); prev maps each reached node other
        than source to its predecessors on shortest paths.

    Example:
        >>> dist, prev = _dijkstra_core({"a": {"b": 1, "c": 1}, "b": {"d": 1},
        ...                              "c": {"d": 1}, "d": {}}, "a")
        >>> dist["d"], sorted(prev["d"])
        (2, ['b', 'c'])
    """
    # O((V + E) log V)
    dist: Dict[str, float] = {node: INFINITY for node in adjacency}
    dist[source] = 0
    prev: Dict[str, List[str]] = {}
    settled = set()
    queue: List[Tuple[float, str]] = [(0, source)]

    while queue:
        current_dist, current = heapq.heappop(queue)
        if current in settled or current_dist > dist[current]:
            continue
        settled.add(current)

        for neighbor, weight in adjacency.get(current, {}).items():
            candidate = current_dist + weight
            best = dist.get(neighbor, INFINITY)
            if candidate < best:
                dist[neighbor] = candidate
                prev[neighbor] = [current]
                heapq.heappush(queue, (candidate, neighbor))
            elif candidate == best:
                prev[neighbor].append(current)

    return dist, prev


def enumerate_paths(
    prev: Mapping[str, List[str]],
    source: str,
    target: str
) -> List[List[str]]:
    """
    Expand a predecessor map into every shortest path from source to target.

    Walks prev backwards from target depth-first, visiting predecessors in
    sorted order, and reverses each completed chain.

    Args:
        prev: Predecessor map from _dijkstra_core
        source: Start node
        target: End node

    Returns:
        List of paths (each a list of nodes from source to target). Empty when
        target was not reached; [[source]] when target == source.
    """
    if target == source:
        return [[source]]
    if target not in prev:
        return []

    paths: List[List[str]] = []
    # Iterative DFS; each entry is the reversed partial path ending at its last node
    stack: List[List[str]] = [[target]]
    while stack:
        partial = stack.pop()
        node = partial[-1]
        if node == source:
            paths.append(list(reversed(partial)))
            continue
        # reversed push keeps pop order equal to sorted order
        for predecessor in sorted(prev.get(node, ()), reverse=True):
            stack.append(partial + [predecessor])

    return paths


def _join_path(path: List[str]) -> str:
    return PATH_SEPARATOR.join(path)


def format_shortest_paths(report: ShortestPathReport) -> str:
    """
    Render the text for a shortest path report.

    Single-source reports list each other word in sorted order, either with
    a header and one line per path or with a "no path" line. Point-to-point
    reports list the paths to the one target.
    """
    if report.error is not None:
        return report.error

    lines: List[str] = []
    if report.target is not None:
        if not report.paths:
            return MSG_PATH_NONE_TO_TARGET.format(source=report.source, target=report.target)
        lines.append(MSG_PATH_HEADER.format(source=report.source, target=report.target))
        lines.extend(
            MSG_PATH_LINE.format(path=_join_path(list(match.path)), distance=match.distance)
            for match in report.paths
        )
        return '\n'.join(lines)

    unreachable = set(report.unreachable)
    for target in sorted(set(report.targets()) | unreachable):
        if target in unreachable:
            lines.append(MSG_PATH_NONE_FROM_SOURCE.format(source=report.source, target=target))
            continue
        lines.append(MSG_PATH_HEADER.format(source=report.source, target=target))
        lines.extend(
            MSG_PATH_LINE.format(path=_join_path(list(match.path)), distance=match.distance)
            for match in report.paths_to(target)
        )
    return '\n'.join(lines)


def compute_shortest_paths(
    graph: WordGraph,
    source: str,
    target: Optional[str] = None
) -> ShortestPathReport:
    """
    Find all shortest paths from source, to one target or to every word.

    Args:
        graph: The word graph
        source: Start word
        target: End word, or None to report on every other word

    Returns:
        ShortestPathReport with the structured paths and the formatted text.
        A missing source or target produces a report whose error (and text)
        is a single diagnostic line; an unreachable target is not an error.
    """
    report = ShortestPathReport(source=source, target=target)

    if source not in graph:
        report.error = MSG_PATH_SOURCE_MISSING.format(word=source)
    elif target is not None and target not in graph:
        report.error = MSG_PATH_TARGET_MISSING.format(word=target)
    if report.error is not None:
        report.text = report.error
        return report

    adjacency = {word: graph.successors(word) for word in graph}
    dist, prev = _dijkstra_core(adjacency, source)

    if target is not None:
        targets = [target]
    else:
        targets = sorted(word for word in graph if word != source)

    for node in targets:
        found = enumerate_paths(prev, source, node)
        if not found:
            report.unreachable.append(node)
            continue
        distance = int(dist[node])
        report.paths.extend(ShortestPath(tuple(path), distance) for path in found)

    logger.debug(f"Shortest paths from '{source}': {len(report.paths)} paths, "
                 f"{len(report.unreachable)} unreachable")
    report.text = format_shortest_paths(report)
    return report
