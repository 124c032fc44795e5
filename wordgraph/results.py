"""
Result Dataclasses for shortest path queries
============================================

Structured containers returned alongside the formatted shortest path text,
so that a visualization collaborator can highlight the paths without
re-parsing the text.

Example:
    report = session.shortest_path_report("quick", "dog")
    print(report)                      # the formatted text
    for match in report.paths:
        print(match.path, match.distance)
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ShortestPath:
    """
    One minimum-weight path.

    Attributes:
        path: Words from source to target, both included
        distance: Sum of edge weights along the path

    Example:
        >>> match = ShortestPath(("a", "b", "c"), 2)
        >>> match.target
        'c'
        >>> list(match.edges())
        [('a', 'b'), ('b', 'c')]
    """
    path: Tuple[str, ...]
    distance: int

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def target(self) -> str:
        return self.path[-1]

    def edges(self):
        """Iterate consecutive (u, v) word pairs along the path."""
        return zip(self.path, self.path[1:])

    def to_dict(self) -> Dict[str, Any]:
        return {'path': list(self.path), 'distance': self.distance}

    def to_tuple(self) -> tuple:
        """Convert to (path_list, distance)."""
        return (list(self.path), self.distance)


@dataclass
class ShortestPathReport:
    """
    Everything a shortest path query produced.

    Attributes:
        source: Start word
        target: End word, or None for a single-source query
        text: Formatted multi-line output
        paths: Every shortest path found, grouped by target in report order
        unreachable: Targets with no path from source
        error: Diagnostic line when source or target is not in the graph
    """
    source: str
    target: Optional[str]
    text: str = ""
    paths: List[ShortestPath] = field(default_factory=list)
    unreachable: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def __str__(self) -> str:
        return self.text

    @property
    def ok(self) -> bool:
        return self.error is None

    def paths_to(self, target: str) -> List[ShortestPath]:
        """All shortest paths that end at target."""
        return [match for match in self.paths if match.target == target]

    def distance_to(self, target: str) -> Optional[int]:
        """Shortest distance to target, or None if no path was found."""
        for match in self.paths:
            if match.target == target:
                return match.distance
        return None

    def targets(self) -> List[str]:
        """Reached targets in report order, without duplicates."""
        seen: Dict[str, None] = {}
        for match in self.paths:
            seen.setdefault(match.target, None)
        return list(seen)

    def to_list(self) -> List[Tuple[List[str], int]]:
        """The structured path list as (path, distance) tuples."""
        return [match.to_tuple() for match in self.paths]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['paths'] = [match.to_dict() for match in self.paths]
        return data
