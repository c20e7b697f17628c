"""
Breadth-first separation queries over the social graph.

Degrees of separation between two identifiers is the minimum number of edges
on any path connecting them. Absence of a path, or an endpoint that is not in
the graph, is an ordinary result (None) rather than an error.
"""

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, List, Optional, Sequence, Set, Tuple

if TYPE_CHECKING:
    from .graph import Graph


def degrees_of_separation(graph: "Graph", start: str, end: str) -> Optional[int]:
    """
    Compute the degrees of separation between two nodes.

    Identical identifiers are 0 apart even when neither is in the graph.
    Otherwise the graph is searched breadth first; the first time the end node
    is dequeued its recorded distance is minimal. Visited status is checked
    when a node is dequeued, so the queue may briefly hold duplicates.

    Args:
        graph: Graph to search
        start: Starting identifier
        end: Target identifier

    Returns:
        Optional[int]: Number of edges on the shortest path, or None if no path exists
    """
    if start == end:
        return 0

    visited: Set[str] = set()
    queue: Deque[Tuple[str, int]] = deque([(start, 0)])

    while queue:
        current, distance = queue.popleft()
        if current == end:
            return distance

        if current in visited:
            continue
        visited.add(current)

        # Unknown identifiers contribute no neighbors
        for neighbor in graph.adj(current) or ():
            if neighbor not in visited:
                queue.append((neighbor, distance + 1))

    return None


@dataclass(frozen=True)
class SeparationResult:
    """Separation between one pair of identifiers."""

    start: str
    end: str
    degrees: Optional[int]

    @property
    def connected(self) -> bool:
        return self.degrees is not None

    def __str__(self) -> str:
        if self.degrees is None:
            return f"No path found between {self.start} and {self.end}"
        return f"Degrees of separation between {self.start} and {self.end}: {self.degrees}"


def pairwise_separation(graph: "Graph", names: Sequence[str]) -> List[SeparationResult]:
    """
    Compute separation for every unordered pair of names.

    Pairs are produced in input order: (names[0], names[1]), (names[0], names[2]),
    ..., (names[1], names[2]), and so on.

    Args:
        graph: Graph to search
        names: Identifiers of interest

    Returns:
        List[SeparationResult]: One result per pair
    """
    results = []
    for i, start in enumerate(names):
        for end in names[i + 1 :]:
            results.append(SeparationResult(start, end, degrees_of_separation(graph, start, end)))
    return results
