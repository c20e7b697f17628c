"""
Core graph data structure with an adjacency set representation.

This module provides the Graph class that represents the social-interaction
network (forums and users) as an undirected graph. Every undirected edge is
stored as two directed arcs, so the adjacency mapping stays symmetric and every
identifier that appears as a neighbor is also a node in its own right.

Mutation is idempotent: adding a node or an edge that already exists leaves the
adjacency unchanged. There is no removal operation.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from threading import RLock
from typing import Dict, FrozenSet, Iterable, List, Optional, Protocol, Set, Tuple

from .traversal import degrees_of_separation


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    NODE_ADDED = auto()
    EDGE_ADDED = auto()


class GraphStateListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Called when the graph state changes."""


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[str, Set[str]] = field(default_factory=dict)
    edge_count: int = 0


class Graph:
    """
    Undirected graph keyed by node identifier.

    Identifiers are opaque, case-sensitive strings. The graph is created empty
    and only grows through add_node and add_edge.

    Attributes:
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock covering the node map and every neighbor set
        _listeners (List[GraphStateListener]): State change listeners
    """

    def __init__(self) -> None:
        self._state = GraphState()
        self._state_lock = RLock()
        self._listeners: List[GraphStateListener] = []

    def __len__(self) -> int:
        with self._state_lock:
            return len(self._state.adjacency)

    def __contains__(self, node: object) -> bool:
        with self._state_lock:
            return node in self._state.adjacency

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.get_edge_count()})"

    def add_state_listener(self, listener: GraphStateListener) -> None:
        """Add a listener for state changes."""
        self._listeners.append(listener)

    def remove_state_listener(self, listener: GraphStateListener) -> None:
        """Remove a state change listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Notify listeners of a state change."""
        for listener in self._listeners:
            listener.on_state_change(change_type, details)

    def _ensure_node(self, node: str) -> bool:
        """Create an empty neighbor set for node if missing. Caller holds the lock."""
        if node in self._state.adjacency:
            return False
        self._state.adjacency[node] = set()
        return True

    def add_node(self, node: str) -> None:
        """
        Add a node to the graph.

        If the node already exists its neighbor set is left untouched.

        Args:
            node (str): Node identifier
        """
        with self._state_lock:
            if self._ensure_node(node):
                self._notify_state_change(GraphEvent.NODE_ADDED, {"node": node})

    def add_edge(self, from_node: str, to_node: str) -> None:
        """
        Add an undirected edge between two nodes.

        Both endpoints are created if they are not nodes yet, then both directed
        arcs are inserted. A self-edge makes the node its own neighbor.

        Listeners are notified only once both arcs are in place: NODE_ADDED for
        each endpoint that was created, then EDGE_ADDED.

        Args:
            from_node (str): First endpoint
            to_node (str): Second endpoint
        """
        with self._state_lock:
            created = [node for node in (from_node, to_node) if self._ensure_node(node)]

            if to_node in self._state.adjacency[from_node]:
                return

            self._state.adjacency[from_node].add(to_node)
            self._state.adjacency[to_node].add(from_node)
            self._state.edge_count += 1

            for node in created:
                self._notify_state_change(GraphEvent.NODE_ADDED, {"node": node})
            self._notify_state_change(
                GraphEvent.EDGE_ADDED, {"from_node": from_node, "to_node": to_node}
            )

    def add_nodes_batch(self, nodes: Iterable[str]) -> None:
        """Add multiple nodes to the graph."""
        with self._state_lock:
            for node in nodes:
                self.add_node(node)

    def add_edges_batch(self, edges: Iterable[Tuple[str, str]]) -> None:
        """Add multiple undirected edges to the graph."""
        with self._state_lock:
            for from_node, to_node in edges:
                self.add_edge(from_node, to_node)

    def nodes(self) -> Set[str]:
        """Get a snapshot of all nodes in the graph."""
        with self._state_lock:
            return set(self._state.adjacency)

    def adj(self, node: str) -> Optional[FrozenSet[str]]:
        """
        Get the neighbors of a node.

        Args:
            node (str): Node identifier

        Returns:
            Optional[FrozenSet[str]]: Immutable snapshot of the neighbor set, or
            None if the node is not in the graph
        """
        with self._state_lock:
            neighbors = self._state.adjacency.get(node)
            if neighbors is None:
                return None
            return frozenset(neighbors)

    def has_node(self, node: str) -> bool:
        """Check if a node exists in the graph."""
        return node in self

    def has_edge(self, from_node: str, to_node: str) -> bool:
        """Check if an edge exists between two nodes."""
        with self._state_lock:
            return to_node in self._state.adjacency.get(from_node, ())

    def get_degree(self, node: str) -> int:
        """Get the number of neighbors of a node, 0 for unknown nodes."""
        with self._state_lock:
            return len(self._state.adjacency.get(node, ()))

    def get_edge_count(self) -> int:
        """Get the number of undirected edges in the graph."""
        with self._state_lock:
            return self._state.edge_count

    def get_arcs(self) -> List[Tuple[str, str]]:
        """Get every stored directed arc, both directions of each edge."""
        with self._state_lock:
            return [
                (node, neighbor)
                for node, neighbors in self._state.adjacency.items()
                for neighbor in neighbors
            ]

    def degrees_of_separation(self, start: str, end: str) -> Optional[int]:
        """Get the minimum number of edges between two nodes, None if unreachable."""
        return degrees_of_separation(self, start, end)
