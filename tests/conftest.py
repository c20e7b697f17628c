"""Shared test fixtures."""

import pytest

from socialgraph.core.graph import Graph


@pytest.fixture
def path_graph() -> Graph:
    """Fixture providing the path A - B - C plus an isolated node D."""
    graph = Graph()
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.add_node("D")
    return graph


@pytest.fixture
def reddit_graph() -> Graph:
    """Fixture providing one subreddit linked to one user."""
    graph = Graph()
    graph.add_node("askreddit")
    graph.add_node("rotoreuters")
    graph.add_edge("askreddit", "rotoreuters")
    return graph
