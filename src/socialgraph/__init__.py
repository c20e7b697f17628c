"""
socialgraph - Degrees of separation in social-interaction networks

This package models forums and users as an undirected graph and answers
shortest-path ("degrees of separation") queries between named nodes. It includes:

- The core graph with idempotent node and edge insertion
- Breadth-first separation queries
- DOT export for visualization tooling
- CSV import of node names and JSON fixtures
- A command line driver
"""

__version__ = "0.1.0"
__author__ = "socialgraph Team"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("socialgraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.graph import Graph
from .core.serialization import GraphSerializer
from .core.traversal import degrees_of_separation

__all__ = [
    "Graph",
    "GraphSerializer",
    "degrees_of_separation",
]
