"""Graph serialization to DOT text.

This module renders the graph for visualization tooling (Graphviz and
compatible viewers):
- One directed statement per stored arc, so each undirected edge appears twice
- Optional standalone declarations for isolated nodes
- Writing the rendered text to a caller-supplied destination
"""

import logging
import os
from typing import List, Union

from .exceptions import ExportError
from .graph import Graph

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def quote_identifier(node: str) -> str:
    """Quote an identifier as a DOT string literal."""
    escaped = node.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class GraphSerializer:
    """Handles graph serialization operations."""

    def __init__(self, graph: Graph):
        """Initialize serializer.

        Args:
            graph: Graph to render
        """
        self.graph = graph

    def to_dot(self, include_isolated: bool = False) -> str:
        """Render the graph as a DOT digraph.

        Statements are sorted so the output is stable across runs.

        Args:
            include_isolated: Also declare nodes that have no neighbors. Off by
                default, in which case such nodes do not appear in the output.

        Returns:
            DOT text ending with a newline
        """
        lines: List[str] = ["digraph G {"]

        if include_isolated:
            for node in sorted(self.graph.nodes()):
                if self.graph.get_degree(node) == 0:
                    lines.append(f"    {quote_identifier(node)};")

        for from_node, to_node in sorted(self.graph.get_arcs()):
            lines.append(f"    {quote_identifier(from_node)} -> {quote_identifier(to_node)};")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def write_dot(self, destination: PathLike, include_isolated: bool = False) -> None:
        """Write the DOT rendering to a file.

        Args:
            destination: Path of the file to create or overwrite
            include_isolated: See to_dot

        Raises:
            ExportError: If the destination cannot be written
        """
        dot = self.to_dot(include_isolated=include_isolated)
        try:
            with open(destination, "w", encoding="utf-8") as f:
                f.write(dot)
        except OSError as e:
            logger.error(f"Failed to write graph to {destination}: {str(e)}")
            raise ExportError(f"Cannot write graph to {destination}: {e}") from e

        logger.info(f"Wrote {self.graph.get_edge_count()} edges to {destination}")
