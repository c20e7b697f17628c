"""
Graph fixtures: literal node and edge lists used to seed a graph.

A fixture is kept separate from bulk import so that a graph can be seeded with
known data without touching the filesystem. Fixtures can also be supplied as
JSON, either directly or as a file path prefixed with '@':

    {"nodes": ["askreddit", "rotoreuters"], "edges": [["askreddit", "rotoreuters"]]}

JSON fixtures are checked against FIXTURE_SCHEMA before use.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.exceptions import SourceReadError, ValidationError
from .core.graph import Graph

FIXTURE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "nodes": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "array",
                "items": {"type": "string", "minLength": 1},
                "minItems": 2,
                "maxItems": 2,
            },
        },
    },
    "additionalProperties": False,
}

SUBREDDITS = ("askreddit", "globaloffensivetrade", "fireteams", "funny", "the_donald")
USERS = ("rotoreuters", "fiplefip", "amici_ursi", "unremovable", "CDRE_64")


@dataclass(frozen=True)
class GraphFixture:
    """Literal nodes and edges to seed a graph with."""

    nodes: Tuple[str, ...] = field(default_factory=tuple)
    edges: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)


def example_fixture() -> GraphFixture:
    """
    Hand-picked subreddits and users from the Reddit embedding data.

    Each subreddit is linked to one user. The links are illustrative rather
    than taken from the interaction data.
    """
    return GraphFixture(nodes=SUBREDDITS + USERS, edges=tuple(zip(SUBREDDITS, USERS)))


def apply_fixture(graph: Graph, fixture: GraphFixture) -> None:
    """Add all fixture nodes, then all fixture edges, to the graph."""
    graph.add_nodes_batch(fixture.nodes)
    graph.add_edges_batch(fixture.edges)


def fixture_from_dict(data: Dict[str, Any]) -> GraphFixture:
    """
    Build a fixture from parsed JSON data.

    Raises:
        ValidationError: If the data does not match FIXTURE_SCHEMA
    """
    try:
        json_validate(instance=data, schema=FIXTURE_SCHEMA)
    except JsonSchemaError as e:
        raise ValidationError(f"Invalid fixture: {e.message}") from e

    return GraphFixture(
        nodes=tuple(data.get("nodes", [])),
        edges=tuple((u, v) for u, v in data.get("edges", [])),
    )


def load_fixture(source: str) -> GraphFixture:
    """
    Load a fixture from a JSON string or an '@'-prefixed file path.

    Args:
        source: Either JSON text or '@' followed by a path. Relative paths are
            resolved against the current directory.

    Returns:
        GraphFixture: Validated fixture

    Raises:
        SourceReadError: If the fixture file cannot be read
        ValidationError: If the JSON is invalid or does not match the schema
    """
    if source.startswith("@"):
        file_path = os.path.abspath(source[1:])
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Cannot read fixture {file_path}: {e}", path=file_path) from e
    else:
        text = source

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}") from e

    return fixture_from_dict(data)
