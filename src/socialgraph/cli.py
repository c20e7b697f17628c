"""Command Line Interface for the social graph.

This module builds a graph from the example fixture, optional JSON fixtures and
CSV sources, then answers degrees-of-separation queries and exports DOT text.

The CLI supports the following commands:
    - run: Print the nodes, the pairwise separation report and write DOT output
    - query: Print the separation between two identifiers
    - export: Write DOT output only

JSON fixtures can be provided either as a direct string or as a file path
prefixed with '@'. Settings can also be read from a JSON configuration file with
--config; command line flags take precedence over the file.

Example Usage:
    python -m socialgraph run --csv data/users.csv --csv data/subreddits.csv
    python -m socialgraph query rotoreuters askreddit
    python -m socialgraph export --output - --include-isolated
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVELS, RunConfig, load_config
from .core.exceptions import SocialGraphError
from .core.graph import Graph
from .core.serialization import GraphSerializer
from .core.traversal import degrees_of_separation, pairwise_separation
from .fixtures import apply_fixture, example_fixture, load_fixture
from .infrastructure.csv_import import CSVImporter

logger = logging.getLogger(__name__)


def build_graph(config: RunConfig) -> Graph:
    """Seed a graph with fixtures, then bulk-import every configured CSV source.

    Raises:
        SocialGraphError: If a fixture or CSV source cannot be loaded
    """
    graph = Graph()
    if config.use_example_fixture:
        apply_fixture(graph, example_fixture())
    if config.fixture:
        apply_fixture(graph, load_fixture(config.fixture))

    importer = CSVImporter(graph)
    for path in config.csv_paths:
        importer.import_file(path)

    logger.info(f"Built {graph!r}")
    return graph


def export_graph(graph: Graph, config: RunConfig) -> None:
    """Write DOT output to the configured destination."""
    serializer = GraphSerializer(graph)
    if config.output_path == "-":
        sys.stdout.write(serializer.to_dot(include_isolated=config.include_isolated))
        return

    serializer.write_dot(config.output_path, include_isolated=config.include_isolated)
    print(f"Graph saved to {config.output_path}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="JSON configuration file")
    common.add_argument(
        "--csv",
        dest="csv_paths",
        action="append",
        metavar="PATH",
        help="CSV file whose first column holds node names (repeatable)",
    )
    common.add_argument("--fixture", help="JSON string or @filename with nodes and edges")
    common.add_argument(
        "--no-example",
        dest="use_example_fixture",
        action="store_false",
        default=None,
        help="Do not seed the graph with the built-in example data",
    )
    common.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level")

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--output", dest="output_path", help="DOT destination, '-' for stdout")
    output.add_argument(
        "--include-isolated",
        action="store_true",
        default=None,
        help="Declare nodes without edges in the DOT output",
    )

    parser = argparse.ArgumentParser(
        prog="socialgraph", description="Degrees of separation in a social graph"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    run = subparsers.add_parser(
        "run", parents=[common, output], help="Report separations and write DOT output"
    )
    run.add_argument(
        "--query",
        dest="query_nodes",
        action="append",
        metavar="NAME",
        help="Node to include in the pairwise report (repeatable)",
    )

    query = subparsers.add_parser(
        "query", parents=[common], help="Degrees of separation between two nodes"
    )
    query.add_argument("start", help="Starting node")
    query.add_argument("end", help="Target node")

    subparsers.add_parser("export", parents=[common, output], help="Write DOT output")

    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    """Combine the optional configuration file with command line overrides."""
    config = load_config(args.config) if args.config else RunConfig()
    overrides = {
        "csv_paths": tuple(args.csv_paths) if args.csv_paths else None,
        "fixture": args.fixture,
        "use_example_fixture": args.use_example_fixture,
        "log_level": args.log_level,
        "output_path": getattr(args, "output_path", None),
        "include_isolated": getattr(args, "include_isolated", None),
    }
    query_nodes = getattr(args, "query_nodes", None)
    if query_nodes:
        overrides["query_nodes"] = tuple(query_nodes)
    return config.merged(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status, 1 if loading or exporting failed
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = resolve_config(args)
        logging.basicConfig(level=config.log_level_value)
        graph = build_graph(config)

        if args.command == "run":
            print(sorted(graph.nodes()))
            for result in pairwise_separation(graph, config.query_nodes):
                print(result)
            export_graph(graph, config)

        elif args.command == "query":
            degrees = degrees_of_separation(graph, args.start, args.end)
            if degrees is None:
                print(f"No path found between {args.start} and {args.end}")
            else:
                print(f"Degrees of separation between {args.start} and {args.end}: {degrees}")

        elif args.command == "export":
            export_graph(graph, config)

    except SocialGraphError as e:
        logger.error(str(e))
        return 1

    return 0
