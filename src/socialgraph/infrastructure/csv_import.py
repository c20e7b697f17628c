"""
Tabular import of node identifiers.

Reads a delimited text source with a header row and adds the value of the first
column of every data row to the graph as a node. This is how bulk data (for
example the Reddit user and subreddit embedding exports) enters the graph.

Blank lines are ignored. Any other failure stops the import: an unreadable
source raises SourceReadError, and a row whose field count differs from the
header or whose first column is empty raises RowFormatError. Rows read before
the failure have already been added.
"""

import csv
import logging
import os
from typing import Union

from ..core.exceptions import RowFormatError, SourceReadError
from ..core.graph import Graph

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class CSVImporter:
    """
    Adds the first column of a CSV source to a graph.

    Attributes:
        graph (Graph): Graph receiving the nodes
        delimiter (str): Field delimiter
        encoding (str): Text encoding of the source
    """

    def __init__(self, graph: Graph, delimiter: str = ",", encoding: str = "utf-8"):
        self.graph = graph
        self.delimiter = delimiter
        self.encoding = encoding

    def import_file(self, path: PathLike) -> int:
        """
        Import every data row of a CSV file.

        Args:
            path: Location of the source

        Returns:
            int: Number of data rows imported

        Raises:
            SourceReadError: If the source cannot be opened or decoded
            RowFormatError: If a row is missing its first column
        """
        source = os.fspath(path)
        count = 0
        try:
            with open(source, "r", encoding=self.encoding, newline="") as f:
                reader = csv.reader(f, delimiter=self.delimiter)
                header = next(reader, None)
                if header is None:
                    logger.info(f"No header in {source}, nothing imported")
                    return 0

                for row in reader:
                    # Blank lines are not rows
                    if not row:
                        continue
                    if len(row) != len(header):
                        raise RowFormatError(
                            f"row has {len(row)} fields, header has {len(header)}",
                            path=source,
                            line=reader.line_num,
                        )
                    name = row[0]
                    if not name:
                        raise RowFormatError(
                            "row is missing its first column", path=source, line=reader.line_num
                        )
                    self.graph.add_node(name)
                    count += 1
                    logger.debug(f"Imported node {name!r} from {source}:{reader.line_num}")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {source}: {str(e)}")
            raise SourceReadError(f"Cannot read {source}: {e}", path=source) from e
        except csv.Error as e:
            logger.error(f"Malformed CSV in {source}: {str(e)}")
            raise RowFormatError(str(e), path=source, line=reader.line_num) from e
        except RowFormatError as e:
            logger.error(f"Failed to import {source}: {str(e)}")
            raise

        logger.info(f"Imported {count} rows from {source}")
        return count


def add_from_csv(graph: Graph, path: PathLike, delimiter: str = ",") -> int:
    """Add the first column of every row of a CSV file to the graph."""
    return CSVImporter(graph, delimiter=delimiter).import_file(path)
