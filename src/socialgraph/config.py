"""
Run configuration for the command line driver.

Configuration is a frozen dataclass. It can be built from a JSON file, which is
validated against CONFIG_SCHEMA; command line flags then override individual
values. Source paths are always supplied by the caller, never built in.
"""

import json
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.exceptions import ConfigurationError

DEFAULT_QUERY_NODES = ("rotoreuters", "askreddit", "fireteams", "funny")
DEFAULT_OUTPUT_PATH = "graph.dot"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "csv_paths": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "query_nodes": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "output_path": {"type": "string", "minLength": 1},
        "include_isolated": {"type": "boolean"},
        "use_example_fixture": {"type": "boolean"},
        "fixture": {"type": ["string", "null"]},
        "log_level": {"type": "string", "enum": list(LOG_LEVELS)},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class RunConfig:
    """
    Settings for one driver run.

    Attributes:
        csv_paths: CSV sources to bulk-import, in order
        query_nodes: Identifiers whose pairwise separation is reported
        output_path: DOT destination, '-' for standard output
        include_isolated: Declare neighbor-less nodes in the DOT output
        use_example_fixture: Seed the graph with the built-in example data
        fixture: Extra fixture as JSON text or '@path'
        log_level: Logging level name
    """

    csv_paths: Tuple[str, ...] = field(default_factory=tuple)
    query_nodes: Tuple[str, ...] = DEFAULT_QUERY_NODES
    output_path: str = DEFAULT_OUTPUT_PATH
    include_isolated: bool = False
    use_example_fixture: bool = True
    fixture: Optional[str] = None
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """
        Build a configuration from parsed JSON data.

        Raises:
            ConfigurationError: If the data does not match CONFIG_SCHEMA
        """
        try:
            json_validate(instance=data, schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid configuration: {e.message}") from e

        values = dict(data)
        for key in ("csv_paths", "query_nodes"):
            if key in values:
                values[key] = tuple(values[key])
        return cls(**values)

    def merged(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: str) -> RunConfig:
    """
    Load a configuration file.

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration {path}: {e}") from e

    return RunConfig.from_dict(data)
