"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    ExportError,
    RowFormatError,
    SocialGraphError,
    SourceReadError,
    ValidationError,
)
from .graph import Graph, GraphEvent, GraphStateListener
from .serialization import GraphSerializer
from .traversal import SeparationResult, degrees_of_separation, pairwise_separation

__all__ = [
    "ConfigurationError",
    "ExportError",
    "Graph",
    "GraphEvent",
    "GraphSerializer",
    "GraphStateListener",
    "RowFormatError",
    "SeparationResult",
    "SocialGraphError",
    "SourceReadError",
    "ValidationError",
    "degrees_of_separation",
    "pairwise_separation",
]
