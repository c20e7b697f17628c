"""Data ingestion for the social graph."""

from .csv_import import CSVImporter, add_from_csv

__all__ = ["CSVImporter", "add_from_csv"]
