"""Durable CSV storage for collected designs."""

from .csv_table import CreateResult, DesignTable, StoreError, TableMissingError, parse_csv_line, table_stats

__all__ = ["CreateResult", "DesignTable", "StoreError", "TableMissingError", "parse_csv_line", "table_stats"]
