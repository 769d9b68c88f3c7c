"""Declarative datasource permission reconciliation."""

__version__ = "0.1.0"
