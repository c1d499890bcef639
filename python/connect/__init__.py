"""Connections word-grouping puzzle."""

__version__ = "0.1.0"
