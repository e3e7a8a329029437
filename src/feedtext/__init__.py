"""Structured parsing and canonical rendering of game feed event text."""

__version__ = "0.1.0"
