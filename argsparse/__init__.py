"""A simple, schema-free command-line argument parser."""

__version__ = "0.1.2"