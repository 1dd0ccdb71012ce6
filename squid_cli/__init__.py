"""Command-line client for watching squid deploy pipelines."""

__version__ = "0.3.0"
