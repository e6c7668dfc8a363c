"""Credential resolution and region-bound AWS service clients."""

__version__ = "0.1.0"
