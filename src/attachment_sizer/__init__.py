"""Rank the attachments of an extracted GitHub archive by size."""

__version__ = "0.1.0"
