"""
Data models for hlstags.

Configuration objects shared by the tag parsers.
"""

from dataclasses import dataclass


@dataclass
class ParseConfig:
    """Configuration for tag parse operations."""
    reject_duplicate_attributes: bool = False  # Default: last one wins
