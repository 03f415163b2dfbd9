"""
Snapshot table sources.

Each source returns raw TSV text for a table file name; TSVParser turns it
into rows.
"""

from .base import TableSource
from .directory import DirectoryTableSource
from .web import HttpTableSource

__all__ = [
    'TableSource',
    'DirectoryTableSource',
    'HttpTableSource',
]
