"""
Model classes for the indexing system.
"""

from .index_entry import IndexEntry, QueryResult
from .project_index import IndexStats, ProjectIndex

__all__ = ['IndexEntry', 'QueryResult', 'IndexStats', 'ProjectIndex']
