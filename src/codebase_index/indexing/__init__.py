"""
Indexing package: language detection, extraction, scanning and storage.
"""

from .index_store import IndexStore, get_index_store, reset_index_store
from .languages import LANGUAGE_MAP, detect_language
from .models import IndexEntry, IndexStats, ProjectIndex, QueryResult
from .project_scanner import ProjectScanner, normalize_project_path

__all__ = [
    'IndexStore',
    'get_index_store',
    'reset_index_store',
    'LANGUAGE_MAP',
    'detect_language',
    'IndexEntry',
    'IndexStats',
    'ProjectIndex',
    'QueryResult',
    'ProjectScanner',
    'normalize_project_path',
]
