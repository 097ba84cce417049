"""
In-memory store of project indexes, keyed by normalized project path.

Each key holds the most recent ProjectIndex for that path. Replacement is
a single dict assignment under a lock, so readers see either the old or
the new index, never a mix. Removing a path remembers the version at which
it was removed, so a scan that started before the removal cannot bring the
path back. Nothing is persisted.
"""

import itertools
import threading
from typing import Dict, List, Optional, Tuple

from .models import ProjectIndex


class IndexStore:
    """Thread-safe keyed storage with optional version-checked writes."""

    def __init__(self):
        self._entries: Dict[str, Tuple[int, ProjectIndex]] = {}
        self._removed_at: Dict[str, int] = {}
        self._lock = threading.RLock()
        self._versions = itertools.count(1)

    def next_version(self) -> int:
        """Issue a version number; later calls always return larger numbers."""
        with self._lock:
            return next(self._versions)

    def put(self, path: str, index: ProjectIndex) -> None:
        """Unconditionally replace the entry for ``path``."""
        with self._lock:
            self._entries[path] = (self.next_version(), index)

    def put_if_newer(self, path: str, index: ProjectIndex, version: int) -> bool:
        """
        Store ``index`` unless a write with a higher version already landed
        or ``path`` was removed after ``version`` was issued.

        Returns False when the write was rejected as stale.
        """
        with self._lock:
            current = self._entries.get(path)
            if current is not None and current[0] > version:
                return False
            if self._removed_at.get(path, 0) > version:
                return False
            self._entries[path] = (version, index)
            return True

    def get(self, path: str) -> Optional[ProjectIndex]:
        with self._lock:
            current = self._entries.get(path)
        return current[1] if current else None

    def remove(self, path: str) -> bool:
        """Drop ``path`` and reject pending writes versioned before now."""
        with self._lock:
            self._removed_at[path] = self.next_version()
            return self._entries.pop(path, None) is not None

    def contains(self, path: str) -> bool:
        with self._lock:
            return path in self._entries

    def paths(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._removed_at.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_global_store: Optional[IndexStore] = None
_store_lock = threading.Lock()


def get_index_store() -> IndexStore:
    """Process-wide default store."""
    global _global_store
    with _store_lock:
        if _global_store is None:
            _global_store = IndexStore()
        return _global_store


def reset_index_store() -> None:
    """Drop the process-wide store (mainly for testing)"""
    global _global_store
    with _store_lock:
        _global_store = None
