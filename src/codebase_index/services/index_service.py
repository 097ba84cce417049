"""
Index Service - the scan/query/status surface of the codebase index.

Collaborators (the MCP tools, a chat or voice layer) talk to this class
only. It validates input, normalizes project paths, runs scans, keeps the
per-path lifecycle state and shapes responses as plain dicts.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..config import IndexerConfig, get_config
from ..errors import IndexerError, InvalidInputError
from ..indexing import IndexStore, ProjectScanner, normalize_project_path
from ..search import RelevanceRanker

logger = logging.getLogger(__name__)


class IndexStatus(str, Enum):
    IDLE = "idle"
    INDEXING = "indexing"
    READY = "ready"
    ERROR = "error"


@dataclass
class ProjectState:
    status: IndexStatus = IndexStatus.IDLE
    error: Optional[str] = None
    latest_version: int = 0


class IndexService:
    """
    Scan, query and status operations over an injected IndexStore.

    Scans of the same path may overlap. Every scan takes a version from the
    store when it starts and writes with put_if_newer, so whichever scan
    started last owns the stored index even if an older one finishes later.
    """

    def __init__(
        self,
        store: IndexStore,
        config: Optional[IndexerConfig] = None,
        scanner: Optional[ProjectScanner] = None,
    ):
        self.store = store
        self.config = config or get_config()
        self.scanner = scanner or ProjectScanner(self.config)
        self.ranker = RelevanceRanker(store)
        self._states: Dict[str, ProjectState] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _require_path(project_path: Optional[str]) -> str:
        path = normalize_project_path(project_path) if project_path else ""
        if not path:
            raise InvalidInputError("projectPath is required")
        return path

    def _state(self, path: str) -> ProjectState:
        with self._lock:
            return self._states.setdefault(path, ProjectState())

    def get_status(self, project_path: str) -> IndexStatus:
        with self._lock:
            state = self._states.get(normalize_project_path(project_path))
        return state.status if state else IndexStatus.IDLE

    async def scan(self, project_path: str) -> Dict[str, Any]:
        """Scan a project and replace its stored index."""
        path = self._require_path(project_path)
        version = self.store.next_version()
        state = self._state(path)
        with self._lock:
            state.latest_version = version
            state.status = IndexStatus.INDEXING
            state.error = None

        try:
            index = await self.scanner.scan(path)
        except Exception as e:
            with self._lock:
                if state.latest_version == version:
                    state.status = IndexStatus.ERROR
                    state.error = str(e)
            if not isinstance(e, IndexerError):
                logger.error(f"Scan of {path} failed: {e}", exc_info=True)
            raise

        stored = self.store.put_if_newer(path, index, version)
        with self._lock:
            if state.latest_version == version:
                state.status = IndexStatus.READY
        if not stored:
            logger.info(f"Discarded stale scan of {path} (version {version})")

        response: Dict[str, Any] = {"ok": True, "projectPath": path}
        response.update(index.summary())
        if not stored:
            response["stale"] = True
        return response

    def query(self, query: str, project_path: str, max_files: Optional[int] = None) -> Dict[str, Any]:
        """Rank indexed files of a project against a free-text query."""
        if not query or not project_path:
            raise InvalidInputError("query and projectPath are required")
        path = self._require_path(project_path)
        if max_files is None:
            max_files = self.config.max_results

        results = self.ranker.query(query, path, max_files)
        index = self.store.get(path)
        return {
            "query": query,
            "totalIndexed": len(index.files) if index else 0,
            "found": len(results),
            "files": [result.to_dict() for result in results],
        }

    def status(self, project_path: Optional[str]) -> Dict[str, Any]:
        """Summary of a project's index; never raises."""
        path = normalize_project_path(project_path) if isinstance(project_path, str) else ""
        index = self.store.get(path) if path else None
        if index is None:
            return {"indexed": False}

        response: Dict[str, Any] = {"indexed": True}
        response.update(index.summary())
        status = self.get_status(path)
        if status is IndexStatus.IDLE:
            # Stored by someone else sharing the store
            status = IndexStatus.READY
        response["status"] = status.value
        return response

    def unlink(self, project_path: str) -> Dict[str, Any]:
        """Forget a project's index and reset its lifecycle."""
        path = self._require_path(project_path)
        removed = self.store.remove(path)
        with self._lock:
            self._states.pop(path, None)
        logger.info(f"Unlinked {path} (removed={removed})")
        return {"ok": True, "projectPath": path, "removed": removed}
