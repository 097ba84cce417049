"""
Project-level index and its derived statistics.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .index_entry import IndexEntry


@dataclass(frozen=True)
class IndexStats:
    total_files: int = 0
    total_lines: int = 0
    languages: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_entries(cls, entries: Iterable[IndexEntry]) -> "IndexStats":
        total_files = 0
        total_lines = 0
        languages: Dict[str, int] = {}
        for entry in entries:
            total_files += 1
            total_lines += entry.line_count
            languages[entry.language] = languages.get(entry.language, 0) + 1
        return cls(total_files=total_files, total_lines=total_lines, languages=MappingProxyType(languages))


@dataclass(frozen=True)
class ProjectIndex:
    """
    Snapshot of one project directory at scan time.

    Built in one piece by a scan and never mutated afterwards; a re-scan
    produces a new ProjectIndex that replaces this one in the store.
    """

    project_path: str
    indexed_at: str
    files: Tuple[IndexEntry, ...]
    stats: IndexStats

    @classmethod
    def build(cls, project_path: str, indexed_at: str, files: Iterable[IndexEntry]) -> "ProjectIndex":
        files = tuple(files)
        return cls(
            project_path=project_path,
            indexed_at=indexed_at,
            files=files,
            stats=IndexStats.from_entries(files),
        )

    def get_file(self, file_path: str) -> Optional[IndexEntry]:
        for entry in self.files:
            if entry.file_path == file_path:
                return entry
        return None

    def summary(self) -> Dict[str, Any]:
        return {
            "fileCount": self.stats.total_files,
            "totalLines": self.stats.total_lines,
            "languages": dict(self.stats.languages),
            "indexedAt": self.indexed_at,
        }
