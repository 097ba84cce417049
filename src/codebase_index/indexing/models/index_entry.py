"""
Per-file index record.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class IndexEntry:
    """Metadata and content snapshot for a single file."""

    file_path: str  # project-relative, forward slashes
    language: str
    content: str
    symbols: Tuple[str, ...] = ()
    imports: Tuple[str, ...] = ()
    size: int = 0
    last_modified: str = ""
    line_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filePath": self.file_path,
            "language": self.language,
            "content": self.content,
            "symbols": list(self.symbols),
            "imports": list(self.imports),
            "size": self.size,
            "lastModified": self.last_modified,
        }


@dataclass(frozen=True)
class QueryResult:
    """An index entry with the score it earned for one query."""

    entry: IndexEntry
    relevance_score: int

    @property
    def file_path(self) -> str:
        return self.entry.file_path

    def to_dict(self) -> Dict[str, Any]:
        data = self.entry.to_dict()
        data["relevanceScore"] = self.relevance_score
        return data
