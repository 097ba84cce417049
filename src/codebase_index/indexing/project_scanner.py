"""
Project Scanner - builds a ProjectIndex from a directory on disk.

The scan is bounded rather than complete: at most ``max_files`` candidates
are kept (in walk order) and files over ``max_file_size`` bytes are skipped.
The directory walk runs in a worker thread and file reads go through
aiofiles, so a scan never blocks the event loop. A file that cannot be
stat'd or read is left out of the index without failing the scan.
"""

import asyncio
import logging
import os
import time
from datetime import datetime, timezone
from itertools import islice
from pathlib import Path
from typing import List, Optional

import aiofiles
import aiofiles.os

from ..config import IndexerConfig, get_config
from ..errors import InvalidInputError, ProjectNotADirectoryError, ProjectNotFoundError
from ..utils import FileFilter, FileWalker
from .languages import detect_language
from .models import IndexEntry, ProjectIndex
from .strategies import extract_metadata

logger = logging.getLogger(__name__)

QUOTE_CHARS = "\"'"


def normalize_project_path(raw_path: str) -> str:
    """Trim whitespace and enclosing quotes pasted along with a path."""
    if not isinstance(raw_path, str):
        raise InvalidInputError("projectPath is required")
    path = raw_path.strip()
    while len(path) >= 2 and path[0] == path[-1] and path[0] in QUOTE_CHARS:
        path = path[1:-1].strip()
    return path


def utc_timestamp(epoch: Optional[float] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    moment = datetime.fromtimestamp(epoch if epoch is not None else time.time(), tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProjectScanner:
    """
    Scans a project directory into a ProjectIndex.

    The scanner holds no state between scans; storing the result is the
    caller's job.
    """

    def __init__(self, config: Optional[IndexerConfig] = None, walker: Optional[FileWalker] = None):
        self.config = config or get_config()
        self.walker = walker or FileWalker()

    async def scan(self, project_path: str) -> ProjectIndex:
        """
        Scan ``project_path`` and return its index.

        Raises:
            InvalidInputError: the path is empty after normalization
            ProjectNotFoundError: the path does not exist
            ProjectNotADirectoryError: the path is not a directory
        """
        root = normalize_project_path(project_path)
        if not root:
            raise InvalidInputError("projectPath is required")
        if not await aiofiles.os.path.exists(root):
            raise ProjectNotFoundError(root)
        if not await aiofiles.os.path.isdir(root):
            raise ProjectNotADirectoryError(root)

        start_time = time.time()
        # The walk and .gitignore read are blocking; keep them off the loop
        candidates = await asyncio.to_thread(self.collect_candidates, root)
        logger.info(f"Scanning {root}: {len(candidates)} candidate files")

        semaphore = asyncio.Semaphore(self.config.read_concurrency)
        results = await asyncio.gather(
            *(self._index_file(root, rel_path, semaphore) for rel_path in candidates)
        )
        entries = [entry for entry in results if entry is not None]

        index = ProjectIndex.build(project_path=root, indexed_at=utc_timestamp(), files=entries)

        elapsed = time.time() - start_time
        logger.info(
            f"Indexed {index.stats.total_files} files ({index.stats.total_lines} lines) "
            f"from {root} in {elapsed:.2f}s"
        )
        return index

    def collect_candidates(self, root: str) -> List[str]:
        """Walk, apply ignore rules and cap the candidate list."""
        file_filter = FileFilter.from_project(Path(root))
        logger.debug(f"Ignore rules for {root}: {file_filter.get_exclude_summary()}")
        kept = file_filter.filter_paths(self.walker.walk_files(root))
        return list(islice(kept, self.config.max_files))

    async def _index_file(
        self, root: str, rel_path: str, semaphore: asyncio.Semaphore
    ) -> Optional[IndexEntry]:
        """Read and analyse one file; None when skipped or unreadable."""
        abs_path = os.path.join(root, rel_path)
        try:
            async with semaphore:
                stat_result = await aiofiles.os.stat(abs_path)
                if stat_result.st_size > self.config.max_file_size:
                    logger.debug(f"Skipping {rel_path}: {stat_result.st_size} bytes")
                    return None
                async with aiofiles.open(
                    abs_path, "r", encoding="utf-8", errors="replace", newline=""
                ) as f:
                    content = await f.read()
        except (OSError, UnicodeError, ValueError) as e:
            logger.debug(f"Skipping unreadable file {rel_path}: {e}")
            return None

        language = detect_language(rel_path)
        symbols, imports = extract_metadata(content, language)
        return IndexEntry(
            file_path=rel_path.replace("\\", "/"),
            language=language,
            content=content,
            symbols=tuple(symbols),
            imports=tuple(imports),
            size=stat_result.st_size,
            last_modified=utc_timestamp(stat_result.st_mtime),
            line_count=len(content.split("\n")),
        )
