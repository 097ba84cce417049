"""
Project file enumeration.

Walks a project tree and yields the project-relative paths of files with a
source-relevant extension. This is the coarse candidate pass; ignore rules
are applied afterwards by FileFilter.
"""

import os
from pathlib import Path
from typing import FrozenSet, Iterator, Optional

# Extensions worth indexing (without the dot)
ALLOWED_EXTENSIONS = frozenset({
    "ts", "tsx", "js", "jsx", "py", "go", "rs", "java", "cs", "rb",
    "css", "scss", "html", "vue", "svelte", "json", "yaml", "yml",
    "md", "mdx", "sh", "sql", "prisma",
})

# Directories never descended into
SKIP_DIRS = frozenset({"node_modules", ".next", "dist", ".git"})


class FileWalker:
    """
    Recursive walk over a project directory.

    Entries are visited in sorted name order so the same tree always yields
    the same sequence. Symbolic links are neither followed nor yielded, and
    dot-prefixed files and directories are skipped.
    """

    def __init__(
        self,
        allowed_extensions: Optional[FrozenSet[str]] = None,
        skip_dirs: Optional[FrozenSet[str]] = None,
    ):
        self.allowed_extensions = allowed_extensions or ALLOWED_EXTENSIONS
        self.skip_dirs = skip_dirs or SKIP_DIRS

    def is_candidate(self, name: str) -> bool:
        if name.startswith(".") or "." not in name:
            return False
        return name.rsplit(".", 1)[-1].lower() in self.allowed_extensions

    def walk_files(self, project_path: str) -> Iterator[str]:
        """
        Yield candidate files under ``project_path``.

        Args:
            project_path: Root directory to walk

        Yields:
            Forward-slash paths relative to the root
        """
        yield from self._walk_dir(Path(project_path), "")

    def _walk_dir(self, directory: Path, prefix: str) -> Iterator[str]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError:
            # Unreadable directory: skip it, keep walking the rest
            return

        subdirs = []
        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                if entry.is_symlink():
                    continue
                if entry.is_dir(follow_symlinks=False):
                    if entry.name not in self.skip_dirs:
                        subdirs.append(entry)
                elif entry.is_file(follow_symlinks=False) and self.is_candidate(entry.name):
                    yield prefix + entry.name
            except OSError:
                continue

        for entry in subdirs:
            yield from self._walk_dir(Path(entry.path), f"{prefix}{entry.name}/")
