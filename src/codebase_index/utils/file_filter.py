"""
Ignore rules for project scanning.

A project's ``.gitignore`` is combined with a fixed set of built-in
exclusions (dependency and build output directories, VCS metadata,
lockfiles, environment files, binary assets and minified bundles).
Matching follows gitignore semantics via ``pathspec``.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

logger = logging.getLogger(__name__)

BUILTIN_EXCLUDES = [
    "node_modules",
    ".next",
    "dist",
    "build",
    ".git",
    "__pycache__",
    "*.min.js",
    "*.min.css",
    "*.map",
    "*.lock",
    "package-lock.json",
    ".env",
    ".env.*",
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.svg",
    "*.ico",
    "*.woff",
    "*.woff2",
    "*.ttf",
    "*.eot",
    "*.webp",
]


class FileFilter:
    """Decides whether a project-relative path is excluded from indexing."""

    def __init__(self, extra_patterns: Optional[Iterable[str]] = None):
        """
        Initialize the filter.

        Args:
            extra_patterns: gitignore-style lines (typically the project's
                ``.gitignore``). They are matched separately from the
                built-in exclusions, so a negation cannot re-include a
                built-in.
        """
        self.patterns: List[str] = [
            line for line in (p.strip() for p in (extra_patterns or [])) if line and not line.startswith("#")
        ]
        self._builtin_spec = pathspec.GitIgnoreSpec.from_lines(BUILTIN_EXCLUDES)
        self._project_spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    @classmethod
    def from_project(cls, project_root: Path) -> "FileFilter":
        """Build a filter from ``<project_root>/.gitignore`` if present."""
        gitignore = Path(project_root) / ".gitignore"
        lines: List[str] = []
        if gitignore.is_file():
            lines = gitignore.read_text(encoding="utf-8", errors="ignore").splitlines()
            logger.debug(f"Loaded {len(lines)} lines from {gitignore}")
        return cls(lines)

    def should_exclude(self, rel_path: str) -> bool:
        """Check a forward-slash, project-relative file path."""
        rel_path = rel_path.replace("\\", "/")
        return self._builtin_spec.match_file(rel_path) or self._project_spec.match_file(rel_path)

    def filter_paths(self, rel_paths: Iterable[str]) -> Iterable[str]:
        """Yield the paths that are not excluded, preserving order."""
        for rel_path in rel_paths:
            if not self.should_exclude(rel_path):
                yield rel_path

    def get_exclude_summary(self) -> dict:
        return {
            "builtin_patterns": len(BUILTIN_EXCLUDES),
            "project_patterns": len(self.patterns),
        }
