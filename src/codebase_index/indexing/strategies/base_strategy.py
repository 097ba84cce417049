"""
Base class for lexical extraction strategies.

Extraction is pattern based, not parsing. Names inside strings or comments
can be picked up and unusual syntax can be missed; scoring only needs an
approximate symbol set.
"""

import re
from abc import ABC, abstractmethod
from typing import Iterable, List, Pattern, Tuple

MAX_SYMBOLS = 30
MAX_IMPORTS = 20

IMPORT_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"""(?:import|require)\s+(?:.*?\s+from\s+)?['"]([\w@/.:-]+)['"]"""),
    re.compile(r"""from\s+['"]([\w@/.:-]+)['"]"""),
)


def collect_matches(content: str, patterns: Iterable[Pattern[str]], limit: int) -> List[str]:
    """
    Run each pattern over the content and collect first-group captures.

    Patterns are applied one after another, so order is pattern-major and
    then position within the content. Duplicates are dropped and the result
    is truncated to ``limit``.
    """
    found: List[str] = []
    seen = set()
    for pattern in patterns:
        for match in pattern.finditer(content):
            name = match.group(1)
            if name and name not in seen:
                seen.add(name)
                found.append(name)
    return found[:limit]


class ParsingStrategy(ABC):
    """Extracts declared symbol names and import targets from file content."""

    @abstractmethod
    def get_language_names(self) -> List[str]:
        """Language tags this strategy handles."""

    @abstractmethod
    def extract_symbols(self, content: str) -> List[str]:
        """Declared symbol names, deduplicated and capped."""

    def extract_imports(self, content: str) -> List[str]:
        """Quoted import targets, deduplicated and capped."""
        return collect_matches(content, IMPORT_PATTERNS, MAX_IMPORTS)

    def extract(self, content: str) -> Tuple[List[str], List[str]]:
        return self.extract_symbols(content), self.extract_imports(content)
