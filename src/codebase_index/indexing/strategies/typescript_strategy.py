"""
TypeScript/JavaScript extraction strategy.
"""

import re
from typing import List

from .base_strategy import MAX_SYMBOLS, ParsingStrategy, collect_matches

SYMBOL_PATTERNS = (
    # Exported declarations first, so public API names lead the list
    re.compile(
        r"export\s+(?:default\s+)?(?:function|class|const|let|var|type|interface|enum)\s+(\w+)"
    ),
    re.compile(r"(?:function|class)\s+(\w+)"),
)


class TypeScriptParsingStrategy(ParsingStrategy):
    """Strategy for TypeScript and JavaScript sources."""

    def get_language_names(self) -> List[str]:
        return ["typescript", "javascript"]

    def extract_symbols(self, content: str) -> List[str]:
        return collect_matches(content, SYMBOL_PATTERNS, MAX_SYMBOLS)
