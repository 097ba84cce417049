"""
Fallback strategy for languages without symbol patterns.
"""

from typing import List

from .base_strategy import ParsingStrategy


class FallbackParsingStrategy(ParsingStrategy):
    """No symbols; imports still go through the shared patterns."""

    def get_language_names(self) -> List[str]:
        return []

    def extract_symbols(self, content: str) -> List[str]:
        return []
