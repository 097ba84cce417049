"""
Python extraction strategy.
"""

import re
from typing import List

from .base_strategy import MAX_SYMBOLS, ParsingStrategy, collect_matches

SYMBOL_PATTERNS = (re.compile(r"(?:def|class)\s+(\w+)"),)


class PythonParsingStrategy(ParsingStrategy):
    """Strategy for Python files: names following ``def`` or ``class``."""

    def get_language_names(self) -> List[str]:
        return ["python"]

    def extract_symbols(self, content: str) -> List[str]:
        return collect_matches(content, SYMBOL_PATTERNS, MAX_SYMBOLS)
