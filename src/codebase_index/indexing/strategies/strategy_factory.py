"""
Strategy factory for lexical extraction.
"""

from typing import Dict, List, Tuple

from .base_strategy import ParsingStrategy
from .fallback_strategy import FallbackParsingStrategy
from .python_strategy import PythonParsingStrategy
from .typescript_strategy import TypeScriptParsingStrategy


class StrategyFactory:
    """Maps language tags to extraction strategies."""

    def __init__(self):
        self._strategies: Dict[str, ParsingStrategy] = {}
        self._fallback = FallbackParsingStrategy()
        for strategy in (TypeScriptParsingStrategy(), PythonParsingStrategy()):
            self.register(strategy)

    def register(self, strategy: ParsingStrategy) -> None:
        for language in strategy.get_language_names():
            self._strategies[language] = strategy

    def get_strategy(self, language: str) -> ParsingStrategy:
        return self._strategies.get(language, self._fallback)

    def get_specialized_languages(self) -> List[str]:
        return sorted(self._strategies)


_factory = StrategyFactory()


def extract_metadata(content: str, language: str) -> Tuple[List[str], List[str]]:
    """Extract ``(symbols, imports)`` for content of the given language."""
    return _factory.get_strategy(language).extract(content)
