"""
Lexical extraction strategies for symbols and imports.
"""

from .base_strategy import MAX_IMPORTS, MAX_SYMBOLS, ParsingStrategy
from .fallback_strategy import FallbackParsingStrategy
from .python_strategy import PythonParsingStrategy
from .strategy_factory import StrategyFactory, extract_metadata
from .typescript_strategy import TypeScriptParsingStrategy

__all__ = [
    'MAX_IMPORTS',
    'MAX_SYMBOLS',
    'ParsingStrategy',
    'FallbackParsingStrategy',
    'PythonParsingStrategy',
    'TypeScriptParsingStrategy',
    'StrategyFactory',
    'extract_metadata',
]
