"""
Keyword relevance ranking over a project index.

Each file earns points per query token from four signals, strongest first:
a path match, a symbol match, an import match, and occurrences in the
head of the content (capped). Files whose path suggests shared
definitions (config, schema, types, index) get a flat one-point boost.
"""

import logging
import re
from typing import Iterable, List, Optional

from ..errors import InvalidInputError, NotIndexedError
from ..indexing.index_store import IndexStore
from ..indexing.models import IndexEntry, QueryResult

logger = logging.getLogger(__name__)

PATH_WEIGHT = 5
SYMBOL_WEIGHT = 4
IMPORT_WEIGHT = 2
CONTENT_MATCH_CAP = 5
CONTENT_WINDOW = 2000
MIN_TOKEN_LENGTH = 3
BOOST_KEYWORDS = ("config", "schema", "types", "index")
BOOST_WEIGHT = 1
DEFAULT_MAX_FILES = 12

STOP_WORDS = frozenset({
    "the", "and", "for", "with", "that", "this", "from", "you", "are",
    "was", "but", "not", "all", "can", "her", "his", "they", "new", "one",
    "our", "add", "get", "set", "use", "has", "have",
})

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def tokenize_query(query: str) -> List[str]:
    """Lowercased keywords of a query, minus short tokens and stop words."""
    words = _NON_WORD.sub(" ", query.lower()).split()
    return [w for w in words if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS]


def score_entry(entry: IndexEntry, tokens: Iterable[str]) -> int:
    path_lower = entry.file_path.lower()
    symbols_str = " ".join(entry.symbols).lower()
    imports_str = " ".join(entry.imports).lower()
    content_preview = entry.content[:CONTENT_WINDOW].lower()

    score = 0
    for token in tokens:
        if token in path_lower:
            score += PATH_WEIGHT
        if token in symbols_str:
            score += SYMBOL_WEIGHT
        if token in imports_str:
            score += IMPORT_WEIGHT
        # Tokens are plain [a-z0-9]+, so count() matches a literal regex search
        score += min(content_preview.count(token), CONTENT_MATCH_CAP)

    if any(keyword in path_lower for keyword in BOOST_KEYWORDS):
        score += BOOST_WEIGHT
    return score


def rank_entries(entries: Iterable[IndexEntry], tokens: List[str], max_files: int) -> List[QueryResult]:
    """
    Score, filter and order entries.

    sorted() is stable, so equal scores keep the index's scan order.
    """
    scored = [QueryResult(entry=entry, relevance_score=score_entry(entry, tokens)) for entry in entries]
    matched = [result for result in scored if result.relevance_score > 0]
    matched.sort(key=lambda result: result.relevance_score, reverse=True)
    return matched[:max_files]


class RelevanceRanker:
    """Answers free-text queries against indexes held in an IndexStore."""

    def __init__(self, store: IndexStore):
        self.store = store

    def query(self, query: str, project_path: str, max_files: Optional[int] = None) -> List[QueryResult]:
        """
        Rank the files of ``project_path`` for ``query``.

        Raises:
            NotIndexedError: the path has no stored index
            InvalidInputError: ``max_files`` is below 1
        """
        if max_files is None:
            max_files = DEFAULT_MAX_FILES
        if max_files < 1:
            raise InvalidInputError("maxFiles must be at least 1")

        index = self.store.get(project_path)
        if index is None:
            raise NotIndexedError(project_path)

        tokens = tokenize_query(query)
        if not tokens:
            logger.debug(f"Query {query!r} has no usable keywords")
            return []

        results = rank_entries(index.files, tokens, max_files)
        logger.debug(f"Query {query!r} over {len(index.files)} files matched {len(results)}")
        return results
