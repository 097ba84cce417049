"""Query tokenization and relevance ranking."""

from .relevance import STOP_WORDS, RelevanceRanker, rank_entries, score_entry, tokenize_query

__all__ = ['STOP_WORDS', 'RelevanceRanker', 'rank_entries', 'score_entry', 'tokenize_query']
