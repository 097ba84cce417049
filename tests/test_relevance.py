"""Query tokenization and ranking tests."""

import pytest

from codebase_index.errors import InvalidInputError, NotIndexedError
from codebase_index.indexing import ProjectIndex
from codebase_index.indexing.models import IndexEntry
from codebase_index.search import RelevanceRanker, rank_entries, score_entry, tokenize_query


def entry(path, content="", symbols=(), imports=()):
    return IndexEntry(
        file_path=path,
        language="typescript",
        content=content,
        symbols=tuple(symbols),
        imports=tuple(imports),
        line_count=len(content.split("\n")),
    )


@pytest.mark.unit
class TestTokenizeQuery:

    def test_lowercases_and_splits_on_punctuation(self):
        assert tokenize_query("Fix the Login-Button, in AuthConfig!") == ["fix", "login", "button", "authconfig"]

    def test_drops_short_tokens_and_stop_words(self):
        assert tokenize_query("a to is api get the user") == ["api", "user"]

    def test_only_stop_words(self):
        assert tokenize_query("the and for") == []
        assert tokenize_query("") == []

    def test_non_ascii_letters_become_separators(self):
        assert tokenize_query("café_menü") == ["caf", "men"]

    def test_duplicates_are_kept(self):
        assert tokenize_query("route route") == ["route", "route"]


@pytest.mark.unit
class TestScoreEntry:

    def test_login_config_example(self):
        config = entry("auth/config.ts", symbols=["login"])
        # path "config" +5, symbol "login" +4, config boost +1
        assert score_entry(config, ["login", "config"]) == 10

    def test_each_signal(self):
        assert score_entry(entry("src/router.ts"), ["router"]) == 5
        assert score_entry(entry("a.ts", symbols=["createRouter"]), ["router"]) == 4
        assert score_entry(entry("a.ts", imports=["react-router"]), ["router"]) == 2
        assert score_entry(entry("a.ts", content="router here"), ["router"]) == 1

    def test_content_matches_are_capped(self):
        busy = entry("a.ts", content="token " * 40)
        assert score_entry(busy, ["token"]) == 5

    def test_only_content_head_is_searched(self):
        late = entry("a.ts", content="x" * 2000 + "needle")
        assert score_entry(late, ["needle"]) == 0
        early = entry("a.ts", content="x" * 1994 + "needle")
        assert score_entry(early, ["needle"]) == 1

    def test_boost_applies_once_without_token_match(self):
        assert score_entry(entry("src/types.ts"), ["unrelated"]) == 1
        assert score_entry(entry("src/index/types/config.ts"), ["zzz", "yyy"]) == 1

    def test_matching_is_case_insensitive(self):
        assert score_entry(entry("SRC/Router.TS", content="ROUTER"), ["router"]) == 6


@pytest.mark.unit
class TestRankEntries:

    def test_sorted_descending_and_filtered(self):
        entries = [
            entry("docs/notes.md"),
            entry("lib/payment.ts", content="payment payment"),
            entry("payment/service.ts", symbols=["PaymentService"]),
        ]
        results = rank_entries(entries, ["payment"], 12)
        assert [r.file_path for r in results] == ["payment/service.ts", "lib/payment.ts"]
        assert [r.relevance_score for r in results] == [9, 7]
        assert all(r.relevance_score > 0 for r in results)

    def test_ties_keep_scan_order(self):
        entries = [entry(f"m{i}.ts", content="widget") for i in range(5)]
        results = rank_entries(entries, ["widget"], 12)
        assert [r.file_path for r in results] == ["m0.ts", "m1.ts", "m2.ts", "m3.ts", "m4.ts"]

    def test_max_files_bounds_results(self):
        entries = [entry(f"widget{i}.ts") for i in range(20)]
        assert len(rank_entries(entries, ["widget"], 3)) == 3


@pytest.mark.unit
class TestRelevanceRanker:

    @pytest.fixture
    def ranker(self, store):
        files = [
            entry("auth/config.ts", content="export function login() {}", symbols=["login"]),
            entry("README.md", content="login and config docs"),
            entry("src/main.py"),
        ]
        store.put("/proj", ProjectIndex.build("/proj", "t", files))
        return RelevanceRanker(store)

    def test_query(self, ranker):
        results = ranker.query("login config", "/proj")
        assert [r.file_path for r in results] == ["auth/config.ts", "README.md"]
        assert results[0].relevance_score == 11
        assert results[0].relevance_score >= 10

    def test_no_tokens_returns_empty(self, ranker):
        assert ranker.query("the and for", "/proj") == []

    def test_unindexed_path(self, ranker):
        with pytest.raises(NotIndexedError, match="No index found for /other"):
            ranker.query("login", "/other")

    def test_invalid_max_files(self, ranker):
        with pytest.raises(InvalidInputError):
            ranker.query("login", "/proj", max_files=0)

    def test_result_dict_shape(self, ranker):
        data = ranker.query("login", "/proj", max_files=1)[0].to_dict()
        assert data["filePath"] == "auth/config.ts"
        assert data["relevanceScore"] == 6
        assert set(data) == {
            "filePath", "language", "content", "symbols", "imports",
            "size", "lastModified", "relevanceScore",
        }
