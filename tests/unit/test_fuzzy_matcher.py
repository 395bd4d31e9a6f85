"""Unit tests for the fuzzy matcher functionality."""

import pytest
from enski.core.fuzzy_matcher import FuzzyMatch, FuzzyMatcher
from enski.models.entry import Entry


def make_entries(*words):
    return [Entry(id=i, word=word) for i, word in enumerate(words, start=1)]


class TestFuzzyMatcherScore:
    """Test cases for headword scoring."""

    @pytest.fixture
    def matcher(self):
        """Create a fuzzy matcher instance for testing."""
        return FuzzyMatcher(threshold=0.4)

    def test_matcher_initialization(self, matcher):
        assert matcher.threshold == 0.4
        assert matcher.normalizer is not None

    def test_exact_match(self, matcher):
        assert matcher.score("able", "able") == 1.0

    def test_case_insensitive(self, matcher):
        assert matcher.score("APPLE", "apple") == 1.0

    def test_diacritic_insensitive(self, matcher):
        assert matcher.score("cafe", "café") == 1.0

    def test_whole_word_beats_longer_word(self, matcher):
        """A closer whole-word match scores higher than a long containing word."""
        assert matcher.score("app", "apple") > matcher.score("app", "application")

    def test_transposition(self, matcher):
        score = matcher.score("aplpe", "apple")
        assert score >= matcher.threshold
        assert score > matcher.score("aplpe", "orchard")

    def test_typo(self, matcher):
        assert matcher.score("aple", "apple") >= matcher.threshold

    def test_unrelated_word_below_threshold(self, matcher):
        assert matcher.score("apple", "orchard") < matcher.threshold
        assert matcher.score("app", "xyz") == 0.0

    def test_empty_strings(self, matcher):
        assert matcher.score("", "apple") == 0.0
        assert matcher.score("apple", "") == 0.0

    def test_score_range(self, matcher):
        for word in ["apple", "apply", "application", "orchard", "able"]:
            assert 0.0 <= matcher.score("app", word) <= 1.0


class TestFindAllMatches:
    """Test cases for the find-all-matches pass."""

    @pytest.fixture
    def matcher(self):
        return FuzzyMatcher(threshold=0.4)

    def test_considers_all_candidates(self, matcher):
        candidates = make_entries("application", "apply", "apple")
        matches = matcher.find_all_matches("app", candidates)

        assert {match.entry.word for match in matches} == {"application", "apply", "apple"}
        assert all(isinstance(match, FuzzyMatch) for match in matches)

    def test_sorted_best_first(self, matcher):
        candidates = make_entries("application", "ableism", "able")
        matches = matcher.find_all_matches("able", candidates)

        assert matches[0].entry.word == "able"
        for i in range(len(matches) - 1):
            assert matches[i].score >= matches[i + 1].score

    def test_ties_keep_candidate_order(self, matcher):
        candidates = make_entries("apply", "apple")
        matches = matcher.find_all_matches("app", candidates)

        assert matches[0].score == matches[1].score
        assert [match.entry.word for match in matches] == ["apply", "apple"]

        reversed_matches = matcher.find_all_matches("app", list(reversed(candidates)))
        assert [match.entry.word for match in reversed_matches] == ["apple", "apply"]

    def test_rejects_below_threshold(self, matcher):
        candidates = make_entries("orchard", "apple")
        matches = matcher.find_all_matches("apple", candidates)

        assert [match.entry.word for match in matches] == ["apple"]

    def test_custom_threshold(self, matcher):
        candidates = make_entries("apply", "apple", "application")

        strict = matcher.find_all_matches("apple", candidates, threshold=1.0)
        permissive = matcher.find_all_matches("apple", candidates, threshold=0.0)

        assert [match.entry.word for match in strict] == ["apple"]
        assert len(permissive) == 3

    def test_empty_query(self, matcher):
        assert matcher.find_all_matches("", make_entries("apple")) == []

    def test_empty_candidates(self, matcher):
        assert matcher.find_all_matches("apple", []) == []


class TestRerank:
    """Test cases for merging fuzzy matches with the remaining candidates."""

    @pytest.fixture
    def matcher(self):
        return FuzzyMatcher(threshold=0.4)

    def test_fuzzy_matches_first_then_index_order(self, matcher):
        orchard = Entry(id=5, word="orchard", definition="land planted with apple trees")
        pomology = Entry(id=9, word="pomology", definition="the study of apple growing")
        apple = Entry(id=1, word="apple")
        candidates = [orchard, pomology, apple]

        ranked = matcher.rerank("apple", candidates)

        assert ranked == [apple, orchard, pomology]

    def test_exact_headword_first(self, matcher):
        """An exact headword outranks its index position."""
        candidates = [
            Entry(id=6, word="ableism"),
            Entry(id=7, word="ably"),
            Entry(id=3, word="able"),
        ]

        ranked = matcher.rerank("able", candidates)

        assert ranked[0].word == "able"

    def test_prefix_scenario(self, matcher):
        candidates = [Entry(id=2, word="apply"), Entry(id=1, word="apple")]

        ranked = matcher.rerank("app", candidates)

        assert matcher.score("app", "apply") == matcher.score("app", "apple")
        assert [entry.id for entry in ranked] == [2, 1]
        assert all(entry.word != "able" for entry in ranked)

    def test_never_invents_entries(self, matcher):
        candidates = make_entries("apple", "apply", "orchard", "application")
        ranked = matcher.rerank("aple", candidates)

        assert all(entry in candidates for entry in ranked)

    def test_recall(self, matcher):
        candidates = make_entries("orchard", "zebra", "apple", "xylophone", "apply")
        ranked = matcher.rerank("apple", candidates)

        assert sorted(entry.id for entry in ranked) == sorted(entry.id for entry in candidates)

    def test_no_duplicates(self, matcher):
        candidates = make_entries("apple", "apply", "orchard")
        candidates.append(candidates[0])

        ranked = matcher.rerank("apple", candidates)
        ids = [entry.id for entry in ranked]

        assert len(ids) == len(set(ids)) == 3

    def test_ordering_law(self, matcher):
        candidates = make_entries("application", "apple", "apply", "applesauce", "appeal")
        ranked = matcher.rerank("apple", candidates)
        scores = [matcher.score("apple", entry.word) for entry in ranked]

        accepted = [score for score in scores if score >= matcher.threshold]
        assert accepted == sorted(accepted, reverse=True)

    def test_deterministic(self, matcher):
        candidates = make_entries("application", "apple", "apply", "able", "orchard")

        first = matcher.rerank("appl", candidates)
        second = matcher.rerank("appl", candidates)

        assert first == second

    def test_empty_candidates(self, matcher):
        assert matcher.rerank("apple", []) == []

    def test_compares_identity_by_id(self, matcher):
        """Entries are merged by id, not by equal content."""
        first = Entry(id=1, word="apple")
        twin = Entry(id=2, word="apple")

        ranked = matcher.rerank("apple", [first, twin])

        assert [entry.id for entry in ranked] == [1, 2]
