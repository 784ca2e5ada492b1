"""Integration tests for the complete group search pipeline."""

import contextlib
from itertools import combinations

import pytest

from heterogrampy.core import AdjacencyIndex, Config, WordRegistry
from heterogrampy.processing import run_pipeline
from heterogrampy.processing.stages import GroupExpander

# 25 letters: a-y
ALPHABET_25 = "abcdefghijklmnopqrstuvwxy"
FIVE_DISJOINT = ["abcde", "fghij", "klmno", "pqrst", "uvwxy", "edcba"]

SMALL_ALPHABET = "abcdefgh"
SMALL_WORDS = [
    "abc", "def", "gha", "bdf", "ceg", "adh", "beh", "cfh",
    "aeg", "bcd", "efg", "ach", "bgh", "dfh",
]  # fmt: skip


def _write_words(tmp_path, words: list[str]) -> str:
    word_file = tmp_path / "words.txt"
    word_file.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(word_file)


def _brute_force(registry: WordRegistry, k: int) -> set[frozenset[int]]:
    return {
        frozenset(word.id for word in combo)
        for combo in combinations(registry.words, k)
        if all(not a.letters & b.letters for a, b in combinations(combo, 2))
    }


def _search(registry: WordRegistry, jobs: int) -> dict[int, set[frozenset[int]]]:
    adjacency = AdjacencyIndex.build(registry.words)
    with GroupExpander(registry, adjacency, jobs=jobs, chunk_size=2) as expander:
        return {
            g.index: {group.member_ids() for group in g.groups}
            for g in expander.iter_generations()
        }


class TestFiveDisjointWords:
    """Five disjoint words plus an anagram over a 25-letter alphabet."""

    def test_finds_exactly_one_group_of_five(self, tmp_path):
        """The anagram is merged, leaving a single five-word group."""
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(tmp_path / "groups.txt"),
            jobs=1,
        )
        result = run_pipeline(config)
        assert len(result.groups) == 1

    def test_group_holds_one_word_of_each_class(self, tmp_path):
        """The group covers all five letter sets."""
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(tmp_path / "groups.txt"),
            jobs=1,
        )
        result = run_pipeline(config)
        assert set(result.groups[0].texts()) == {"abcde", "fghij", "klmno", "pqrst", "uvwxy"}

    def test_no_group_of_six(self, tmp_path):
        """Generation six is the empty fixpoint."""
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(tmp_path / "groups.txt"),
            jobs=1,
        )
        result = run_pipeline(config)
        assert [(g.index, g.count) for g in result.generations][-1] == (6, 0)

    def test_output_line_lists_newest_first(self, tmp_path):
        """The output file holds the group newest word first, with a trailing space."""
        output = tmp_path / "groups.txt"
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(output),
            jobs=1,
        )
        run_pipeline(config)
        assert output.read_text(encoding="utf-8") == "uvwxy pqrst klmno fghij abcde \n"

    def test_anagram_expansion_recovers_both_forms(self, tmp_path):
        """Expanding anagrams writes the group once per surface form."""
        output = tmp_path / "groups.txt"
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(output),
            expand_anagrams=True,
            jobs=1,
        )
        run_pipeline(config)
        assert output.read_text(encoding="utf-8").splitlines() == [
            "uvwxy pqrst klmno fghij abcde ",
            "uvwxy pqrst klmno fghij edcba ",
        ]

    def test_stop_at_target_skips_larger_generations(self, tmp_path):
        """Stopping at the target does not run to the empty generation."""
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(tmp_path / "groups.txt"),
            stop_at_target=True,
            group_size=3,
            jobs=1,
        )
        result = run_pipeline(config)
        assert [g.index for g in result.generations] == [1, 2, 3]

    def test_unreachable_group_size_finds_nothing(self, tmp_path):
        """Asking for more words than can fit yields no groups."""
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(tmp_path / "groups.txt"),
            group_size=7,
            jobs=1,
        )
        result = run_pipeline(config)
        assert result.groups == []


class TestCompleteness:
    """The search matches brute-force enumeration."""

    def test_every_generation_matches_brute_force(self):
        """Each generation holds exactly the pairwise-disjoint subsets of its size."""
        registry = WordRegistry.from_words(SMALL_WORDS, alphabet=SMALL_ALPHABET)
        generations = _search(registry, jobs=1)
        assert all(
            generations[k] == _brute_force(registry, k) for k in generations if k <= len(registry)
        )

    def test_terminates_within_alphabet_bound(self):
        """Three-letter words over eight letters cannot form groups of three."""
        registry = WordRegistry.from_words(SMALL_WORDS, alphabet=SMALL_ALPHABET)
        assert max(_search(registry, jobs=1)) <= len(SMALL_ALPHABET) // 3 + 1

    @pytest.mark.slow
    def test_parallel_search_matches_single_process(self):
        """Worker count does not change the result."""
        registry = WordRegistry.from_words(SMALL_WORDS, alphabet=SMALL_ALPHABET)
        assert _search(registry, jobs=2) == _search(registry, jobs=1)

    @pytest.mark.slow
    def test_parallel_pipeline_finds_the_group(self, tmp_path):
        """The pipeline gives the same answer with a worker pool."""
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(tmp_path / "groups.txt"),
            jobs=2,
            chunk_size=1,
        )
        result = run_pipeline(config)
        assert len(result.groups) == 1


class TestPipelineReports:
    """Pipeline report generation."""

    def test_pipeline_with_reports(self, tmp_path):
        """Pipeline generates a summary when reports are enabled."""
        reports_dir = tmp_path / "reports"
        config = Config(
            words=_write_words(tmp_path, FIVE_DISJOINT),
            alphabet=ALPHABET_25,
            output=str(tmp_path / "groups.txt"),
            reports=str(reports_dir),
            jobs=1,
        )
        run_pipeline(config)
        assert len(list(reports_dir.glob("*/summary.txt"))) == 1

    def test_missing_words_file_raises(self, tmp_path):
        """A failing source propagates its error."""
        config = Config(words=str(tmp_path / "missing.txt"), jobs=1)
        with pytest.raises(FileNotFoundError):
            run_pipeline(config)

    def test_missing_words_file_writes_no_output(self, tmp_path):
        """A failing source stops the pipeline before any output."""
        output = tmp_path / "groups.txt"
        config = Config(words=str(tmp_path / "missing.txt"), output=str(output), jobs=1)
        with contextlib.suppress(FileNotFoundError):
            run_pipeline(config)
        assert not output.exists()
