"""Word sources for HeterogramPy."""

from heterogrampy.data.dictionary import (
    FilterStats,
    filter_candidate_words,
    load_english_words,
    load_word_file,
    load_wordfreq_words,
)

__all__ = [
    "FilterStats",
    "filter_candidate_words",
    "load_english_words",
    "load_word_file",
    "load_wordfreq_words",
]
