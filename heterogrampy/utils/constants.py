"""Shared constants for HeterogramPy."""


class Constants:
    """Project-wide defaults and limits."""

    DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
    DEFAULT_WORD_LENGTH = 5
    DEFAULT_GROUP_SIZE = 5

    # Groups shown per generation in progress output
    DEFAULT_SAMPLE_SIZE = 5

    # Groups handed to a worker per task
    DEFAULT_CHUNK_SIZE = 512

    # english-words lists used when --english-words is given
    ENGLISH_WORDS_SOURCES = ("web2",)

    WORDFREQ_LANGUAGE = "en"

    # Anagram expansion stops rendering a group past this many combinations
    MAX_ANAGRAM_EXPANSIONS = 10_000
