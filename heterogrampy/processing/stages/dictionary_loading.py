"""Stage 1: Word loading and candidate filtering."""

import time

from loguru import logger

from heterogrampy.core import Config
from heterogrampy.data import (
    FilterStats,
    filter_candidate_words,
    load_english_words,
    load_word_file,
    load_wordfreq_words,
)
from heterogrampy.processing.stages.data_models import DictionaryData


def _log_filter_stats(stats: FilterStats, config: Config) -> None:
    logger.debug(f"  Tokens read:              {stats.total}")
    logger.debug(f"  Not {config.word_length} letters long:     {stats.wrong_length}")
    logger.debug(f"  Outside the alphabet:     {stats.outside_alphabet}")
    logger.debug(f"  Repeated letters:         {stats.repeated_letters}")
    logger.debug(f"  Duplicates:               {stats.duplicates}")


def load_dictionaries(config: Config, verbose: bool = False) -> DictionaryData:
    """Load tokens from every configured source and keep heterogrammic words.

    Sources are read in a fixed order (file, wordfreq, english-words), so the
    resulting word order, and with it every word id, is reproducible.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        DictionaryData with the candidate words
    """
    start_time = time.time()

    source_counts: dict[str, int] = {}
    tokens: list[str] = []

    if config.words:
        file_tokens = load_word_file(config.words, verbose)
        source_counts["file"] = len(file_tokens)
        tokens.extend(file_tokens)

    if config.top_n:
        freq_tokens = load_wordfreq_words(config.top_n, verbose)
        source_counts["wordfreq"] = len(freq_tokens)
        tokens.extend(freq_tokens)

    if config.english_words:
        english_tokens = load_english_words(verbose)
        source_counts["english-words"] = len(english_tokens)
        tokens.extend(english_tokens)

    words, stats = filter_candidate_words(tokens, config.word_length, config.alphabet)
    _log_filter_stats(stats, config)

    if verbose:
        logger.info(
            f"  Found {len(words)} {config.word_length}-letter heterogrammic words "
            f"out of {stats.total} tokens"
        )

    return DictionaryData(
        words=words,
        source_counts=source_counts,
        filter_stats=stats,
        elapsed_time=time.time() - start_time,
    )
