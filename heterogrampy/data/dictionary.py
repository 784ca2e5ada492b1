"""Word sources and candidate filtering."""

from collections.abc import Iterable
from dataclasses import dataclass

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger
from wordfreq import top_n_list

from heterogrampy.utils import Constants, expand_file_path


@dataclass
class FilterStats:
    """Counts of tokens rejected while filtering candidates."""

    total: int = 0
    wrong_length: int = 0
    outside_alphabet: int = 0
    repeated_letters: int = 0
    duplicates: int = 0

    @property
    def accepted(self) -> int:
        return (
            self.total
            - self.wrong_length
            - self.outside_alphabet
            - self.repeated_letters
            - self.duplicates
        )


def load_word_file(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load whitespace-separated tokens from a UTF-8 text file."""
    if not filepath:
        return []

    filepath = expand_file_path(filepath) or filepath

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            tokens = f.read().split()
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if verbose:
        logger.info(f"  Read {len(tokens)} tokens from {filepath}")

    return tokens


def load_wordfreq_words(top_n: int | None, verbose: bool = False) -> list[str]:
    """Get the top N most frequent English words from wordfreq."""
    if not top_n:
        return []

    if verbose:
        logger.info(f"  Loading top {top_n} words from wordfreq...")

    try:
        return list(top_n_list(Constants.WORDFREQ_LANGUAGE, top_n))
    except Exception as e:
        logger.error(f"✗ Failed to load words from wordfreq: {e}")
        logger.error("  This may indicate a problem with the 'wordfreq' package")
        raise RuntimeError("Failed to load source words from wordfreq") from e


def load_english_words(verbose: bool = False) -> list[str]:
    """Load the english-words dictionary, sorted for a stable order."""
    if verbose:
        logger.info("  Loading English words dictionary...")

    try:
        # type: ignore[no-any-return]
        words: set[str] = get_english_words_set(list(Constants.ENGLISH_WORDS_SOURCES), lower=True)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load english-words dictionary") from e

    return sorted(words)


def filter_candidate_words(
    tokens: Iterable[str], word_length: int, alphabet: str
) -> tuple[list[str], FilterStats]:
    """Keep lowercase words of exactly ``word_length`` distinct alphabet letters.

    Duplicates are dropped, keeping the first occurrence.

    Args:
        tokens: Raw tokens from the word sources
        word_length: Required number of letters
        alphabet: Letters a word may use

    Returns:
        Tuple of (accepted words in input order, rejection statistics)
    """
    allowed = set(alphabet)
    stats = FilterStats()
    seen: set[str] = set()
    words = []

    for token in tokens:
        stats.total += 1
        word = token.lower()
        if len(word) != word_length:
            stats.wrong_length += 1
        elif not set(word) <= allowed:
            stats.outside_alphabet += 1
        elif len(set(word)) != word_length:
            stats.repeated_letters += 1
        elif word in seen:
            stats.duplicates += 1
        else:
            seen.add(word)
            words.append(word)

    return words, stats
