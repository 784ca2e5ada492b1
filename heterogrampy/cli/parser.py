"""Command-line interface for the HeterogramPy project."""

import argparse
from multiprocessing import cpu_count

from heterogrampy.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Find groups of words that share no letters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Five 5-letter words using 25 distinct letters, from a word list file
  %(prog)s words.txt -v

  # Groups of four 4-letter words from the 20000 most common English words
  %(prog)s --top-n 20000 --word-length 4 --group-size 4 -o groups.txt

  # Every anagram substitution of each group, with reports
  %(prog)s words.txt --expand-anagrams --reports ./reports -v

  # Using JSON config
  %(prog)s --config config.json

Each output line is one group, members written newest first, each
followed by a space.

Example config.json:
{
  "words": "words_alpha.txt",
  "word_length": 5,
  "group_size": 5,
  "output": "groups.txt",
  "reports": "./reports",
  "verbose": true,
  "jobs": 8
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Word sources
    parser.add_argument("words", nargs="?", help="File of whitespace-separated words")
    parser.add_argument("--top-n", type=int, help="Pull top N most common English words")
    parser.add_argument(
        "--english-words",
        action="store_true",
        help="Use the english-words dictionary as a word source",
    )

    # Search shape
    parser.add_argument(
        "-l",
        "--word-length",
        type=int,
        help="Letters per word",
        default=Constants.DEFAULT_WORD_LENGTH,
    )
    parser.add_argument(
        "-k",
        "--group-size",
        type=int,
        help="Words per group",
        default=Constants.DEFAULT_GROUP_SIZE,
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        help="Letters words may use (default: a-z)",
        default=Constants.DEFAULT_ALPHABET,
    )
    parser.add_argument(
        "--stop-at-target",
        action="store_true",
        help="Stop once groups of --group-size words are found instead of running to fixpoint",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to generate detailed reports (creates timestamped subdirectories)",
    )
    parser.add_argument(
        "--expand-anagrams",
        action="store_true",
        help="Write every anagram substitution of each group",
    )
    parser.add_argument(
        "--sample-size",
        type=int,
        help="Groups shown per generation in verbose output",
        default=Constants.DEFAULT_SAMPLE_SIZE,
    )
    parser.add_argument("--seed", type=int, help="Random seed for the progress samples")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers (default: {cpu_count()})",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        help="Groups sent to a worker at a time",
        default=Constants.DEFAULT_CHUNK_SIZE,
    )

    return parser
