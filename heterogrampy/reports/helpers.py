"""Helper functions for output and report generation."""

from collections.abc import Sequence
from datetime import datetime
from itertools import islice, product
from math import prod
import random
from typing import TextIO

from loguru import logger

from heterogrampy.core import Group, WordRegistry


def write_report_header(f: TextIO, title: str) -> None:
    """Write a standard report header.

    Args:
        f: File object to write to
        title: Report title
    """
    f.write("=" * 80 + "\n")
    f.write(f"{title}\n")
    f.write("=" * 80 + "\n")
    f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
    f.write("\n")


def write_subsection_header(f: TextIO, title: str, width: int = 80) -> None:
    """Write a subsection header.

    Args:
        f: File object to write to
        title: Subsection title
        width: Width of separator line (default: 80)
    """
    f.write(f"{title}\n")
    f.write("-" * width + "\n")


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string.

    Args:
        seconds: Time in seconds

    Returns:
        Formatted time string
    """
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.2f}s"


def sample_groups(groups: Sequence[Group], sample_size: int, rng: random.Random) -> list[str]:
    """Render a few randomly chosen groups for progress display.

    Uses its own random source, so sampling never affects the search.
    """
    if not groups or sample_size <= 0:
        return []
    picks = rng.sample(range(len(groups)), min(sample_size, len(groups)))
    return [str(groups[i]) for i in picks]


def expand_anagram_lines(group: Group, registry: WordRegistry, limit: int) -> list[str]:
    """Render every anagram substitution of a group, one line each.

    Members are written newest first with a trailing space, like ``str(group)``.

    Args:
        group: Group of anagram-class representatives
        registry: Registry holding the anagram classes
        limit: Maximum number of lines to render

    Returns:
        Up to ``limit`` rendered groups; a warning is logged when more exist
    """
    choices = [registry.anagrams_of(word.id) for word in group.members()]
    total = prod(len(choice) for choice in choices)
    if total > limit:
        logger.warning(
            f"⚠️  Group '{str(group).strip()}' has {total:,} anagram substitutions; "
            f"writing the first {limit:,} and dropping {total - limit:,}"
        )
    return ["".join(f"{text} " for text in combo) for combo in islice(product(*choices), limit)]
