"""Rendering and writing of the final groups."""

import sys

from loguru import logger

from heterogrampy.core import Group, WordRegistry
from heterogrampy.reports.helpers import expand_anagram_lines
from heterogrampy.utils import Constants, expand_file_path, write_file_safely


def format_groups(
    groups: list[Group],
    registry: WordRegistry | None = None,
    expand_anagrams: bool = False,
) -> list[str]:
    """Render groups one per line.

    With ``expand_anagrams``, each group is replaced by every combination of
    the surface words in its members' anagram classes.
    """
    if not expand_anagrams or registry is None:
        return [str(group) for group in groups]

    lines = []
    for group in groups:
        lines.extend(expand_anagram_lines(group, registry, Constants.MAX_ANAGRAM_EXPANSIONS))
    return lines


def write_groups(lines: list[str], output: str | None) -> None:
    """Write rendered groups to a file, or to stdout when no path is given."""
    if not output:
        try:
            for line in lines:
                sys.stdout.write(f"{line}\n")
            sys.stdout.flush()
        except OSError as e:
            logger.error(f"✗ Error writing to stdout: {e}")
            raise
        return

    path = expand_file_path(output) or output

    def write_lines(f):
        for line in lines:
            f.write(f"{line}\n")

    write_file_safely(path, write_lines, "writing groups")
