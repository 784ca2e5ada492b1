"""Reduction of candidate words to one representative per anagram class.

Any heterogrammic group holds at most one word of each anagram class, and
swapping a member for one of its anagrams yields another valid group. Searching
over one representative per class is therefore complete up to anagram
substitution, which can be recovered afterwards from the classes.
"""

from collections.abc import Iterable

from heterogrampy.core.letters import DEFAULT_ALPHABET, LetterMask, letter_mask
from heterogrampy.core.types import AnagramClass


def group_anagrams(words: Iterable[str], alphabet: str = DEFAULT_ALPHABET) -> list[AnagramClass]:
    """Partition words into anagram classes by letter mask.

    Classes come out in the order their first word was seen, and each class
    lists its words in input order, so the representative is deterministic.

    Args:
        words: Validated candidate words
        alphabet: Alphabet used for the letter masks

    Returns:
        List of anagram classes, one per distinct letter mask
    """
    classes: dict[LetterMask, list[str]] = {}
    for word in words:
        members = classes.setdefault(letter_mask(word, alphabet), [])
        if word not in members:
            members.append(word)
    return [AnagramClass(letters=mask, words=tuple(members)) for mask, members in classes.items()]


def reduce_anagrams(words: Iterable[str], alphabet: str = DEFAULT_ALPHABET) -> list[str]:
    """Keep one representative word per anagram class."""
    return [anagram_class.representative for anagram_class in group_anagrams(words, alphabet)]
