"""Letter masks: one bit per distinct alphabet letter in a word."""

import functools

from heterogrampy.utils.constants import Constants

# Bit set over the alphabet; bit i is set iff the word contains letter i
LetterMask = int

DEFAULT_ALPHABET = Constants.DEFAULT_ALPHABET


@functools.lru_cache(maxsize=None)
def build_letter_index(alphabet: str = DEFAULT_ALPHABET) -> dict[str, int]:
    """Map each letter of the alphabet to its bit position.

    Args:
        alphabet: Ordered letters; position in the string is the bit number

    Returns:
        Dictionary of letter -> bit position

    Raises:
        ValueError: If the alphabet is empty or repeats a letter
    """
    if not alphabet:
        raise ValueError("Alphabet must contain at least one letter")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f"Alphabet repeats letters: {alphabet!r}")
    return {letter: i for i, letter in enumerate(alphabet)}


def letter_mask(word: str, alphabet: str = DEFAULT_ALPHABET) -> LetterMask:
    """Encode the distinct letters of a word as a bit mask.

    e.g., with the default alphabet, 'cab' -> 0b111 and 'dad' -> 0b1001

    Raises:
        ValueError: If the word contains a character outside the alphabet
    """
    index = build_letter_index(alphabet)
    mask = 0
    for letter in word:
        try:
            mask |= 1 << index[letter]
        except KeyError as e:
            raise ValueError(f"Character {letter!r} in {word!r} is not in the alphabet") from e
    return mask


def mask_letters(mask: LetterMask, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Letters present in a mask, in alphabet order."""
    return "".join(letter for i, letter in enumerate(alphabet) if mask >> i & 1)


def popcount(mask: LetterMask) -> int:
    """Number of letters in a mask."""
    return bin(mask).count("1")


def is_disjoint(first: LetterMask, second: LetterMask) -> bool:
    """True if the two masks share no letter."""
    return not first & second
