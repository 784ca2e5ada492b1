"""Type definitions for HeterogramPy."""

from dataclasses import dataclass

from heterogrampy.core.letters import LetterMask


@dataclass(frozen=True, slots=True)
class Word:
    """A registered anagram-class representative.

    Attributes:
        id: Dense registration index; ids are totally ordered
        letters: Letter mask of the word
        text: Surface form of the representative
    """

    id: int
    letters: LetterMask
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class AnagramClass:
    """Surface words sharing one letter mask.

    The first word is the class representative.
    """

    letters: LetterMask
    words: tuple[str, ...]

    @property
    def representative(self) -> str:
        return self.words[0]
