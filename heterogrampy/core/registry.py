"""Word registry: dense integer ids for anagram-class representatives."""

from collections.abc import Iterable, Iterator, Sequence

from heterogrampy.core.anagrams import group_anagrams
from heterogrampy.core.letters import DEFAULT_ALPHABET
from heterogrampy.core.types import AnagramClass, Word


class WordRegistry:
    """Ordered, immutable collection of registered words.

    Word ids are their positions in the registry, so ``registry[i].id == i``.
    """

    def __init__(self, classes: Sequence[AnagramClass], alphabet: str = DEFAULT_ALPHABET) -> None:
        self.alphabet = alphabet
        self._classes = tuple(classes)
        self._words = tuple(
            Word(id=i, letters=anagram_class.letters, text=anagram_class.representative)
            for i, anagram_class in enumerate(self._classes)
        )

    @classmethod
    def from_anagram_classes(
        cls, classes: Sequence[AnagramClass], alphabet: str = DEFAULT_ALPHABET
    ) -> "WordRegistry":
        return cls(classes, alphabet)

    @classmethod
    def from_words(cls, words: Iterable[str], alphabet: str = DEFAULT_ALPHABET) -> "WordRegistry":
        """Reduce words to anagram classes and register one word per class."""
        return cls(group_anagrams(words, alphabet), alphabet)

    @property
    def words(self) -> tuple[Word, ...]:
        return self._words

    @property
    def classes(self) -> tuple[AnagramClass, ...]:
        return self._classes

    def anagrams_of(self, word_id: int) -> tuple[str, ...]:
        """All surface words sharing the letters of the given word."""
        return self._classes[word_id].words

    def surface_word_count(self) -> int:
        return sum(len(anagram_class.words) for anagram_class in self._classes)

    def __getitem__(self, index):
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)
