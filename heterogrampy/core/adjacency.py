"""Forward-only heterogrammic adjacency index.

Groups are only ever built by appending words in increasing id order, so each
word needs to know just the later words it could sit beside. A group that could
be extended by an earlier word is itself an extension of a group that starts
with that earlier word, and is found from there.
"""

from collections.abc import Iterable, Sequence

from heterogrampy.core.letters import is_disjoint
from heterogrampy.core.types import Word


def forward_neighbours(word: Word, words: Sequence[Word]) -> frozenset[int]:
    """Ids of words after ``word`` whose letters are disjoint from it.

    Args:
        word: Word to find neighbours for
        words: All registered words, indexed by id

    Returns:
        Frozen set of ids greater than ``word.id``
    """
    return frozenset(
        other.id for other in words[word.id + 1 :] if is_disjoint(word.letters, other.letters)
    )


class AdjacencyIndex:
    """Read-only map from word id to its forward heterogrammic neighbours."""

    def __init__(self, neighbours: Iterable[frozenset[int]]) -> None:
        self._neighbours = tuple(neighbours)

    @classmethod
    def build(cls, words: Sequence[Word]) -> "AdjacencyIndex":
        return cls(forward_neighbours(word, words) for word in words)

    def neighbours(self, word_id: int) -> frozenset[int]:
        return self._neighbours[word_id]

    def degree(self, word_id: int) -> int:
        return len(self._neighbours[word_id])

    def edge_count(self) -> int:
        """Total number of (word, later word) heterogrammic pairs."""
        return sum(len(neighbours) for neighbours in self._neighbours)

    def __getitem__(self, word_id: int) -> frozenset[int]:
        return self._neighbours[word_id]

    def __len__(self) -> int:
        return len(self._neighbours)


def build_adjacency_index(words: Sequence[Word]) -> AdjacencyIndex:
    return AdjacencyIndex.build(words)
