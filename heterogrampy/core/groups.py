"""Persistent word groups with structurally shared history.

A group is a header (length and union of letter masks) over a chain of nodes,
newest word first. Extending a group allocates one node pointing at the
existing chain, so sibling groups share their common prefix. Nodes are never
mutated; a node is freed once no group or child node refers to it.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from heterogrampy.core.letters import LetterMask
from heterogrampy.core.types import Word


@dataclass(frozen=True, slots=True)
class GroupNode:
    """One word in a group chain plus the chain it was appended to."""

    word: Word
    parent: "GroupNode | None" = None

    def words(self) -> Iterator[Word]:
        """Walk the chain from this node back to the root."""
        node: GroupNode | None = self
        while node is not None:
            yield node.word
            node = node.parent


class Group:
    """An ordered set of words with pairwise disjoint letters.

    Attributes:
        length: Number of words in the chain
        letters: Union of the letter masks of all members
        node: Newest node of the chain
    """

    __slots__ = ("length", "letters", "node")

    def __init__(self, length: int, letters: LetterMask, node: GroupNode) -> None:
        self.length = length
        self.letters = letters
        self.node = node

    @classmethod
    def singleton(cls, word: Word) -> "Group":
        return cls(length=1, letters=word.letters, node=GroupNode(word))

    def extend(self, word: Word) -> "Group | None":
        """Append a word, sharing this group's chain.

        Returns:
            The extended group, or None if the word shares a letter with the group
        """
        if word.letters & self.letters:
            return None
        return Group(
            length=self.length + 1,
            letters=self.letters | word.letters,
            node=GroupNode(word, self.node),
        )

    def members(self) -> Iterator[Word]:
        """Members from most recently added to first; each call starts afresh."""
        return self.node.words()

    @property
    def word(self) -> Word:
        """Most recently added word."""
        return self.node.word

    @property
    def root(self) -> Word:
        """First word of the group (the smallest id)."""
        node = self.node
        while node.parent is not None:
            node = node.parent
        return node.word

    def member_ids(self) -> frozenset[int]:
        return frozenset(word.id for word in self.members())

    def texts(self) -> list[str]:
        return [word.text for word in self.members()]

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return "".join(f"{text} " for text in self.texts())

    def __repr__(self) -> str:
        return f"Group(length={self.length}, words={self.texts()!r})"
