"""Single-group expansion step of the fixpoint search."""

from collections.abc import Sequence

from heterogrampy.core.adjacency import AdjacencyIndex
from heterogrampy.core.groups import Group
from heterogrampy.core.types import Word


def singletons(words: Sequence[Word]) -> list[Group]:
    """Generation one: a group for every registered word."""
    return [Group.singleton(word) for word in words]


def candidate_ids(group: Group, adjacency: AdjacencyIndex) -> list[int]:
    """Ids that may extend a group, in ascending order.

    Seeds from the forward neighbours of the group's first word, then keeps
    only ids that are also forward neighbours of every other member. Forward
    neighbours are always later than their word, so survivors are later than
    every member.
    """
    root = group.root
    others = [word for word in group.members() if word.id != root.id]
    return sorted(
        j
        for j in adjacency.neighbours(root.id)
        if all(j > word.id and j in adjacency.neighbours(word.id) for word in others)
    )


def expand_group(group: Group, words: Sequence[Word], adjacency: AdjacencyIndex) -> list[Group]:
    """All one-word extensions of a group.

    The adjacency filter narrows the candidates; the letter check inside
    ``Group.extend`` decides.
    """
    extended = []
    for j in candidate_ids(group, adjacency):
        child = group.extend(words[j])
        if child is not None:
            extended.append(child)
    return extended
