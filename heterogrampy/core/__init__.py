"""Core domain logic for HeterogramPy."""

from .adjacency import AdjacencyIndex, build_adjacency_index, forward_neighbours
from .anagrams import group_anagrams, reduce_anagrams
from .config import Config, load_config
from .expansion import candidate_ids, expand_group, singletons
from .groups import Group, GroupNode
from .letters import (
    DEFAULT_ALPHABET,
    LetterMask,
    build_letter_index,
    is_disjoint,
    letter_mask,
    mask_letters,
    popcount,
)
from .registry import WordRegistry
from .types import AnagramClass, Word

__all__ = [
    "AdjacencyIndex",
    "AnagramClass",
    "Config",
    "DEFAULT_ALPHABET",
    "Group",
    "GroupNode",
    "LetterMask",
    "Word",
    "WordRegistry",
    "build_adjacency_index",
    "build_letter_index",
    "candidate_ids",
    "expand_group",
    "forward_neighbours",
    "group_anagrams",
    "is_disjoint",
    "letter_mask",
    "load_config",
    "mask_letters",
    "popcount",
    "reduce_anagrams",
    "singletons",
]
