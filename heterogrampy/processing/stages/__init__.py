"""Pipeline stages for the heterogrammic group search."""

from .data_models import (
    DictionaryData,
    ExpansionResult,
    GenerationSummary,
    IndexData,
    StageResult,
)
from .dictionary_loading import load_dictionaries
from .group_expansion import Generation, GroupExpander, expand_groups
from .index_building import build_index

__all__ = [
    # Data models
    "DictionaryData",
    "ExpansionResult",
    "GenerationSummary",
    "IndexData",
    "StageResult",
    # Stage functions
    "load_dictionaries",
    "build_index",
    "expand_groups",
    # Search engine
    "Generation",
    "GroupExpander",
]
