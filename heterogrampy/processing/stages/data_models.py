"""Data models for passing information between pipeline stages."""

from pydantic import BaseModel, Field

from heterogrampy.core import AdjacencyIndex, Group, WordRegistry
from heterogrampy.data import FilterStats


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class DictionaryData(StageResult):
    """Output from word loading stage."""

    words: list[str] = Field(default_factory=list)
    source_counts: dict[str, int] = Field(default_factory=dict)
    filter_stats: FilterStats = Field(default_factory=FilterStats)


class IndexData(StageResult):
    """Output from index building stage."""

    registry: WordRegistry
    adjacency: AdjacencyIndex

    model_config = {
        "arbitrary_types_allowed": True,  # For WordRegistry and AdjacencyIndex
    }


class GenerationSummary(BaseModel):
    """Progress record for one generation of the search."""

    index: int = Field(ge=1)
    count: int = Field(ge=0)
    elapsed_time: float = Field(0.0, ge=0)
    sample: list[str] = Field(default_factory=list)


class ExpansionResult(StageResult):
    """Output from group expansion stage."""

    group_size: int = Field(ge=1)
    groups: list[Group] = Field(default_factory=list)
    generations: list[GenerationSummary] = Field(default_factory=list)
    exhausted: bool = False

    model_config = {
        "arbitrary_types_allowed": True,  # For Group
    }

    @property
    def largest_group_size(self) -> int:
        """Length of the longest non-empty generation."""
        return max((g.index for g in self.generations if g.count), default=0)
