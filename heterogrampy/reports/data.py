"""Report data models."""

from dataclasses import dataclass, field

from heterogrampy.data import FilterStats


@dataclass
class GenerationRecord:
    """Count and timing of one generation."""

    index: int
    count: int
    elapsed_time: float


@dataclass
class ReportData:
    """Collects data throughout the pipeline for reporting."""

    # Timing
    stage_times: dict[str, float] = field(default_factory=dict)
    start_time: float = 0.0

    # Word loading
    source_counts: dict[str, int] = field(default_factory=dict)
    filter_stats: FilterStats = field(default_factory=FilterStats)

    # Index
    candidate_words: int = 0
    anagram_classes: int = 0
    adjacency_edges: int = 0

    # Search
    group_size: int = 0
    generations: list[GenerationRecord] = field(default_factory=list)
    exhausted: bool = False
    groups_found: int = 0
    largest_group: int = 0
