"""Pipeline stage execution functions."""

from loguru import logger

from heterogrampy.core import Config
from heterogrampy.processing.stages import (
    DictionaryData,
    ExpansionResult,
    IndexData,
    build_index,
    expand_groups,
    load_dictionaries,
)
from heterogrampy.reports import GenerationRecord, ReportData, format_groups, write_groups


def run_stage_1_load_words(
    config: Config, verbose: bool, report_data: ReportData | None
) -> DictionaryData:
    """Run Stage 1: Load and filter candidate words.

    Args:
        config: Configuration object
        verbose: Whether to show verbose output
        report_data: Optional report data to populate

    Returns:
        Dictionary data
    """
    if verbose:
        logger.info("Stage 1: Loading words...")
    dict_data = load_dictionaries(config, verbose)

    if report_data:
        report_data.stage_times["Loading words"] = dict_data.elapsed_time
        report_data.source_counts = dict(dict_data.source_counts)
        report_data.filter_stats = dict_data.filter_stats
        report_data.candidate_words = len(dict_data.words)

    if verbose:
        logger.info(f"✓ Loaded {len(dict_data.words)} candidate words")
        logger.info("")

    return dict_data


def run_stage_2_build_index(
    dict_data: DictionaryData,
    config: Config,
    verbose: bool,
    report_data: ReportData | None,
) -> IndexData:
    """Run Stage 2: Reduce anagrams and build the adjacency index.

    Args:
        dict_data: Dictionary data
        config: Configuration object
        verbose: Whether to show verbose output
        report_data: Optional report data to populate

    Returns:
        Index data
    """
    if verbose:
        logger.info("Stage 2: Building adjacency index...")
    index_data = build_index(dict_data, config, verbose)

    if report_data:
        report_data.stage_times["Building index"] = index_data.elapsed_time
        report_data.anagram_classes = len(index_data.registry)
        report_data.adjacency_edges = index_data.adjacency.edge_count()

    if verbose:
        logger.info(
            f"✓ Indexed {len(index_data.registry)} words "
            f"with {index_data.adjacency.edge_count()} heterogrammic pairs"
        )
        logger.info("")

    return index_data


def run_stage_3_expand_groups(
    index_data: IndexData,
    config: Config,
    verbose: bool,
    report_data: ReportData | None,
) -> ExpansionResult:
    """Run Stage 3: Grow groups generation by generation.

    Args:
        index_data: Index data
        config: Configuration object
        verbose: Whether to show verbose output
        report_data: Optional report data to populate

    Returns:
        Expansion result
    """
    if verbose:
        logger.info(f"Stage 3: Growing groups toward {config.group_size} words...")
    expansion = expand_groups(index_data, config, verbose)

    if report_data:
        report_data.stage_times["Growing groups"] = expansion.elapsed_time
        report_data.group_size = expansion.group_size
        report_data.generations = [
            GenerationRecord(index=g.index, count=g.count, elapsed_time=g.elapsed_time)
            for g in expansion.generations
        ]
        report_data.exhausted = expansion.exhausted
        report_data.groups_found = len(expansion.groups)
        report_data.largest_group = expansion.largest_group_size

    if verbose:
        logger.info(f"✓ Found {len(expansion.groups)} groups of {config.group_size} words")
        logger.info("")

    return expansion


def run_stage_4_output(
    expansion: ExpansionResult,
    index_data: IndexData,
    config: Config,
    verbose: bool,
) -> list[str]:
    """Run Stage 4: Write the groups of the target size.

    Args:
        expansion: Expansion result
        index_data: Index data (for anagram expansion)
        config: Configuration object
        verbose: Whether to show verbose output

    Returns:
        The rendered lines
    """
    if verbose:
        logger.info("Stage 4: Writing groups...")

    lines = format_groups(expansion.groups, index_data.registry, config.expand_anagrams)
    write_groups(lines, config.output)

    if verbose:
        destination = config.output or "stdout"
        logger.info(f"✓ Wrote {len(lines)} lines to {destination}")
        logger.info("")

    return lines
