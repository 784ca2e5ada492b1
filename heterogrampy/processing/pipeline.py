"""Main processing pipeline orchestration."""

import time

from loguru import logger

from heterogrampy.core import Config
from heterogrampy.processing.pipeline_helpers import setup_reporting
from heterogrampy.processing.pipeline_stages import (
    run_stage_1_load_words,
    run_stage_2_build_index,
    run_stage_3_expand_groups,
    run_stage_4_output,
)
from heterogrampy.processing.stages import ExpansionResult
from heterogrampy.reports import format_time, generate_reports


def run_pipeline(config: Config) -> ExpansionResult:
    """Find and write every heterogrammic group of the configured size.

    Output is written only after the search completes, so a failure in any
    stage leaves no partial output behind.

    Args:
        config: Configuration object containing all settings

    Returns:
        Result of the group expansion stage
    """
    start_time = time.time()
    verbose = config.verbose

    report_data, report_dir = setup_reporting(config, start_time)

    # Stage 1: Load words
    dict_data = run_stage_1_load_words(config, verbose, report_data)

    # Stage 2: Anagram classes and adjacency index
    index_data = run_stage_2_build_index(dict_data, config, verbose, report_data)

    # Stage 3: Fixpoint search
    expansion = run_stage_3_expand_groups(index_data, config, verbose, report_data)

    # Stage 4: Output
    run_stage_4_output(expansion, index_data, config, verbose)

    if report_data is not None and report_dir is not None:
        generate_reports(report_data, config.reports or "", verbose, report_dir=report_dir)

    elapsed_time = time.time() - start_time
    if verbose:
        logger.info(f"Total processing time: {format_time(elapsed_time)}")

    return expansion
