"""Stage 3: Generation-by-generation group expansion with multiprocessing support.

Generation one holds a singleton group for every registered word. Each step
extends every group of the current generation by every word that fits,
producing the next generation, until a generation comes out empty. Groups are
only extended with words later than all their members, so every set of words
is built exactly once, in increasing id order.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from multiprocessing import Pool
import random
import time
from typing import Any

from loguru import logger
from tqdm import tqdm

from heterogrampy.core import AdjacencyIndex, Config, Group, WordRegistry, expand_group, singletons
from heterogrampy.processing.stages.data_models import (
    ExpansionResult,
    GenerationSummary,
    IndexData,
)
from heterogrampy.processing.stages.worker_context import (
    WorkerContext,
    get_worker_context,
    init_worker,
)
from heterogrampy.reports.helpers import sample_groups
from heterogrampy.utils import Constants


@dataclass(frozen=True)
class Generation:
    """All groups of one length."""

    index: int
    groups: list[Group]


def expand_group_worker(group: Group) -> list[Group]:
    """Worker function for multiprocessing.

    Args:
        group: Group to extend

    Returns:
        Every one-word extension of the group
    """
    context = get_worker_context()
    return expand_group(group, context.words, context.adjacency)


class GroupExpander:
    """Drives the fixpoint search over generations of groups.

    With more than one job, a worker pool is started on ``__enter__`` and kept
    for every generation; each worker receives the word list and adjacency
    index once. Results are gathered in input order, so the output does not
    depend on the number of workers.
    """

    def __init__(
        self,
        registry: WordRegistry,
        adjacency: AdjacencyIndex,
        jobs: int = 1,
        chunk_size: int = Constants.DEFAULT_CHUNK_SIZE,
        verbose: bool = False,
    ) -> None:
        self.registry = registry
        self.adjacency = adjacency
        self.jobs = jobs
        self.chunk_size = chunk_size
        self.verbose = verbose
        self._pool: Any = None

    def __enter__(self) -> "GroupExpander":
        if self.jobs > 1:
            context = WorkerContext.from_registry(self.registry, self.adjacency)
            self._pool = Pool(
                processes=self.jobs,
                initializer=init_worker,
                initargs=(context,),
            )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._pool is not None:
            if exc_type is None:
                self._pool.close()
            else:
                self._pool.terminate()
            self._pool.join()
            self._pool = None

    def _expand_all(self, groups: list[Group]) -> Iterable[list[Group]]:
        if self._pool is not None:
            return self._pool.imap(expand_group_worker, groups, chunksize=self.chunk_size)
        return (expand_group(group, self.registry.words, self.adjacency) for group in groups)

    def next_generation(self, groups: list[Group]) -> list[Group]:
        """Extend every group by one word.

        Returns only after every group has been processed.
        """
        results = self._expand_all(groups)

        if self.verbose and groups:
            results = tqdm(
                results,
                total=len(groups),
                desc=f"Extending groups of length {groups[0].length}",
                unit="group",
                leave=False,
            )

        next_groups: list[Group] = []
        for extended in results:
            next_groups.extend(extended)
        return next_groups

    def iter_generations(self) -> Iterator[Generation]:
        """Yield generations from singletons up to and including the first empty one."""
        groups = singletons(self.registry.words)
        index = 1
        while True:
            yield Generation(index=index, groups=groups)
            if not groups:
                return
            groups = self.next_generation(groups)
            index += 1


def _log_generation(summary: GenerationSummary) -> None:
    logger.info(f"{summary.count} groups of length {summary.index}")
    if summary.sample:
        logger.info("here is a sampling:")
        for line in summary.sample:
            logger.info(f"  {line}")


def expand_groups(
    index_data: IndexData,
    config: Config,
    verbose: bool = False,
) -> ExpansionResult:
    """Find every heterogrammic group of ``config.group_size`` words.

    Runs generations until one is empty, or until the target generation when
    ``config.stop_at_target`` is set. Generation ``k`` only depends on
    generation ``k - 1``, so stopping there loses no groups of the target size.

    Args:
        index_data: Registry and adjacency index from the index stage
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        ExpansionResult with the target-size groups and per-generation summaries
    """
    start_time = time.time()
    rng = random.Random(config.seed)

    if verbose and config.jobs > 1:
        logger.info(f"  Using {config.jobs} parallel workers")

    generations: list[GenerationSummary] = []
    target_groups: list[Group] = []
    exhausted = False

    with GroupExpander(
        index_data.registry,
        index_data.adjacency,
        jobs=config.jobs,
        chunk_size=config.chunk_size,
        verbose=verbose,
    ) as expander:
        generation_start = time.time()
        for generation in expander.iter_generations():
            summary = GenerationSummary(
                index=generation.index,
                count=len(generation.groups),
                elapsed_time=time.time() - generation_start,
                sample=sample_groups(generation.groups, config.sample_size, rng),
            )
            generations.append(summary)
            _log_generation(summary)

            if not generation.groups:
                exhausted = True
            if generation.index == config.group_size:
                target_groups = generation.groups
                if config.stop_at_target:
                    break
            generation_start = time.time()

    logger.debug(
        f"Search stopped after {len(generations)} generations "
        f"({'fixpoint reached' if exhausted else 'target reached'})"
    )

    return ExpansionResult(
        group_size=config.group_size,
        groups=target_groups,
        generations=generations,
        exhausted=exhausted,
        elapsed_time=time.time() - start_time,
    )
