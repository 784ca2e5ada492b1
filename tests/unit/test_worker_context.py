"""Tests for worker context without global state."""

from multiprocessing import Pool

import pytest

from heterogrampy.core import AdjacencyIndex, Group, WordRegistry
from heterogrampy.processing.stages.group_expansion import GroupExpander, expand_group_worker
from heterogrampy.processing.stages.worker_context import (
    WorkerContext,
    get_worker_context,
    init_worker,
)


def _context(words: list[str]) -> WorkerContext:
    registry = WordRegistry.from_words(words, alphabet="abcdef")
    return WorkerContext.from_registry(registry, AdjacencyIndex.build(registry.words))


# Module-level worker functions (needed for multiprocessing)
def _word_count(_):
    """Worker that returns the number of words in its context."""
    return len(get_worker_context().words)


class TestWorkerContextBehavior:
    """Tests for WorkerContext behavior."""

    def test_context_can_be_created_from_registry(self):
        """Workers need context created from the registry and its index."""
        registry = WordRegistry.from_words(["ab", "cd"], alphabet="abcdef")
        context = WorkerContext.from_registry(registry, AdjacencyIndex.build(registry.words))
        assert context.words == registry.words

    @pytest.mark.slow
    def test_expander_pool_workers_receive_registry_context(self):
        """A multi-job expander hands every word to its workers."""
        registry = WordRegistry.from_words(["ab", "cd", "ef"], alphabet="abcdef")
        adjacency = AdjacencyIndex.build(registry.words)
        with GroupExpander(registry, adjacency, jobs=2, chunk_size=1) as expander:
            result = expander._pool.map(_word_count, [1])[0]
        assert result == 3

    def test_worker_expands_groups_from_context(self):
        """The worker function reads words and adjacency from its context."""
        context = _context(["ab", "cd", "ef"])
        init_worker(context)
        children = expand_group_worker(Group.singleton(context.words[0]))
        assert [str(child) for child in children] == ["cd ab ", "ef ab "]


class TestMultiprocessingBehavior:
    """Tests for multiprocessing behavior without globals."""

    @pytest.mark.slow
    def test_workers_can_process_using_context(self):
        """Workers must be able to access and use context data."""
        context = _context(["ab", "cd", "ef"])

        with Pool(processes=2, initializer=init_worker, initargs=(context,)) as pool:
            result = pool.map(_word_count, [1])[0]

        assert result == 3

    @pytest.mark.slow
    def test_sequential_pools_use_their_own_context(self):
        """Different pool instances must not interfere with each other."""
        with Pool(processes=2, initializer=init_worker, initargs=(_context(["ab"]),)) as pool:
            _ = pool.map(_word_count, [1])[0]

        with Pool(
            processes=2, initializer=init_worker, initargs=(_context(["ab", "cd"]),)
        ) as pool:
            result2 = pool.map(_word_count, [1])[0]

        assert result2 == 2

    def test_accessing_context_before_init_fails_safely(self):
        """Accessing context before initialization should provide clear error."""
        from heterogrampy.processing.stages import worker_context

        if hasattr(worker_context._worker_context, "value"):
            del worker_context._worker_context.value
        with pytest.raises(RuntimeError, match="Worker context not initialized"):
            get_worker_context()
