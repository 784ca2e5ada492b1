"""Worker context for multiprocessing without global state."""

import threading
from dataclasses import dataclass

from heterogrampy.core import AdjacencyIndex, Word, WordRegistry


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for group expansion workers.

    Everything a worker reads while extending groups lives here; it is sent to
    each worker once, when the pool starts.

    Attributes:
        words: Registered words, indexed by id
        adjacency: Forward heterogrammic neighbours of each word
    """

    words: tuple[Word, ...]
    adjacency: AdjacencyIndex

    @classmethod
    def from_registry(cls, registry: WordRegistry, adjacency: AdjacencyIndex) -> "WorkerContext":
        """Create WorkerContext from the registry and its adjacency index.

        Args:
            registry: Registered words
            adjacency: Adjacency index built over the registry

        Returns:
            New WorkerContext instance
        """
        return cls(words=tuple(registry.words), adjacency=adjacency)


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize worker process with context in thread-local storage.

    Args:
        context: WorkerContext to store in thread-local storage
    """
    _worker_context.value = context


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Returns:
        WorkerContext for this worker

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e
