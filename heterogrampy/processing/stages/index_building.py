"""Stage 2: Anagram reduction, word registry and adjacency index."""

import time

from loguru import logger
from tqdm import tqdm

from heterogrampy.core import AdjacencyIndex, Config, WordRegistry, forward_neighbours
from heterogrampy.processing.stages.data_models import DictionaryData, IndexData


def build_index(dict_data: DictionaryData, config: Config, verbose: bool = False) -> IndexData:
    """Register one word per anagram class and index heterogrammic pairs.

    Args:
        dict_data: Candidate words from the loading stage
        config: Configuration object
        verbose: Whether to show a progress bar

    Returns:
        IndexData with the registry and its adjacency index
    """
    start_time = time.time()

    registry = WordRegistry.from_words(dict_data.words, config.alphabet)
    if verbose:
        logger.info(f"  Found {len(registry)} anagrammic equivalence classes")

    words = registry.words
    words_iter = tqdm(words, desc="Indexing words", unit="word") if verbose else words
    adjacency = AdjacencyIndex(forward_neighbours(word, words) for word in words_iter)

    logger.debug(f"  Adjacency index holds {adjacency.edge_count()} heterogrammic pairs")

    return IndexData(
        registry=registry,
        adjacency=adjacency,
        elapsed_time=time.time() - start_time,
    )
