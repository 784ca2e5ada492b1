"""HeterogramPy - heterogrammic word group search.

Find every group of same-length words in which no letter appears twice.
"""

from heterogrampy.core import Config, Group, WordRegistry, load_config
from heterogrampy.processing import run_pipeline
from heterogrampy.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Group",
    "WordRegistry",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
