"""Utility functions for HeterogramPy."""

from heterogrampy.utils.constants import Constants
from heterogrampy.utils.helpers import expand_file_path, write_file_safely
from heterogrampy.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "expand_file_path",
    "setup_logger",
    "write_file_safely",
]
