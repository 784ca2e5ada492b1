"""Processing pipeline for HeterogramPy."""

from heterogrampy.processing.pipeline import run_pipeline

__all__ = ["run_pipeline"]
