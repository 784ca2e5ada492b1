"""Report generation for HeterogramPy."""

from .core import create_report_directory, generate_reports
from .data import GenerationRecord, ReportData
from .helpers import format_time, sample_groups, write_report_header
from .output import format_groups, write_groups

__all__ = [
    "GenerationRecord",
    "ReportData",
    "create_report_directory",
    "format_groups",
    "format_time",
    "generate_reports",
    "sample_groups",
    "write_groups",
    "write_report_header",
]
