"""Report generation for the group search pipeline."""

from datetime import datetime
from pathlib import Path

from loguru import logger

from heterogrampy.reports.data import ReportData
from heterogrampy.reports.summary import generate_generations_csv, generate_summary_report


def create_report_directory(reports_path: str) -> Path:
    """Create a timestamped report directory.

    Args:
        reports_path: Base path for reports directory

    Returns:
        Path to the created report directory
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir = Path(reports_path) / timestamp
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def generate_reports(
    data: ReportData,
    reports_path: str | Path,
    verbose: bool = False,
    report_dir: Path | None = None,
) -> Path:
    """Generate all reports in a timestamped directory.

    Args:
        data: Report data collected during pipeline execution
        reports_path: Base path for reports directory (used if report_dir is None)
        verbose: Whether to print progress messages
        report_dir: Optional pre-created report directory

    Returns:
        Path to the report directory
    """
    if report_dir is None:
        report_dir = create_report_directory(str(reports_path))

    if verbose:
        logger.info(f"  Generating reports in: {report_dir}/")

    generate_summary_report(data, report_dir)
    generate_generations_csv(data, report_dir)

    if verbose:
        logger.info("  Generated 2 report files")

    return report_dir
