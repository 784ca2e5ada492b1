"""Summary and statistics report generation."""

from pathlib import Path

from heterogrampy.reports.data import ReportData
from heterogrampy.reports.helpers import format_time, write_report_header, write_subsection_header
from heterogrampy.utils.helpers import write_file_safely


def generate_summary_report(data: ReportData, report_dir: Path) -> None:
    """Generate summary report."""
    filepath = report_dir / "summary.txt"
    total_time = sum(data.stage_times.values())
    stats = data.filter_stats

    def write_summary_content(f):
        write_report_header(f, "HETEROGRAMMIC GROUP SEARCH SUMMARY")

        write_subsection_header(f, "WORD SOURCES", width=70)
        for source, count in data.source_counts.items():
            f.write(f"{source + ':':<36}{count:,}\n")
        f.write(f"Tokens read:                        {stats.total:,}\n")
        f.write(f"Rejected (wrong length):            {stats.wrong_length:,}\n")
        f.write(f"Rejected (outside alphabet):        {stats.outside_alphabet:,}\n")
        f.write(f"Rejected (repeated letters):        {stats.repeated_letters:,}\n")
        f.write(f"Rejected (duplicates):              {stats.duplicates:,}\n")
        f.write(f"Candidate words:                    {data.candidate_words:,}\n\n")

        write_subsection_header(f, "INDEX", width=70)
        f.write(f"Anagram classes:                    {data.anagram_classes:,}\n")
        f.write(f"Heterogrammic pairs:                {data.adjacency_edges:,}\n\n")

        write_subsection_header(f, "GENERATIONS", width=70)
        for record in data.generations:
            f.write(
                f"Length {record.index:<4} {record.count:>16,} groups "
                f"{format_time(record.elapsed_time):>12}\n"
            )
        status = "fixpoint reached" if data.exhausted else "stopped at target"
        f.write(f"Search:                             {status}\n")
        label = f"Groups of {data.group_size} words:"
        f.write(f"{label:<36}{data.groups_found:,}\n")
        f.write(f"Largest group found:                {data.largest_group:,} words\n\n")

        if data.stage_times:
            write_subsection_header(f, "TIMING BREAKDOWN", width=70)
            for stage, duration in data.stage_times.items():
                pct = (duration / total_time * 100) if total_time > 0 else 0
                f.write(f"{stage:<35} {format_time(duration):>12} ({pct:>5.1f}%)\n")
            f.write("-" * 70 + "\n")
            f.write(f"{'Total':<35} {format_time(total_time):>12}\n")

    write_file_safely(filepath, write_summary_content, "writing summary report")


def generate_generations_csv(data: ReportData, report_dir: Path) -> None:
    """Generate machine-readable per-generation statistics."""
    filepath = report_dir / "generations.csv"

    def write_csv_content(f):
        f.write("length,groups,seconds\n")
        for record in data.generations:
            f.write(f"{record.index},{record.count},{record.elapsed_time:.3f}\n")

    write_file_safely(filepath, write_csv_content, "writing generations report")
