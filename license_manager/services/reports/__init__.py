"""Report renderers for dependency licenses."""

from .csv_report import render_csv_report, write_csv_report
from .formatting import format_url
from .html_report import render_html_report, write_html_report
from .json_report import build_license_report, render_json_report, write_json_report
from .summary_report import (
    SUMMARY_FILENAME,
    LicenseSummary,
    group_by_license,
    render_summary_report,
    write_summary_report,
)

__all__ = [
    "format_url",
    "render_html_report",
    "write_html_report",
    "build_license_report",
    "render_json_report",
    "write_json_report",
    "render_csv_report",
    "write_csv_report",
    "SUMMARY_FILENAME",
    "LicenseSummary",
    "group_by_license",
    "render_summary_report",
    "write_summary_report",
]
