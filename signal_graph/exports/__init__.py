"""
Exports: CSV of the current selection and a JSON evaluation report.
"""

from signal_graph.exports.csv_export import csv_filename, render_csv, write_csv
from signal_graph.exports.report_export import build_report, report_filename, write_report

__all__ = [
    "csv_filename",
    "render_csv",
    "write_csv",
    "build_report",
    "report_filename",
    "write_report",
]
