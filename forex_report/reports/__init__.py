"""CSV and HTML report artifacts."""

from forex_report.reports.csv_writer import read_csv, render_csv, write_csv
from forex_report.reports.html_exporter import render_html, write_html

__all__ = ["read_csv", "render_csv", "write_csv", "render_html", "write_html"]
