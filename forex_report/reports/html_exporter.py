"""Export the report as a self-contained HTML page."""

from html import escape
from pathlib import Path

from forex_report.indicators import format_rate
from forex_report.models import Report
from forex_report.reports._files import replace_file


def render_html(report: Report) -> str:
    """Render the HTML report with one table row per observation."""
    pair = report.pair
    table = report.series.to_frame().to_html(index=False, border=1, escape=True)
    average = f"{format_rate(report.aggregate.mean)} {pair.label}"

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Exchange Rate Report - {escape(pair.label)}</title>
  </head>
  <body>
    <h1>Exchange Rate Report: {escape(pair.label)}</h1>
{table}
    <h2>Average Exchange Rate</h2>
    <p><strong>Average Exchange Rate:</strong> {escape(average)}</p>
    <p>Observations: {report.aggregate.sample_count}</p>
  </body>
</html>
"""


def write_html(report: Report, destination: Path | str) -> Path:
    """Write the HTML report, overwriting destination."""
    return replace_file(destination, render_html(report))
